import os

import pytest

import audit
from conftest import write_sb2


def test_main_writes_report(project_dir, capsys):
    audit.main([str(project_dir)])
    captured = capsys.readouterr()
    report_path = os.path.join(os.path.abspath(project_dir), os.path.basename(project_dir) + "_report.txt")
    assert f"Report written to {report_path}" in captured.out
    assert "Warning: Broken:" in captured.err
    assert "Warning: empty:" in captured.err
    assert os.path.exists(report_path)


def test_main_verbose_prints_diagnostics(tmp_path, capsys):
    write_sb2(os.path.join(tmp_path, "odd.sb2"), {"children": [None]})
    audit.main([str(tmp_path), "--verbose", "--output", os.path.join(tmp_path, "r.txt")])
    assert "Warning: Skipped child entry" in capsys.readouterr().err


def test_main_empty_directory_warns(tmp_path, capsys):
    audit.main([str(tmp_path)])
    assert "No .sb2 files found" in capsys.readouterr().err


def test_main_missing_directory_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        audit.main([os.path.join(tmp_path, "missing")])
    assert info.value.code == 1
    assert capsys.readouterr().err.startswith("Error: Project directory not found")


def test_main_unwritable_output_exits(project_dir, capsys):
    blocker = os.path.join(project_dir, "blocker.txt")
    with open(blocker, "w", encoding="utf-8") as handle:
        handle.write("a file, not a directory")
    with pytest.raises(SystemExit) as info:
        audit.main([str(project_dir), "--output", os.path.join(blocker, "report.txt")])
    assert info.value.code == 1
    assert "Error: Could not write report:" in capsys.readouterr().err
