import json
import os
import zipfile
from typing import Any, Dict, List, Optional

import pytest


def make_sprite(name: Optional[str], scripts: Optional[List[Any]] = None, **extra: Any) -> Dict[str, Any]:
    sprite: Dict[str, Any] = {"spriteInfo": {}, "scratchX": 0, "scratchY": 0}
    if name is not None:
        sprite["objName"] = name
    if scripts is not None:
        sprite["scripts"] = scripts
    sprite.update(extra)
    return sprite


def make_monitor(param: str = "score") -> Dict[str, Any]:
    return {"target": "Stage", "cmd": "getVar:", "param": param, "visible": True}


def write_sb2(path: str, manifest: Any = None, entries: Optional[Dict[str, bytes]] = None) -> str:
    """Write a .sb2 archive; a dict/list manifest is dumped as project.json."""
    with zipfile.ZipFile(path, "w") as archive:
        if manifest is not None:
            payload = manifest if isinstance(manifest, (str, bytes)) else json.dumps(manifest)
            archive.writestr("project.json", payload)
        for name, data in (entries or {}).items():
            archive.writestr(name, data)
    return path


@pytest.fixture
def wizard_document() -> Dict[str, Any]:
    return {
        "objName": "Stage",
        "variables": [
            {"name": "score", "value": 0, "isPersistent": False},
            {"name": "lives", "value": 3, "isPersistent": False},
        ],
        "scripts": [
            [20, 30, [["whenGreenFlag"], ["setVar:to:", "score", 0]]],
        ],
        "children": [
            make_sprite("Wizard", [
                [10, 15, [
                    ["whenGreenFlag"],
                    ["doForever", [["forward:", 10], ["bounceOffEdge"]]],
                ]],
                [200.5, -40, [["whenKeyPressed", "space"], ["say:", "Hi"], ["nextCostume"]]],
            ]),
            make_monitor("score"),
            make_sprite("Bat"),
            make_sprite("Ghost", [[0, 0, []]]),
        ],
    }


@pytest.fixture
def project_dir(tmp_path, wizard_document):
    write_sb2(os.path.join(tmp_path, "wizard.sb2"), wizard_document)
    write_sb2(os.path.join(tmp_path, "Broken.sb2"), "{not json")
    write_sb2(os.path.join(tmp_path, "empty.sb2"), None, {"readme.txt": b"nothing here"})
    with open(os.path.join(tmp_path, "notes.txt"), "w", encoding="utf-8") as handle:
        handle.write("not a project")
    return tmp_path


def write_damaged_sb2(path: str) -> str:
    """Write a .sb2 whose deflated project.json has a broken block header."""
    manifest = json.dumps({"children": [make_sprite(f"Sprite{i}") for i in range(50)]})
    with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("project.json", manifest)
    with zipfile.ZipFile(path) as archive:
        info = archive.getinfo("project.json")
    with open(path, "r+b") as handle:
        handle.seek(info.header_offset + 26)
        name_len = int.from_bytes(handle.read(2), "little")
        extra_len = int.from_bytes(handle.read(2), "little")
        handle.seek(name_len + extra_len, 1)
        # 0xff sets the reserved deflate block type
        handle.write(b"\xff" * 8)
    return path
