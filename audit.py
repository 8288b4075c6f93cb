#!/usr/bin/env python3
"""
Scatt project auditor

Reads every Scratch 2 project (.sb2) in a directory and writes a plain text
report with sprite names, script counts and script lengths per sprite, stage
scripts and the number of global variables.

Usage:
    python audit.py <directory> [--output REPORT] [--extension .sb2] [--verbose]

The report is written to <directory>/<directory name>_report.txt unless
--output is given. Projects that cannot be read are listed with their error.
"""

import argparse
import sys

from scatt.batch import analyze_directory, save_report
from scatt.constants import PROJECT_EXTENSION
from scatt.errors import ScattError


def error(msg: str) -> None:
    """Print an error message and exit."""
    print(f"Error: {msg}", file=sys.stderr)
    sys.exit(1)


def warn(msg: str) -> None:
    print(f"Warning: {msg}", file=sys.stderr)


def info(msg: str) -> None:
    print(msg)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Report structural metrics for a directory of Scratch 2 projects.")
    parser.add_argument("directory", help="Directory containing the project files")
    parser.add_argument("--output", default=None, help="Report path (default: <directory>/<name>_report.txt)")
    parser.add_argument("--extension", default=PROJECT_EXTENSION, help="Project file extension to collect")
    parser.add_argument("--verbose", action="store_true", help="Print skipped or malformed entries for each project")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    try:
        projects = analyze_directory(args.directory, args.extension)
    except ScattError as exc:
        error(str(exc))

    if not projects:
        warn(f"No {args.extension} files found in {args.directory}")

    for project in projects:
        if project.error is not None:
            warn(f"{project.name}: {project.get_error_message()}")
        elif args.verbose:
            project.diagnostic_context.print_all()

    try:
        report_path = save_report(args.directory, projects, args.output)
    except OSError as exc:
        error(f"Could not write report: {exc}")
    info(f"Report written to {report_path}")


if __name__ == "__main__":
    main()
