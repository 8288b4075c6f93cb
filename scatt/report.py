import os
from typing import Iterable, List

from .constants import REPORT_SUFFIX
from .project import ProjectModel

RULE = "=" * 60


def format_lengths(lengths: List[int]) -> str:
    if not lengths:
        return "none"
    return ", ".join(str(length) for length in lengths)


def format_project(project: ProjectModel) -> str:
    lines = [RULE, f"Project: {project.name}", RULE]

    if project.error is not None:
        lines.append(f"Error: {project.get_error_message()}")
        return "\n".join(lines)

    stage_lengths = project.get_stage_script_lengths()
    lines.append(f"Global variables: {project.get_global_variable_count()}")
    lines.append(f"Stage scripts: {len(stage_lengths)}")
    lines.append(f"  Script lengths: {format_lengths(stage_lengths)}")

    sprite_names = project.get_sprite_names()
    lines.append(f"Sprites: {len(sprite_names)}")
    for name in sprite_names:
        lines.append(f"  Sprite: {name}")
        lines.append(f"    Scripts: {project.get_script_count_for_sprite(name)}")
        lines.append(f"    Script lengths: {format_lengths(project.get_script_lengths_for_sprite(name))}")

    if project.diagnostic_context.has_warnings():
        lines.append(f"Notes: {project.diagnostic_context.summary()}")
    return "\n".join(lines)


def format_report(projects: Iterable[ProjectModel]) -> str:
    projects = list(projects)
    sections = [format_project(project) for project in projects]
    failed = sum(1 for project in projects if project.error is not None)
    header = f"Scatt report: {len(sections)} project{'s' if len(sections) != 1 else ''}"
    if failed:
        header += f", {failed} failed"
    return "\n\n".join([header] + sections) + "\n"


def report_path_for(directory: str) -> str:
    directory = os.path.abspath(directory)
    return os.path.join(directory, os.path.basename(directory) + REPORT_SUFFIX)


def write_report(path: str, projects: Iterable[ProjectModel]) -> None:
    text = format_report(projects)
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
