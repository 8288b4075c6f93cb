import os
from typing import List, Optional

from .constants import PROJECT_EXTENSION
from .errors import ScattError
from .project import ProjectModel
from .report import report_path_for, write_report


def find_project_files(directory: str, extension: str = PROJECT_EXTENSION) -> List[str]:
    """Project archives in a directory, ordered by name ignoring case."""
    if not os.path.isdir(directory):
        raise ScattError("Project directory not found", directory)
    extension = extension.lower()
    names = [
        name for name in os.listdir(directory)
        if name.lower().endswith(extension) and os.path.isfile(os.path.join(directory, name))
    ]
    names.sort(key=lambda name: (name.lower(), name))
    return [os.path.abspath(os.path.join(directory, name)) for name in names]


def analyze_directory(directory: str, extension: str = PROJECT_EXTENSION) -> List[ProjectModel]:
    return [ProjectModel.from_path(path) for path in find_project_files(directory, extension)]


def save_report(directory: str, projects: List[ProjectModel], output: Optional[str] = None) -> str:
    """Write the report for already analyzed projects and return its path.

    Defaults to <directory>/<directory name>_report.txt. OSError from the
    write is left to the caller.
    """
    report_path = output or report_path_for(directory)
    write_report(report_path, projects)
    return report_path


def generate_report(
    directory: str,
    output: Optional[str] = None,
    extension: str = PROJECT_EXTENSION,
) -> str:
    """Analyze every project in a directory and write the report.

    Returns the path of the written report.
    """
    return save_report(directory, analyze_directory(directory, extension), output)
