"""Project model for one Scratch 2 project.

A project is built eagerly from its project.json: the stage's own scripts
are extracted, and every child carrying ``spriteInfo`` is registered as a
sprite. Loading never raises for a bad archive. The three failure kinds
(unreadable archive, missing manifest, corrupt manifest) come back as a
:class:`ParseError`, and :meth:`ProjectModel.from_path` folds that into an
empty model so a batch report can still list the project.

Usage:
    project = ProjectModel.from_path("Wizard.sb2")
    if project.error is None:
        for name in project.get_sprite_names():
            print(name, project.get_script_lengths_for_sprite(name))
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .blocks import Script, extract_scripts
from .constants import CHILDREN_KEY, VARIABLE_NAME_KEY, VARIABLES_KEY
from .diagnostics import Diagnostic, DiagnosticContext
from .errors import ArchiveReadError, NoManifestError
from .loader import load_manifest_text
from .sprites import SpriteRegistry
from .utils import get_list, get_str, project_name_from_path


class ErrorState(Enum):
    """Outcome of building a project; everything but NONE is terminal."""
    NONE = "No error"
    NO_MANIFEST = "Archive contains no project.json"
    CORRUPT_MANIFEST = "project.json is not valid JSON"
    IO_FAILURE = "Could not read project archive"


@dataclass(frozen=True)
class ParseError:
    """Why a project could not be modelled."""
    name: str
    state: ErrorState
    detail: str = ""

    @property
    def message(self) -> str:
        if self.detail:
            return f"{self.state.value}: {self.detail}"
        return self.state.value


class ProjectModel:
    """Sprites, scripts and variables of one project.

    Construct directly from an already parsed document (no archive
    involved), or from an archive path with :meth:`from_path`.
    """

    def __init__(self, name: str, document: Optional[Dict[str, Any]]) -> None:
        self.name = name
        self.document = document
        self.error: Optional[ParseError] = None
        self._diag = DiagnosticContext(project_name=name)
        if document is None:
            self.stage_scripts: List[Script] = []
            self.sprites = SpriteRegistry(name)
            return
        self.stage_scripts = extract_scripts(document, self._diag)
        self.sprites = SpriteRegistry.from_children(
            get_list(document, CHILDREN_KEY), name, self._diag
        )

    @classmethod
    def failed(cls, error: ParseError) -> "ProjectModel":
        """An empty model that only carries its name and error."""
        model = cls(error.name, None)
        model.error = error
        return model

    @classmethod
    def from_path(cls, path: str) -> "ProjectModel":
        result = load_project(path)
        if isinstance(result, ParseError):
            return cls.failed(result)
        return result

    @property
    def error_state(self) -> ErrorState:
        return self.error.state if self.error is not None else ErrorState.NONE

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diag.diagnostics)

    @property
    def diagnostic_context(self) -> DiagnosticContext:
        return self._diag

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_sprite_names(self) -> List[str]:
        return self.sprites.names()

    def get_script_count_for_sprite(self, sprite_name: str) -> int:
        """Number of scripts on a sprite; raises UnknownSpriteError."""
        return self.sprites.get(sprite_name).script_count

    def get_script_lengths_for_sprite(self, sprite_name: str) -> List[int]:
        """Top-level block count of each script, in project order."""
        return self.sprites.get(sprite_name).script_lengths

    def get_scripts_for_sprite(self, sprite_name: str) -> List[Script]:
        return list(self.sprites.get(sprite_name).scripts)

    def get_scripts_for_stage(self) -> List[Script]:
        return list(self.stage_scripts)

    def get_stage_script_lengths(self) -> List[int]:
        return [script.length for script in self.stage_scripts]

    def get_global_variable_count(self) -> int:
        # Stage variables are optional in the format
        return len(get_list(self.document, VARIABLES_KEY))

    def get_global_variable_names(self) -> List[str]:
        names = []
        for entry in get_list(self.document, VARIABLES_KEY):
            name = get_str(entry, VARIABLE_NAME_KEY)
            if name is not None:
                names.append(name)
        return names

    def get_error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def __repr__(self) -> str:
        if self.error is not None:
            return f"ProjectModel({self.name!r}, error={self.error_state.name})"
        return f"ProjectModel({self.name!r}, sprites={len(self.sprites)})"


ProjectResult = Union[ProjectModel, ParseError]


def parse_project(name: str, text: str) -> ProjectResult:
    """Build a project from manifest text."""
    try:
        document = json.loads(text)
    except ValueError as exc:
        return ParseError(name, ErrorState.CORRUPT_MANIFEST, str(exc))
    except RecursionError:
        return ParseError(name, ErrorState.CORRUPT_MANIFEST, "nesting too deep")
    if not isinstance(document, dict):
        return ParseError(
            name,
            ErrorState.CORRUPT_MANIFEST,
            f"top-level value is a {type(document).__name__}, not an object",
        )
    return ProjectModel(name, document)


def load_project(path: str) -> ProjectResult:
    """Build a project from an archive path; failures come back as data."""
    name = project_name_from_path(path)
    try:
        text = load_manifest_text(path)
    except ArchiveReadError as exc:
        return ParseError(name, ErrorState.IO_FAILURE, str(exc))
    except NoManifestError as exc:
        return ParseError(name, ErrorState.NO_MANIFEST, str(exc))
    except UnicodeDecodeError as exc:
        return ParseError(name, ErrorState.CORRUPT_MANIFEST, str(exc))
    return parse_project(name, text)
