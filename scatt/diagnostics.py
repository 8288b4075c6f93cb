"""Diagnostic messages for the project model extractor.

Structural anomalies inside an otherwise valid project.json (malformed
children, scripts that are not [x, y, blocks] tuples, sprites without a
name) are absorbed with safe defaults. They are recorded here so the report
can still tell the user that something was skipped.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO


class DiagnosticLevel(Enum):
    """Severity level for diagnostic messages."""
    WARNING = "Warning"


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    level: DiagnosticLevel
    message: str
    project: str
    sprite: Optional[str] = None

    def __str__(self) -> str:
        loc = f"Project '{self.project}'"
        if self.sprite is not None:
            loc += f" Sprite '{self.sprite}'"
        return f"{self.level.value}: {self.message}: {loc}"


@dataclass
class DiagnosticContext:
    """Collects diagnostics while one project is being extracted."""
    project_name: str = ""
    current_sprite: Optional[str] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def set_sprite(self, sprite_name: Optional[str]) -> None:
        """Attach subsequent diagnostics to a sprite (None for the stage)."""
        self.current_sprite = sprite_name

    def add(self, level: DiagnosticLevel, message: str) -> None:
        self.diagnostics.append(Diagnostic(
            level=level,
            message=message,
            project=self.project_name,
            sprite=self.current_sprite,
        ))

    def warning(self, message: str) -> None:
        self.add(DiagnosticLevel.WARNING, message)

    def has_warnings(self) -> bool:
        return any(d.level == DiagnosticLevel.WARNING for d in self.diagnostics)

    def get_warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.level == DiagnosticLevel.WARNING]

    def print_all(self, stream: Optional[TextIO] = None) -> None:
        stream = stream or sys.stderr
        for diag in self.diagnostics:
            print(diag, file=stream)

    def summary(self) -> str:
        """Return a summary of diagnostics."""
        warnings = len(self.get_warnings())
        if warnings:
            return f"{warnings} warning{'s' if warnings != 1 else ''}"
        return "No issues"
