"""Sprite registry built from the stage's children array.

The children of a Scratch 2 stage mix sprites with stage monitors (variable
watchers, list viewers). Only sprites carry a ``spriteInfo`` object, so each
child is classified once into a :class:`SpriteChild` or :class:`MonitorChild`
and never probed again afterwards.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .blocks import Script, extract_scripts
from .constants import SPRITE_MARKER_KEY, SPRITE_NAME_KEY
from .diagnostics import DiagnosticContext
from .errors import UnknownSpriteError
from .utils import get_str


@dataclass(frozen=True)
class SpriteChild:
    name: str
    raw: Dict[str, Any]


@dataclass(frozen=True)
class MonitorChild:
    raw: Dict[str, Any]


StageChild = Union[SpriteChild, MonitorChild]


def classify_child(raw: Any, diag: Optional[DiagnosticContext] = None) -> Optional[StageChild]:
    """Return the variant for one child entry, or None if it must be skipped."""
    if not isinstance(raw, dict):
        if diag is not None:
            diag.warning(f"Skipped child entry of type {type(raw).__name__}")
        return None

    if SPRITE_MARKER_KEY not in raw:
        return MonitorChild(raw=raw)

    name = get_str(raw, SPRITE_NAME_KEY)
    if name is None:
        if diag is not None:
            diag.warning(f"Skipped sprite without a usable '{SPRITE_NAME_KEY}'")
        return None
    return SpriteChild(name=name, raw=raw)


@dataclass
class SpriteNode:
    """A sprite's raw sub-document plus its extracted scripts."""
    name: str
    raw_child: Dict[str, Any]
    scripts: List[Script] = field(default_factory=list)

    @classmethod
    def from_child(cls, child: SpriteChild, diag: Optional[DiagnosticContext] = None) -> "SpriteNode":
        if diag is not None:
            diag.set_sprite(child.name)
        try:
            scripts = extract_scripts(child.raw, diag)
        finally:
            if diag is not None:
                diag.set_sprite(None)
        return cls(name=child.name, raw_child=child.raw, scripts=scripts)

    @property
    def script_count(self) -> int:
        return len(self.scripts)

    @property
    def script_lengths(self) -> List[int]:
        return [script.length for script in self.scripts]


class SpriteRegistry:
    """Name-indexed sprites of one project."""

    def __init__(self, project_name: str = "") -> None:
        self.project_name = project_name
        self._sprites: Dict[str, SpriteNode] = {}
        self.monitor_count = 0

    @classmethod
    def from_children(
        cls,
        children: List[Any],
        project_name: str = "",
        diag: Optional[DiagnosticContext] = None,
    ) -> "SpriteRegistry":
        registry = cls(project_name)
        for raw in children:
            child = classify_child(raw, diag)
            if isinstance(child, MonitorChild):
                registry.monitor_count += 1
            elif isinstance(child, SpriteChild):
                registry.add(SpriteNode.from_child(child, diag), diag)
        return registry

    def add(self, node: SpriteNode, diag: Optional[DiagnosticContext] = None) -> None:
        # Last write wins; the name keeps its first listing position
        if node.name in self._sprites and diag is not None:
            diag.warning(f"Duplicate sprite name '{node.name}', keeping the last one")
        self._sprites[node.name] = node

    def get(self, name: str) -> SpriteNode:
        try:
            return self._sprites[name]
        except KeyError:
            raise UnknownSpriteError(name, self.project_name) from None

    def names(self) -> List[str]:
        return list(self._sprites)

    def __contains__(self, name: object) -> bool:
        return name in self._sprites

    def __len__(self) -> int:
        return len(self._sprites)
