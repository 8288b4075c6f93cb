from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from .constants import (
    DEFAULT_POSITION,
    SCRIPT_BLOCKS_INDEX,
    SCRIPT_X_INDEX,
    SCRIPT_Y_INDEX,
    SCRIPTS_KEY,
)
from .diagnostics import DiagnosticContext
from .utils import Number, as_number, get_list, item_at

# One positional block record, e.g. ["doRepeat", 10, [[...], ...]].
# Passed through untouched; only counted.
BlockTuple = List[Any]


@dataclass(frozen=True)
class Script:
    """A top-level stack of blocks on a sprite or the stage."""
    x: Number = DEFAULT_POSITION[0]
    y: Number = DEFAULT_POSITION[1]
    blocks: Tuple[BlockTuple, ...] = ()

    @property
    def position(self) -> Tuple[Number, Number]:
        return (self.x, self.y)

    @property
    def length(self) -> int:
        # Top-level blocks only; nested C-block bodies are not counted
        return len(self.blocks)


def extract_script(raw: Any, diag: Optional[DiagnosticContext] = None) -> Script:
    if raw is None:
        if diag is not None:
            diag.warning("Null script entry treated as empty")
        return Script()
    if not isinstance(raw, list):
        if diag is not None:
            diag.warning(f"Script entry is a {type(raw).__name__}, not a list")
        return Script()

    x = as_number(item_at(raw, SCRIPT_X_INDEX), DEFAULT_POSITION[0])
    y = as_number(item_at(raw, SCRIPT_Y_INDEX), DEFAULT_POSITION[1])

    block_list = item_at(raw, SCRIPT_BLOCKS_INDEX)
    if not isinstance(block_list, list):
        if diag is not None:
            diag.warning(f"Script at ({x}, {y}) has no block list")
        return Script(x=x, y=y)

    return Script(x=x, y=y, blocks=tuple(block_list))


def extract_scripts(node: Any, diag: Optional[DiagnosticContext] = None) -> List[Script]:
    """Read the "scripts" array of a sprite or stage node, keeping order."""
    return [extract_script(raw, diag) for raw in get_list(node, SCRIPTS_KEY)]
