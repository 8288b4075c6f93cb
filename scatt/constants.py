"""Field names and defaults of the Scratch 2 project format."""

from typing import Tuple

# Archive layout
MANIFEST_NAME = "project.json"
PROJECT_EXTENSION = ".sb2"
REPORT_SUFFIX = "_report.txt"

# Stage-level keys
CHILDREN_KEY = "children"
SCRIPTS_KEY = "scripts"
VARIABLES_KEY = "variables"

# Sprite keys; stage monitors carry neither spriteInfo nor objName
SPRITE_MARKER_KEY = "spriteInfo"
SPRITE_NAME_KEY = "objName"
VARIABLE_NAME_KEY = "name"

# A script is [x, y, [block, ...]]
SCRIPT_X_INDEX = 0
SCRIPT_Y_INDEX = 1
SCRIPT_BLOCKS_INDEX = 2
DEFAULT_POSITION: Tuple[float, float] = (0, 0)
