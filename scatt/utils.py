import os
from typing import Any, List, Optional, Union

Number = Union[int, float]


def get_list(node: Any, key: str) -> List[Any]:
    if isinstance(node, dict):
        value = node.get(key)
        if isinstance(value, list):
            return value
    return []


def get_str(node: Any, key: str) -> Optional[str]:
    if isinstance(node, dict):
        value = node.get(key)
        if isinstance(value, str):
            return value
    return None


def item_at(seq: Any, index: int, default: Any = None) -> Any:
    if isinstance(seq, list) and 0 <= index < len(seq):
        return seq[index]
    return default


def as_number(value: Any, default: Number = 0) -> Number:
    # bool is an int subclass but never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return value


def project_name_from_path(path: str) -> str:
    base = os.path.basename(os.path.normpath(path or ""))
    return os.path.splitext(base)[0] or base
