"""Normalizer: loosely-typed YAML data to the canonical Entry tree, and back."""

from __future__ import annotations

import math
import re

from .errors import ShapeError
from .model import Entry


_INT_RE = re.compile(r"^-?\d+$")

Path = tuple[int, ...]


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

def stringify(value: object) -> str:
    """Convert a YAML scalar to its raw string form."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, str):
        return value
    return str(value)


def raw_scalar(raw_value: str) -> object:
    """Inverse of ``stringify`` for raw values that survive the trip exactly.

    Anything that would not stringify back to the same text stays a string.
    """
    if raw_value == "":
        return None
    if raw_value in ("true", "false"):
        return raw_value == "true"
    if _INT_RE.match(raw_value) and stringify(int(raw_value)) == raw_value:
        return int(raw_value)
    try:
        number = float(raw_value)
    except ValueError:
        return raw_value
    if stringify(number) == raw_value:
        return number
    return raw_value


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

def normalize(raw: object) -> Entry:
    """Build the Entry tree of a whole tune.

    The root must be a non-empty list; it becomes an unnamed Entry whose
    children are the top-level calls.
    """
    if not isinstance(raw, list):
        raise ShapeError("root must be a list of calls")
    return Entry(children=_normalize_list(raw, ()))


def _normalize_list(items: list, path: Path) -> tuple[Entry, ...]:
    if not items:
        raise ShapeError("list must not be empty", path)
    return tuple(normalize_node(item, path + (i,)) for i, item in enumerate(items))


def normalize_node(raw: object, path: Path = ()) -> Entry:
    """Normalize one raw node found at *path*."""
    if isinstance(raw, dict):
        return _normalize_mapping(raw, path)
    if isinstance(raw, list):
        return Entry(children=_normalize_list(raw, path))
    return Entry(raw_value=stringify(raw))


def _normalize_mapping(raw: dict, path: Path) -> Entry:
    if not raw:
        raise ShapeError("function must have an attribute", path)
    if len(raw) > 1:
        raise ShapeError("function attribute must be unique", path)

    (key, value), = raw.items()
    name = stringify(key)

    if isinstance(value, list):
        return Entry(raw_name=name, children=_normalize_list(value, path))
    if isinstance(value, dict):
        return Entry(raw_name=name, children=(_normalize_mapping(value, path + (0,)),))
    return Entry(raw_name=name, raw_value=stringify(value))


# ---------------------------------------------------------------------------
# to_raw — lossless inverse of normalize
# ---------------------------------------------------------------------------

def to_raw(entry: Entry, root: bool = True) -> object:
    """Rebuild the YAML-shaped data of *entry*.

    ``normalize(to_raw(e)) == e`` holds for every tree ``normalize`` produces.
    """
    if root:
        return [to_raw(child, root=False) for child in entry.children]

    if entry.children:
        value: object = [to_raw(child, root=False) for child in entry.children]
    else:
        value = raw_scalar(entry.raw_value)

    if entry.raw_name == "":
        return value
    return {entry.raw_name: value}
