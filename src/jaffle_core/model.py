"""Data model for Jaffle Core: roles, value kinds, entries and boxes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


# ---------------------------------------------------------------------------
# Sigils
# ---------------------------------------------------------------------------

CHAINED_PREFIX = "."
CONSTANT_PREFIX = "$"
SERIALIZED_SUFFIX = "^"
MININOTATION_PREFIX = "_"
EXPRESSION_PREFIX = "="


# ---------------------------------------------------------------------------
# Role / ValueKind
# ---------------------------------------------------------------------------

class Role(Enum):
    MAIN_CALL = auto()
    CHAINED_CALL = auto()
    CONSTANT_DEF = auto()
    SERIALIZED_LITERAL = auto()
    PLAIN_VALUE = auto()


class ValueKind(Enum):
    NULL = auto()
    BOOLEAN = auto()
    NUMBER = auto()
    STRING = auto()
    MININOTATION = auto()
    EXPRESSION = auto()
    EMPTY = auto()


# Roles that open a new group when met in a sibling list
GROUP_OPENERS = frozenset({Role.MAIN_CALL, Role.CONSTANT_DEF, Role.SERIALIZED_LITERAL})


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entry:
    """Canonical tree node: a raw name, a raw value and ordered children."""

    raw_name: str = ""
    raw_value: str = ""
    children: tuple[Entry, ...] = ()


# ---------------------------------------------------------------------------
# Box — classified, grouped and (optionally) measured Entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Box:
    raw_name: str
    raw_value: str
    role: Role
    value_kind: ValueKind
    display_name: str
    display_value: str
    path: tuple[int, ...] = ()
    group_id: int = 0
    padding: int = 0
    width: int = 0
    children: tuple[Box, ...] = field(default_factory=tuple)

    @property
    def id(self) -> str:
        """Path-based identity, e.g. ``"0-2-1"``; the root is ``""``."""
        return "-".join(str(i) for i in self.path)

    def to_entry(self) -> Entry:
        return Entry(
            raw_name=self.raw_name,
            raw_value=self.raw_value,
            children=tuple(child.to_entry() for child in self.children),
        )
