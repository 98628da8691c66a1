"""Sigil classifier: raw names and raw values to roles and value kinds."""

from __future__ import annotations

import re

from .model import (
    CHAINED_PREFIX,
    CONSTANT_PREFIX,
    EXPRESSION_PREFIX,
    MININOTATION_PREFIX,
    SERIALIZED_SUFFIX,
    Role,
    ValueKind,
)


_NUMBER_RE = re.compile(r"^([+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?|[+-]?Infinity|NaN)$")


def is_number(text: str) -> bool:
    return bool(_NUMBER_RE.match(text))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_name(raw_name: str) -> Role:
    """Return the role selected by the sigils of *raw_name*.

    Rules are checked in order, first match wins:

        ""        → PLAIN_VALUE
        ".name"   → CHAINED_CALL
        "$name"   → CONSTANT_DEF
        "name^"   → SERIALIZED_LITERAL
        "name"    → MAIN_CALL
    """
    if raw_name == "":
        return Role.PLAIN_VALUE
    if raw_name.startswith(CHAINED_PREFIX):
        return Role.CHAINED_CALL
    if raw_name.startswith(CONSTANT_PREFIX):
        return Role.CONSTANT_DEF
    if raw_name.endswith(SERIALIZED_SUFFIX):
        return Role.SERIALIZED_LITERAL
    return Role.MAIN_CALL


def classify_value(raw_value: str, child_count: int = 0) -> ValueKind:
    """Return the kind of a leaf value.

    A node with children is always EMPTY, whatever its raw value. Malformed
    numbers are plain strings.
    """
    if child_count > 0:
        return ValueKind.EMPTY
    if raw_value == "":
        return ValueKind.NULL
    if raw_value.startswith(MININOTATION_PREFIX):
        return ValueKind.MININOTATION
    if raw_value.startswith(EXPRESSION_PREFIX):
        return ValueKind.EXPRESSION
    if is_number(raw_value):
        return ValueKind.NUMBER
    if raw_value in ("true", "false"):
        return ValueKind.BOOLEAN
    return ValueKind.STRING


# ---------------------------------------------------------------------------
# Display stripping
# ---------------------------------------------------------------------------

def display_name(raw_name: str) -> str:
    if raw_name.startswith((CHAINED_PREFIX, CONSTANT_PREFIX)):
        return raw_name[1:]
    if raw_name.endswith(SERIALIZED_SUFFIX):
        return raw_name[:-1]
    return raw_name


def display_value(raw_value: str) -> str:
    if raw_value.startswith((MININOTATION_PREFIX, EXPRESSION_PREFIX)):
        return raw_value[1:]
    return raw_value
