"""Grouping engine: thread siblings into main-call + chained-modifier groups."""

from __future__ import annotations

from typing import Sequence

from .classifier import classify_name, classify_value, display_name, display_value
from .model import GROUP_OPENERS, Box, Entry


def group(children: Sequence[Entry]) -> list[tuple[Entry, int]]:
    """Assign a group id to each sibling, in source order.

    The first sibling always opens group 0. Each later main call, constant
    definition or serialized literal opens the next group; chained calls and
    plain values join the group currently open, including a chained call
    that comes before any main call.
    """
    grouped: list[tuple[Entry, int]] = []
    current = -1
    for child in children:
        if current == -1 or classify_name(child.raw_name) in GROUP_OPENERS:
            current += 1
        grouped.append((child, current))
    return grouped


def build_tree(entry: Entry, path: tuple[int, ...] = (), group_id: int = 0) -> Box:
    """Classify *entry* and its whole subtree into a Box tree.

    Group numbering restarts inside every child list.
    """
    children = tuple(
        build_tree(child, path + (i,), child_group)
        for i, (child, child_group) in enumerate(group(entry.children))
    )
    return Box(
        raw_name=entry.raw_name,
        raw_value=entry.raw_value,
        role=classify_name(entry.raw_name),
        value_kind=classify_value(entry.raw_value, len(entry.children)),
        display_name=display_name(entry.raw_name),
        display_value=display_value(entry.raw_value),
        path=path,
        group_id=group_id,
        children=children,
    )


def split_groups(children: Sequence[Box]) -> list[list[Box]]:
    """Split an already grouped sibling list into its groups, in order."""
    groups: list[list[Box]] = []
    for child in children:
        if not groups or groups[-1][0].group_id != child.group_id:
            groups.append([])
        groups[-1].append(child)
    return groups


def group_members(parent: Box | None, box: Box) -> list[Box]:
    """Return the siblings of *box* that share its group (itself included)."""
    if parent is None:
        return [box]
    return [child for child in parent.children if child.group_id == box.group_id]
