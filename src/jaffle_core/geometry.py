"""Geometry annotator: per-box padding and width for the graph renderer."""

from __future__ import annotations

from dataclasses import replace

from .grouping import group_members
from .model import Box


def annotate(tree: Box) -> Box:
    """Return a copy of *tree* with ``padding`` and ``width`` filled in.

    Sizes are counted in characters. Boxes of one group share the longest
    display name of the group so that their values line up when stacked.
    """
    return _annotate(tree, None)


def _annotate(box: Box, parent: Box | None) -> Box:
    members = group_members(parent, box)
    padding = measure_padding(box, members)
    width = max(max(measure_width(padding, member) for member in members), 0)
    return replace(
        box,
        padding=padding,
        width=width,
        children=tuple(_annotate(child, box) for child in box.children),
    )


def measure_width(padding: int, member: Box) -> int:
    # A box without a value drops the gap kept after its name
    if not member.display_value:
        return padding - 1
    return padding + len(member.display_value)


def measure_padding(box: Box, members: list[Box]) -> int:
    longest = max(len(member.display_name) for member in members)
    return longest + (1 if box.display_name else 0)
