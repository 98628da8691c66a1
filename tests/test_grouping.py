"""Tests for the grouping engine."""

from jaffle_core.grouping import build_tree, group, group_members, split_groups
from jaffle_core.model import Entry, Role, ValueKind
from jaffle_core.normalizer import normalize


def _ids(children):
    return [group_id for _, group_id in group(children)]


# ---------------------------------------------------------------------------
# group
# ---------------------------------------------------------------------------

def test_group_empty():
    assert group([]) == []

def test_group_first_sibling_is_group_zero():
    assert _ids([Entry("a")]) == [0]

def test_group_chained_joins_main():
    assert _ids([Entry("a"), Entry(".b", "2")]) == [0, 0]

def test_group_main_opens_new_group():
    assert _ids([Entry("a"), Entry(".b"), Entry("c"), Entry(".d"), Entry(".e")]) == [0, 0, 1, 1, 1]

def test_group_constant_and_serialized_open_groups():
    assert _ids([Entry("$x", "1"), Entry("y^"), Entry(".z")]) == [0, 1, 1]

def test_group_plain_values_join_open_group():
    assert _ids([Entry("a"), Entry("", "1"), Entry("", "2")]) == [0, 0, 0]

def test_group_leading_chained_attaches_to_group_zero():
    assert _ids([Entry(".b"), Entry(".c"), Entry("a")]) == [0, 0, 1]

def test_group_is_non_decreasing():
    ids = _ids([Entry(".a"), Entry("b"), Entry(""), Entry("$c"), Entry(".d"), Entry("e^")])
    assert ids == sorted(ids)
    assert ids[0] == 0

def test_group_keeps_source_order():
    children = [Entry("a"), Entry(".b"), Entry("c")]
    assert [entry for entry, _ in group(children)] == children


# ---------------------------------------------------------------------------
# build_tree
# ---------------------------------------------------------------------------

def test_build_tree_classifies_nodes():
    tree = build_tree(normalize([{"a": 1}]))
    assert tree.role is Role.PLAIN_VALUE
    assert tree.value_kind is ValueKind.EMPTY
    child = tree.children[0]
    assert child.role is Role.MAIN_CALL
    assert child.value_kind is ValueKind.NUMBER
    assert child.display_value == "1"

def test_build_tree_path_ids():
    tree = build_tree(normalize([{"a": [1, {"b": [2]}]}]))
    assert tree.id == ""
    assert tree.children[0].id == "0"
    assert tree.children[0].children[1].children[0].id == "0-1-0"

def test_build_tree_numbering_restarts_per_subtree():
    tree = build_tree(normalize([
        {"a": [{"x": 1}, {"y": 2}]},
        {"b": [{"z": 3}]},
    ]))
    assert [c.group_id for c in tree.children] == [0, 1]
    assert [c.group_id for c in tree.children[0].children] == [0, 1]
    assert [c.group_id for c in tree.children[1].children] == [0]

def test_build_tree_to_entry_roundtrip():
    entry = normalize([{"a": [1, {".b": "_c"}]}, {"$d": 2}])
    assert build_tree(entry).to_entry() == entry


# ---------------------------------------------------------------------------
# split_groups / group_members
# ---------------------------------------------------------------------------

def test_split_groups():
    tree = build_tree(normalize([{"a": None}, {".b": 2}, {"c": None}]))
    groups = split_groups(tree.children)
    assert [[b.raw_name for b in g] for g in groups] == [["a", ".b"], ["c"]]

def test_group_members():
    tree = build_tree(normalize([{"a": None}, {".b": 2}, {"c": None}]))
    members = group_members(tree, tree.children[1])
    assert [b.raw_name for b in members] == ["a", ".b"]

def test_group_members_of_root():
    tree = build_tree(normalize([{"a": None}]))
    assert group_members(None, tree) == [tree]
