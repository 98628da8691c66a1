"""Tests for the geometry annotator."""

from jaffle_core.geometry import annotate, measure_padding, measure_width
from jaffle_core.grouping import build_tree
from jaffle_core.normalizer import normalize


def measured(raw):
    return annotate(build_tree(normalize(raw)))


def test_single_box():
    box = measured([{".a": "_b"}]).children[0]
    assert box.padding == 2
    assert box.width == 3

def test_box_without_value():
    box = measured([{"a": [{"b": 42}]}]).children[0]
    assert box.padding == 2
    assert box.width == 1

def test_child_box():
    child = measured([{"a": [{"b": 42}]}]).children[0].children[0]
    assert child.padding == 2
    assert child.width == 4

def test_group_members_share_padding_and_width():
    tree = measured([{"a": None}, {".bb": 42}])
    a, bb = tree.children
    assert a.padding == bb.padding == 3
    assert a.width == bb.width == 5

def test_other_groups_are_measured_apart():
    tree = measured([{"a": None}, {"long_name": 1}])
    assert tree.children[0].padding == 2
    assert tree.children[1].padding == 10

def test_unnamed_value_has_no_name_gap():
    b, value = measured([{"a": [{"b": 1}, 42]}]).children[0].children
    assert b.padding == 2
    assert value.padding == 1
    assert b.width == 4
    assert value.width == 3

def test_root_is_its_own_group():
    tree = measured([{"a": 1}])
    assert tree.padding == 0
    assert tree.width == 0

def test_annotate_does_not_touch_input():
    tree = build_tree(normalize([{"abc": 1}]))
    annotate(tree)
    assert tree.children[0].padding == 0

def test_annotate_keeps_ids_and_groups():
    tree = measured([{"a": None}, {".b": 1}, {"c": [{"d": 2}]}])
    assert [c.id for c in tree.children] == ["0", "1", "2"]
    assert [c.group_id for c in tree.children] == [0, 0, 1]
    assert tree.children[2].children[0].id == "2-0"

def test_measure_padding():
    tree = build_tree(normalize([{"ab": 1}, {".c": 2}]))
    members = list(tree.children)
    assert measure_padding(members[1], members) == 3

def test_null_value_drops_name_gap():
    box = measured([{"abc": None}]).children[0]
    assert box.padding == 4
    assert box.width == 3

def test_null_member_next_to_valued_member():
    a, b = measured([{"a": None}, {".b": "_xyz"}]).children
    assert a.width == b.width == 5

def test_measure_width():
    tree = build_tree(normalize([{"a": None}, {".b": 12}]))
    a, b = tree.children
    assert measure_width(2, a) == 1
    assert measure_width(2, b) == 4
