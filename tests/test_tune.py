"""Tests for Tune and compile_tune."""

import pytest

from jaffle_core import Tune, compile_tune
from jaffle_core.config import CompilerConfig
from jaffle_core.errors import ShapeError
from jaffle_core.model import Role


def test_compile_single_call():
    assert compile_tune("- a: 1\n") == "return a(1)\n"

def test_compile_chained():
    assert compile_tune("- a: null\n- .b: 2\n") == "return a().b(2)\n"

def test_compile_constant():
    assert compile_tune("- $x: 5\n- a: =x+1\n") == "const x = 5\nreturn a(x+1)\n"

def test_compile_two_keys_fails_on_first_element():
    with pytest.raises(ShapeError) as info:
        compile_tune("- a: 1\n  b: 2\n")
    assert info.value.path == (0,)

def test_compile_with_config():
    config = CompilerConfig(pattern_constructor="m")
    assert compile_tune("- s: bd\n", config) == "return s(m('bd'))\n"


def test_tune_views():
    tune = Tune.from_yaml("- a: null\n- .bb: 42\n")
    assert tune.js == "return a().bb(42)\n"
    assert tune.yaml == "- a: null\n- .bb: 42\n"
    assert [c.role for c in tune.tree.children] == [Role.MAIN_CALL, Role.CHAINED_CALL]
    assert tune.tree.children[1].width == 5

def test_tune_tree_is_cached():
    tune = Tune.from_yaml("- a: 1\n")
    assert tune.tree is tune.tree

def test_tune_tree_roundtrips_to_entry():
    tune = Tune.from_yaml("- a:\n  - b: 1\n  - .c: _d\n")
    assert tune.tree.to_entry() == tune.entry
