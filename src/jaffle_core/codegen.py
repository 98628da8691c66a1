"""Code generator: grouped Box tree → live-coding JavaScript."""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Sequence

from .classifier import display_value, is_number
from .config import DEFAULT_CONFIG, CompilerConfig
from .grouping import split_groups
from .model import CHAINED_PREFIX, SERIALIZED_SUFFIX, Box, Role, ValueKind
from .normalizer import raw_scalar


log = logging.getLogger(__name__)

_EXPRESSION_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9.+\-*/()]")
_SERIALIZED_SUFFIX_RE = re.compile(re.escape(SERIALIZED_SUFFIX) + r"(\d*)$")


@dataclass
class _Program:
    """Accumulator threaded through one emission pass."""

    config: CompilerConfig
    constants: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def emit(tree: Box, config: CompilerConfig = DEFAULT_CONFIG) -> str:
    """Emit the program of a grouped tune tree.

    The program is made of hoisted constant definitions, then lifecycle
    calls, then a single ``return`` of the playable expression.
    """
    program = _Program(config)
    lifecycle: list[str] = []
    body: list[Box] = []

    for box in tree.children:
        if box.raw_name.startswith(config.lifecycle_prefix):
            lifecycle.append(_emit_lifecycle(box, program))
        else:
            body.append(box)

    exprs = _emit_args(body, program)
    expr = exprs[0] if len(exprs) == 1 else f"{config.root_call}({', '.join(exprs)})"

    log.debug(
        "emitted %d constant(s), %d lifecycle call(s), %d expression(s)",
        len(program.constants), len(lifecycle), len(exprs),
    )
    lines = program.constants + lifecycle + [f"return {expr}"]
    return "".join(f"{line}\n" for line in lines)


# ---------------------------------------------------------------------------
# Literal rule
# ---------------------------------------------------------------------------

_QUOTE_ESCAPES = str.maketrans({
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
})


def quote(text: str) -> str:
    """Single-quote *text* as a JavaScript string literal."""
    return "'" + text.translate(_QUOTE_ESCAPES) + "'"


def sanitize_expression(text: str) -> str:
    """Keep only the characters allowed in an inline expression.

    A string made only of disallowed characters becomes empty.
    """
    return _EXPRESSION_DISALLOWED_RE.sub("", text)


def emit_literal(kind: ValueKind, raw_value: str,
                 config: CompilerConfig = DEFAULT_CONFIG) -> str:
    """Return the target-language text of a leaf value."""
    if kind is ValueKind.NULL:
        return ""
    if kind in (ValueKind.NUMBER, ValueKind.BOOLEAN):
        return raw_value
    if kind is ValueKind.MININOTATION:
        return f"{config.pattern_constructor}({quote(display_value(raw_value).strip())})"
    if kind is ValueKind.EXPRESSION:
        return sanitize_expression(display_value(raw_value))
    if kind is ValueKind.STRING:
        return f"{config.pattern_constructor}({quote(raw_value.strip())})"
    raise ValueError(f"{kind} is not a literal value kind")


# ---------------------------------------------------------------------------
# Sibling lists and groups
# ---------------------------------------------------------------------------

def _emit_args(children: Sequence[Box], program: _Program,
               suffixes: list[str] | None = None) -> list[str]:
    """Emit one argument expression per non-chained sibling, in order.

    Chained calls leading the list go to *suffixes*, to be applied to the
    enclosing call. Without an enclosing call they become plain calls.
    """
    args: list[str] = []
    for members in split_groups(children):
        args.extend(_emit_group(members, program, suffixes))
    return args


def _emit_group(members: list[Box], program: _Program,
                suffixes: list[str] | None) -> list[str]:
    exprs: list[str] = []
    constant: list[str] | None = None  # [name, value]

    for box in members:
        if box.role is Role.CHAINED_CALL:
            call = _emit_call(box, program)
            if exprs:
                exprs[-1] = f"{_receiver(exprs[-1])}.{call}"
            elif constant is not None:
                constant[1] = f"{_receiver(constant[1])}.{call}"
            elif suffixes is not None:
                suffixes.append(call)
            else:
                exprs.append(call)
        elif box.role is Role.CONSTANT_DEF:
            constant = [box.display_name, _emit_constant_value(box, program)]
        else:
            exprs.append(_emit_expression(box, program))

    if constant is not None:
        program.constants.append(f"const {constant[0]} = {constant[1]}")
    return exprs


def _receiver(expr: str) -> str:
    # `1.fast()` lexes as a malformed number
    return f"({expr})" if is_number(expr) else expr


# ---------------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------------

def _emit_expression(box: Box, program: _Program) -> str:
    if box.role is Role.PLAIN_VALUE:
        if box.children:
            return "[" + ", ".join(_emit_args(box.children, program)) + "]"
        if box.value_kind is ValueKind.NULL:
            return "null"
        return emit_literal(box.value_kind, box.raw_value, program.config)
    return _emit_call(box, program)


def split_call_name(name: str) -> tuple[str, int | None]:
    """Split the serialization suffix off a call name.

    Returns the bare name and which argument to serialize: ``0`` for all of
    them (``name^``), ``n`` for the n-th one (``name^n``), ``None`` for none.
    """
    match = _SERIALIZED_SUFFIX_RE.search(name)
    if match is None:
        return name, None
    return name[:match.start()], int(match.group(1) or 0)


def _emit_call(box: Box, program: _Program) -> str:
    config = program.config
    raw_name = box.raw_name[1:] if box.raw_name.startswith(CHAINED_PREFIX) else box.raw_name
    name, serialized = split_call_name(raw_name)

    if serialized == 0:
        return f"{name}({serialize(box)})"

    if box.role is Role.MAIN_CALL and serialized is None:
        if name == config.lambda_name and box.value_kind in (ValueKind.NULL, ValueKind.NUMBER):
            return _emit_lambda(box, config)
        if name in config.signal_names:
            return name

    return _emit_invocation(name, box, serialized, program)


def _emit_invocation(name: str, box: Box, serialized: int | None, program: _Program) -> str:
    """Emit ``name(args)`` followed by the chains leading its argument list."""
    if not box.children:
        return f"{name}({emit_literal(box.value_kind, box.raw_value, program.config)})"

    suffixes: list[str] = []
    if serialized:
        index = serialized - 1
        args = (
            _emit_args(box.children[:index], program, suffixes)
            + [serialize_argument(child) for child in box.children[index:index + 1]]
            + _emit_args(box.children[index + 1:], program, suffixes)
        )
    else:
        args = _emit_args(box.children, program, suffixes)

    return f"{name}({', '.join(args)})" + "".join(f".{call}" for call in suffixes)


def _emit_lambda(box: Box, config: CompilerConfig) -> str:
    arity = 0.0
    if box.value_kind is ValueKind.NUMBER:
        arity = float(box.raw_value)
        if not arity >= 0:
            arity = 0.0
    params = config.lambda_params[:int(min(arity, len(config.lambda_params)))]
    if not params:
        return "x => x"
    return f"(x, {', '.join(params)}) => x"


def _emit_constant_value(box: Box, program: _Program) -> str:
    if box.children:
        exprs = _emit_args(box.children, program)
        if len(exprs) == 1:
            return exprs[0]
        return f"{program.config.root_call}({', '.join(exprs)})"
    if box.value_kind is ValueKind.NULL:
        return "null"
    return emit_literal(box.value_kind, box.raw_value, program.config)


def _emit_lifecycle(box: Box, program: _Program) -> str:
    name, serialized = split_call_name(box.raw_name[len(program.config.lifecycle_prefix):])
    if serialized == 0:
        return f"await {name}({serialize(box)})"
    return f"await {_emit_invocation(name, box, serialized, program)}"


# ---------------------------------------------------------------------------
# Serialized literals
# ---------------------------------------------------------------------------

def raw_data(box: Box) -> object:
    """Return the raw data under *box*, untouched by code emission.

    Children that are all named merge into one object; otherwise they form
    an array in which named children are one-key objects.
    """
    if not box.children:
        return raw_scalar(box.raw_value)
    if all(child.raw_name for child in box.children):
        return {child.raw_name: raw_data(child) for child in box.children}
    return [
        {child.raw_name: raw_data(child)} if child.raw_name else raw_data(child)
        for child in box.children
    ]


def serialize(box: Box) -> str:
    return json.dumps(raw_data(box), ensure_ascii=False)


def serialize_argument(box: Box) -> str:
    """Serialize one argument; a named one becomes a one-key object."""
    data = raw_data(box)
    if box.raw_name:
        data = {box.raw_name: data}
    return json.dumps(data, ensure_ascii=False)
