"""Compiler configuration."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Mapping

from .errors import JaffleCoreError


SIGNAL_NAMES = (
    "saw", "sine", "cosine", "tri", "square", "rand", "perlin",
    "saw2", "sine2", "cosine2", "tri2", "square2", "rand2",
)


@dataclass(frozen=True)
class CompilerConfig:
    """Names the code generator treats specially.

    - ``pattern_constructor``: call wrapping mininotation and string literals
    - ``root_call``: call stacking several top-level expressions
    - ``lambda_name``: main call emitted as an arrow function
    - ``lambda_params``: extra parameter names of a variadic lambda
    - ``signal_names``: calls emitted as bare identifiers
    - ``lifecycle_prefix``: marker of top-level calls run for side effect
    """

    pattern_constructor: str = "mini"
    root_call: str = "stack"
    lambda_name: str = "set"
    lambda_params: tuple[str, ...] = ("a", "b", "c")
    signal_names: frozenset[str] = frozenset(SIGNAL_NAMES)
    lifecycle_prefix: str = ".."

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> CompilerConfig:
        """Build a config from a plain mapping, e.g. a loaded YAML file."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise JaffleCoreError(f"unknown config keys: {', '.join(unknown)}")

        kwargs = dict(data)
        if "lambda_params" in kwargs:
            kwargs["lambda_params"] = tuple(kwargs["lambda_params"])
        if "signal_names" in kwargs:
            kwargs["signal_names"] = frozenset(kwargs["signal_names"])
        return cls(**kwargs)


DEFAULT_CONFIG = CompilerConfig()
