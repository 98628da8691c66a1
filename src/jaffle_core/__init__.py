"""Jaffle Core — tree compiler from tune YAML to live-coding programs and node graphs."""

from .classifier import classify_name, classify_value, display_name, display_value
from .codegen import emit
from .config import CompilerConfig
from .decoder import decode, encode
from .errors import DecodeError, JaffleCoreError, ShapeError
from .geometry import annotate
from .grouping import build_tree, group
from .model import Box, Entry, Role, ValueKind
from .normalizer import normalize, to_raw
from .repl import TuneRepl
from .tune import Tune, compile_tune

__all__ = [
    "compile_tune",
    "decode",
    "encode",
    "normalize",
    "to_raw",
    "classify_name",
    "classify_value",
    "display_name",
    "display_value",
    "group",
    "build_tree",
    "emit",
    "annotate",
    "Entry",
    "Box",
    "Role",
    "ValueKind",
    "Tune",
    "CompilerConfig",
    "JaffleCoreError",
    "ShapeError",
    "DecodeError",
    "TuneRepl",
]
