"""Tune — the compiled form of one tune source, and the pipeline entry points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .codegen import emit
from .config import DEFAULT_CONFIG, CompilerConfig
from .decoder import decode, encode
from .geometry import annotate
from .grouping import build_tree
from .model import Box, Entry


log = logging.getLogger(__name__)


@dataclass
class Tune:
    """Holds every product of one tune: Entry tree, Box tree and program."""

    entry: Entry
    config: CompilerConfig = field(default=DEFAULT_CONFIG)

    def __post_init__(self) -> None:
        self._tree: Box | None = None

    @classmethod
    def from_yaml(cls, source: str, config: CompilerConfig = DEFAULT_CONFIG) -> Tune:
        return cls(entry=decode(source), config=config)

    # -- Derived views --------------------------------------------------

    @property
    def tree(self) -> Box:
        """Grouped and measured Box tree, as read by the graph renderer."""
        if self._tree is None:
            self._tree = annotate(build_tree(self.entry))
        return self._tree

    @property
    def js(self) -> str:
        return emit(self.tree, self.config)

    @property
    def yaml(self) -> str:
        return encode(self.entry)


def compile_tune(source: str, config: CompilerConfig = DEFAULT_CONFIG) -> str:
    """Compile tune YAML *source* into program text."""
    js = Tune.from_yaml(source, config).js
    log.debug("compiled tune:\n%s", js)
    return js
