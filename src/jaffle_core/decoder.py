"""Decoder: tune YAML text ↔ Entry tree."""

from __future__ import annotations

import logging

import yaml

from .errors import DecodeError
from .model import Entry
from .normalizer import normalize, to_raw


log = logging.getLogger(__name__)


def load_yaml(source: str) -> object:
    """Parse YAML *source* into plain data, wrapping parser errors."""
    try:
        return yaml.safe_load(source)
    except yaml.YAMLError as exc:
        raise DecodeError(f"can not parse yaml: {exc}") from exc


def decode(source: str) -> Entry:
    """Parse tune YAML and normalize it into an Entry tree."""
    entry = normalize(load_yaml(source))
    log.debug("decoded %d top-level entr(y/ies)", len(entry.children))
    return entry


def encode(entry: Entry) -> str:
    """Serialize an Entry tree as tune YAML; ``decode(encode(e)) == e``."""
    return yaml.safe_dump(
        to_raw(entry),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
