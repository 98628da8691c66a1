"""Error types for Jaffle Core."""

from __future__ import annotations


class JaffleCoreError(Exception):
    """Base class for every error raised by Jaffle Core."""


class ShapeError(JaffleCoreError):
    """The input tree violates the restricted tune grammar."""

    def __init__(self, message: str, path: tuple[int, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if not self.path:
            return f"{self.message} (at root)"
        return f"{self.message} (at {'-'.join(str(i) for i in self.path)})"


class DecodeError(JaffleCoreError):
    """The source text could not be parsed."""
