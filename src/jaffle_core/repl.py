"""TuneRepl — incremental tune editing session.

Also provides the ``jaffle-repl`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .config import DEFAULT_CONFIG, CompilerConfig
from .errors import JaffleCoreError
from .model import Box
from .tune import Tune


log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# TuneRepl class (notebook / programmatic use)
# ---------------------------------------------------------------------------

class TuneRepl:
    """Stateful session that accumulates tune YAML lines and compiles them.

    Usage::

        repl = TuneRepl()
        repl.feed("- note: _c e g")
        repl.feed("- .fast: 2")
        repl.compile()       # → "return note(mini('c e g')).fast(2)\\n"

        repl.last_js         # last successfully compiled program
        repl.reset()         # clear state

    A failed compilation raises and leaves ``last_js`` and ``tune`` as they
    were.
    """

    def __init__(self, config: CompilerConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.lines: list[str] = []
        self.tune: Tune | None = None
        self.last_js: str | None = None

    @property
    def source(self) -> str:
        return "\n".join(self.lines) + "\n" if self.lines else ""

    def feed(self, text: str) -> None:
        """Append one or more lines of YAML to the buffer."""
        self.lines.extend(text.splitlines())

    def load(self, source: str) -> None:
        """Replace the buffer with *source*."""
        self.lines = source.splitlines()

    def compile(self) -> str:
        tune = Tune.from_yaml(self.source, self.config)
        js = tune.js
        self.tune = tune
        self.last_js = js
        return js

    def reset(self) -> None:
        """Clear the buffer and every compiled product."""
        self.lines = []
        self.tune = None
        self.last_js = None


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_box(box: Box) -> str:
    """Format a single box for one-line display."""
    label = box.display_name or "·"
    if box.display_value:
        label = f"{label} {box.display_value}"
    return (
        f"{box.id or 'root'}: {label}"
        f"  [{box.role.name} {box.value_kind.name} g{box.group_id}"
        f" pad={box.padding} w={box.width}]"
    )


def format_tree(box: Box, depth: int = 0) -> str:
    """Pretty-print a Box tree, one box per line, indented by depth."""
    lines = ["  " * depth + _fmt_box(box)]
    for child in box.children:
        lines.append(format_tree(child, depth + 1))
    return "\n".join(lines)


def _compile(repl: TuneRepl, dest: IO[str]) -> None:
    """Compile the buffer and print the program to *dest*."""
    try:
        js = repl.compile()
    except JaffleCoreError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return
    print(js, end="", file=dest)


def _show_tree(repl: TuneRepl, dest: IO[str]) -> None:
    """Print the annotated tree of the last compiled tune."""
    if repl.tune is None:
        print("  (nothing compiled yet)", file=dest)
        return
    print(format_tree(repl.tune.tree), file=dest)


def _show_yaml(repl: TuneRepl, dest: IO[str]) -> None:
    """Print the normalized YAML of the last compiled tune."""
    if repl.tune is None:
        print("  (nothing compiled yet)", file=dest)
        return
    print(repl.tune.yaml, end="", file=dest)


def _process_line(repl: TuneRepl, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    command = line.strip()

    # ── Exit ──────────────────────────────────────────────────────────────
    if command in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if command == ":js":
        _compile(repl, dest)
        return True

    if command == ":tree":
        _show_tree(repl, dest)
        return True

    if command == ":yaml":
        _show_yaml(repl, dest)
        return True

    if command == ":reset":
        repl.reset()
        return True

    # ── Load a tune file into the buffer ──────────────────────────────────
    if command.startswith("?<< "):
        filepath = command[4:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                repl.load(fh.read())
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
            return True
        log.info("loaded %s (%d lines)", filepath, len(repl.lines))
        return True

    # ── Regular YAML input ────────────────────────────────────────────────
    if command:
        repl.feed(line.rstrip("\n"))
    return True


def _redirect(current: IO[str] | None, filepath: str) -> tuple[IO[str] | None, IO[str]]:
    """Close *current* and open *filepath* for output.

    Returns the new file and destination; on failure output goes back to
    stdout.
    """
    if current:
        current.close()
    try:
        new_file = open(filepath, "w", encoding="utf-8")
    except OSError as exc:
        print(f"Error opening '{filepath}': {exc}", file=sys.stderr)
        return None, sys.stdout
    return new_file, new_file


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> None:
    """Interactive tune shell (``jaffle-repl`` / ``python -m jaffle_core.repl``).

    ``-v`` enables debug logging; any other argument is a tune file loaded
    into the buffer on start.
    """
    args = sys.argv[1:] if argv is None else argv
    verbose = "-v" in args
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    repl = TuneRepl()
    dest: IO[str] = sys.stdout
    _file: IO[str] | None = None

    for path in (a for a in args if a != "-v"):
        _process_line(repl, f"?<< {path}", dest)

    print("Jaffle REPL  (:q to quit  |  :js  :tree  :yaml  :reset  |  ?<< <file>)")

    while True:
        try:
            line = input("JFL> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        # ── Output redirect: ?>> filepath  /  ?>> ─────────────────────────
        if line.strip().startswith("?>> "):
            filepath = line.strip()[4:].strip()
            _file, dest = _redirect(_file, filepath)
            continue

        if line.strip() == "?>>":
            if _file:
                _file.close()
                _file = None
            dest = sys.stdout
            continue

        # ── All other commands ────────────────────────────────────────────
        if not _process_line(repl, line, dest):
            break

    if _file:
        _file.close()


if __name__ == "__main__":
    main()
