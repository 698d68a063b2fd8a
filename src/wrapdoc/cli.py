"""Command-line entry point: render a document and show the column budget.

Usage:
    wrapdoc [WIDTH] [--indent N] [--doc FILE] [--plain] [-v]

WIDTH falls back to 80 when missing, unparseable or negative. Without
``--doc`` the built-in example document is rendered.
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text as RichText
from wcwidth import wcwidth

from wrapdoc.builder import example_document
from wrapdoc.config import DEFAULT_MAX_WIDTH
from wrapdoc.errors import WrapdocError
from wrapdoc.nodes import Node
from wrapdoc.renderer import render
from wrapdoc.serialization import from_json
from wrapdoc.utils.logger import get_logger

logger = get_logger(__name__)

BOUNDARY_STYLE = "reverse bold"
OVERFLOW_STYLE = "red"


def parse_width(value: str | None) -> int:
    """Parse the WIDTH argument, falling back to the default budget.

    Example:
        >>> parse_width("40"), parse_width(None), parse_width("-3"), parse_width("wide")
        (40, 80, 80, 80)
    """
    if value is None:
        return DEFAULT_MAX_WIDTH
    # ASCII digits only: int() also takes "4_0", " 40 ", "+40" and other scripts.
    digits = value.removeprefix("-")
    if not (digits.isascii() and digits.isdigit()):
        logger.warning("Width %r is not a decimal integer, using %d", value, DEFAULT_MAX_WIDTH)
        return DEFAULT_MAX_WIDTH
    width = int(value)
    if width < 0:
        logger.warning("Width %d is negative, using %d", width, DEFAULT_MAX_WIDTH)
        return DEFAULT_MAX_WIDTH
    return width


def visualize(text: str, width: int) -> list[RichText]:
    """Pad each line to the budget and mark the boundary column.

    Columns are terminal cells, so wide and combining characters line up.
    The cell at column ``width`` (the first one past the budget) is
    highlighted; anything further right is coloured as overflow.
    """
    lines = []
    for raw in text.split("\n"):
        padded = raw + " " * max(width + 1 - sum(map(_cells, raw)), 0)
        boundary = _char_index(padded, width)
        overflow = _char_index(padded, width + 1)
        line = RichText(padded)
        line.stylize(BOUNDARY_STYLE, boundary, overflow)
        if overflow < len(padded):
            line.stylize(OVERFLOW_STYLE, overflow, len(padded))
        lines.append(line)
    return lines


def _cells(ch: str) -> int:
    return max(wcwidth(ch), 0)


def _char_index(text: str, column: int) -> int:
    """Index of the first visible character starting at or after ``column`` cells."""
    cells = 0
    for index, ch in enumerate(text):
        size = _cells(ch)
        if size and cells >= column:
            return index
        cells += size
    return len(text)


def load_document(path: Path | None) -> Node:
    if path is None:
        return example_document()
    return from_json(path.read_text(encoding="utf-8"))


def configure_logging(verbose: bool = False) -> None:
    """Send wrapdoc log records to stderr through rich."""
    root = logging.getLogger("wrapdoc")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wrapdoc",
        description="Render a document under a column budget",
    )
    parser.add_argument(
        "width",
        nargs="?",
        default=None,
        help=f"Column budget (default {DEFAULT_MAX_WIDTH})",
    )
    parser.add_argument("--indent", type=int, default=2, help="Spaces per indentation level")
    parser.add_argument("--doc", type=Path, default=None, help="JSON document to render")
    parser.add_argument("--plain", action="store_true", help="Print without the boundary marker")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log wrap decisions")
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console(highlight=False)

    configure_logging(verbose=args.verbose)

    width = parse_width(args.width)
    try:
        doc = load_document(args.doc)
        text = render(doc, width, indent=" " * max(args.indent, 0))
    except (OSError, WrapdocError) as e:
        logger.error("%s", e)
        return 1

    if args.plain:
        console.print(text, markup=False, highlight=False, soft_wrap=True)
        return 0
    for line in visualize(text, width):
        console.print(line, soft_wrap=True)
    return 0
