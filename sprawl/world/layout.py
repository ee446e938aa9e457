"""Layout — read a region layout file into a table of zone symbols.

A layout file is comma-separated text, one grid row per line::

    -,-,T,#,T,T,T,-
    -,I,I,I,-,C,-,-
    ...

Blank lines are ignored and each symbol is stripped of surrounding
whitespace.  The grid must be non-empty and rectangular.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a region layout is empty or not rectangular."""


def parse_layout(text: str) -> list[list[str]]:
    """Split layout text into rows of symbols.

    Args:
        text: Raw contents of a layout file.

    Returns:
        Symbols indexed as ``rows[y][x]``.

    Raises:
        LayoutError: If there are no rows, a symbol is empty, or rows
            differ in length.
    """
    rows = [
        [symbol.strip() for symbol in line.split(",")]
        for line in text.splitlines()
        if line.strip()
    ]
    if not rows:
        msg = "region layout is empty"
        raise LayoutError(msg)

    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            msg = f"row {y} has {len(row)} cells, expected {width}"
            raise LayoutError(msg)
        if any(not symbol for symbol in row):
            msg = f"row {y} contains an empty cell"
            raise LayoutError(msg)
        if any(len(symbol) != 1 for symbol in row):
            msg = f"row {y} contains a symbol longer than one character"
            raise LayoutError(msg)
    return rows


def read_layout(path: str | Path) -> list[list[str]]:
    """Load and parse a layout file.

    Raises:
        FileNotFoundError: If the file does not exist.
        LayoutError: If the contents are malformed.
    """
    path = Path(path)
    with path.open("r") as f:
        rows = parse_layout(f.read())
    logger.debug("loaded %dx%d layout from %s", len(rows[0]), len(rows), path)
    return rows
