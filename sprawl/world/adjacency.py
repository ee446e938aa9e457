"""Adjacency — build the neighbour relation of a grid snapshot.

Every snapshot owns its relation set.  The builder is run once when a
grid is created from a layout and again on every fresh snapshot, since
copies start with empty relations.
"""

from __future__ import annotations

from collections.abc import Sequence

from sprawl.world.cell import Cell

# (dx, dy) in reading order, self excluded
NEIGHBOUR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


def neighbour_positions(
    rows: Sequence[Sequence[Cell]],
    x: int,
    y: int,
) -> list[tuple[int, int]]:
    """Return the in-bounds coordinates surrounding ``(x, y)``.

    Bounds are checked against the length of the neighbour's own row, so
    a short row simply contributes fewer neighbours.

    Args:
        rows: Cells indexed as ``rows[y][x]``.
        x: Column index.
        y: Row index.
    """
    result: list[tuple[int, int]] = []
    for dx, dy in NEIGHBOUR_OFFSETS:
        nx, ny = x + dx, y + dy
        if 0 <= ny < len(rows) and 0 <= nx < len(rows[ny]):
            result.append((nx, ny))
    return result


def track_adjacency(rows: Sequence[Sequence[Cell]]) -> None:
    """Populate ``neighbours`` and ``is_powerline_adjacent`` for every cell.

    The powerline flag is only ever raised here, never cleared.

    Args:
        rows: Cells indexed as ``rows[y][x]``; modified in-place.
    """
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            cell.neighbours = neighbour_positions(rows, x, y)
            if any(rows[ny][nx].is_powerline for nx, ny in cell.neighbours):
                cell.is_powerline_adjacent = True
