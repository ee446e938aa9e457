"""Pollution spread — one diffusion event at the end of a simulation.

Separated from the growth code since it runs once, on the final grid,
rather than as part of every step.
"""

from __future__ import annotations

from sprawl.world.grid import Grid

MIN_SPREADING_POLLUTION = 2


def spread_pollution(grid: Grid) -> None:
    """Raise the pollution of cells next to heavily polluted ones.

    Cells are visited from most to least polluted.  A cell whose
    pollution ``P`` was at least 2 when the pass began lifts each
    neighbour to at least ``P - 1``.  Pollution is never lowered, and
    values raised during the pass do not spread again, so pollution
    moves out by exactly one cell and the visiting order among equal
    levels has no effect.

    Args:
        grid: The grid to modify in-place.
    """
    sources = sorted(
        (cell for cell in grid if cell.pollution >= MIN_SPREADING_POLLUTION),
        key=lambda c: -c.pollution,
    )
    levels = [cell.pollution for cell in sources]
    for cell, level in zip(sources, levels, strict=True):
        for neighbour in grid.neighbours(cell.x, cell.y):
            neighbour.pollution = max(neighbour.pollution, level - 1)
