"""Plain-text rendering of a region for terminal output."""

from __future__ import annotations

from collections.abc import Callable

from sprawl.world.cell import Cell, ZoneType
from sprawl.world.grid import Grid
from sprawl.world.statistics import RegionStats


def cell_label(cell: Cell) -> str:
    """Zone symbol for empty or non-growing cells, population otherwise."""
    if cell.zone is ZoneType.OTHER or cell.population == 0:
        return cell.symbol
    return str(cell.population)


def _format_table(grid: Grid, label: Callable[[Cell], str]) -> str:
    border = "----" * grid.width + "--"
    lines = [border]
    for row in grid.cells:
        lines.append("|" + "".join(f" {label(cell):<3}" for cell in row) + "|")
    lines.append(border)
    return "\n".join(lines)


def format_grid(grid: Grid) -> str:
    """Render the grid as a bordered table of cell labels."""
    return _format_table(grid, cell_label)


def format_pollution(grid: Grid) -> str:
    """Render the grid as a bordered table of pollution values."""
    return _format_table(grid, lambda cell: str(cell.pollution))


def format_resources(stats: RegionStats) -> str:
    return (
        f"Available Workers: {stats.available_workers}\n"
        f"Available Goods: {stats.available_goods}"
    )


def format_stats(stats: RegionStats) -> str:
    """Render the full set of final figures."""
    return "\n".join(
        [
            format_resources(stats),
            f"Residential Population: {stats.residential}",
            f"Commercial Population: {stats.commercial}",
            f"Industrial Population: {stats.industrial}",
            f"Total Population: {stats.total_population}",
            f"Total Pollution: {stats.total_pollution}",
        ],
    )
