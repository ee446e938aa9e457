"""Statistics — read-only aggregates over a grid snapshot.

Values are signed: demand can exceed supply across the whole region even
though every per-cell value is non-negative.
"""

from __future__ import annotations

from dataclasses import dataclass

from sprawl.world.cell import ZoneType
from sprawl.world.grid import Grid


def population(grid: Grid, zone: ZoneType | None = None) -> int:
    """Sum population over cells of ``zone`` (all cells when None)."""
    return sum(c.population for c in grid if zone is None or c.zone is zone)


def available_workers(grid: Grid) -> int:
    """Residential population not employed by industry (2 each) or commerce."""
    return population(grid, ZoneType.RESIDENTIAL) - (
        population(grid, ZoneType.INDUSTRIAL) * 2
        + population(grid, ZoneType.COMMERCIAL)
    )


def available_goods(grid: Grid) -> int:
    """Industrial output not yet taken up by commercial cells."""
    return population(grid, ZoneType.INDUSTRIAL) - population(
        grid,
        ZoneType.COMMERCIAL,
    )


def total_pollution(grid: Grid) -> int:
    return sum(c.pollution for c in grid)


@dataclass(frozen=True)
class RegionStats:
    """Aggregate figures for one snapshot, as reported to the user.

    Attributes:
        available_workers: Unemployed residential population.
        available_goods: Unsold industrial output.
        residential: Total residential population.
        commercial: Total commercial population.
        industrial: Total industrial population.
        total_population: Population over all zones.
        total_pollution: Pollution over all cells.
    """

    available_workers: int
    available_goods: int
    residential: int
    commercial: int
    industrial: int
    total_population: int
    total_pollution: int


def summarize(grid: Grid) -> RegionStats:
    """Compute every aggregate for ``grid`` at once."""
    return RegionStats(
        available_workers=available_workers(grid),
        available_goods=available_goods(grid),
        residential=population(grid, ZoneType.RESIDENTIAL),
        commercial=population(grid, ZoneType.COMMERCIAL),
        industrial=population(grid, ZoneType.INDUSTRIAL),
        total_population=population(grid),
        total_pollution=total_pollution(grid),
    )
