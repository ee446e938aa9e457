"""Growth rules — decide how a single cell grows during one step.

Every decision is read from the previous snapshot: the cell's own
previous values and the previous values of its neighbours.  Only the
current cell is written to, so the order cells are visited in matters
only through the shared resource pool.

Rule tables, keyed by previous population:

* Residential: 0 grows when powerline-adjacent or when any neighbour
  has population; ``P`` in 1-4 needs ``2P`` neighbours with population
  of at least ``P``.  Free of charge.
* Commercial: costs 1 worker and 1 good.  0 grows when
  powerline-adjacent or with 1 populated neighbour; 1 needs 2 populated
  neighbours.
* Industrial: costs 2 workers and raises pollution by 1.  0 grows when
  powerline-adjacent or with 1 populated neighbour; 1 needs 2 populated
  neighbours; 2 needs 4 neighbours with population of at least 2.
"""

from __future__ import annotations

from collections.abc import Iterable

from sprawl.growth.resources import ResourcePool
from sprawl.world.cell import Cell, ZoneType

# previous population -> (neighbours required, minimum neighbour population)
RESIDENTIAL_THRESHOLDS: dict[int, tuple[int, int]] = {
    1: (2, 1),
    2: (4, 2),
    3: (6, 3),
    4: (8, 4),
}
COMMERCIAL_THRESHOLDS: dict[int, tuple[int, int]] = {
    0: (1, 1),
    1: (2, 1),
}
INDUSTRIAL_THRESHOLDS: dict[int, tuple[int, int]] = {
    0: (1, 1),
    1: (2, 1),
    2: (4, 2),
}

COMMERCIAL_WORKERS = 1
COMMERCIAL_GOODS = 1
INDUSTRIAL_WORKERS = 2


def has_qualifying_neighbours(
    neighbours: Iterable[Cell],
    required: int,
    min_population: int,
) -> bool:
    """Return True once ``required`` neighbours reach ``min_population``."""
    count = 0
    for neighbour in neighbours:
        if neighbour.population >= min_population:
            count += 1
            if count >= required:
                return True
    return required <= 0


def _meets_threshold(
    previous: Cell,
    neighbours: list[Cell],
    thresholds: dict[int, tuple[int, int]],
) -> bool:
    rule = thresholds.get(previous.population)
    if rule is None:
        return False
    required, min_population = rule
    return has_qualifying_neighbours(neighbours, required, min_population)


def grow_residential(cell: Cell, previous: Cell, neighbours: list[Cell]) -> None:
    if previous.population == 0:
        grows = previous.is_powerline_adjacent or any(
            n.population >= 1 for n in neighbours
        )
    else:
        grows = _meets_threshold(previous, neighbours, RESIDENTIAL_THRESHOLDS)
    if grows:
        cell.population = previous.population + 1


def grow_commercial(
    cell: Cell,
    previous: Cell,
    neighbours: list[Cell],
    pool: ResourcePool,
) -> ResourcePool:
    if not pool.can_afford(COMMERCIAL_WORKERS, COMMERCIAL_GOODS):
        return pool
    grows = (
        previous.population == 0 and previous.is_powerline_adjacent
    ) or _meets_threshold(previous, neighbours, COMMERCIAL_THRESHOLDS)
    if not grows:
        return pool
    cell.population = previous.population + 1
    return pool.consume(COMMERCIAL_WORKERS, COMMERCIAL_GOODS)


def grow_industrial(
    cell: Cell,
    previous: Cell,
    neighbours: list[Cell],
    pool: ResourcePool,
) -> ResourcePool:
    if not pool.can_afford(INDUSTRIAL_WORKERS):
        return pool
    grows = (
        previous.population == 0 and previous.is_powerline_adjacent
    ) or _meets_threshold(previous, neighbours, INDUSTRIAL_THRESHOLDS)
    if not grows:
        return pool
    cell.population = previous.population + 1
    cell.pollution = previous.pollution + 1
    return pool.consume(INDUSTRIAL_WORKERS)


def grow(
    cell: Cell,
    previous: Cell,
    neighbours: list[Cell],
    pool: ResourcePool,
) -> ResourcePool:
    """Apply one step of growth to ``cell``.

    Args:
        cell: The cell being grown, modified in-place.
        previous: The same-position cell from the previous snapshot.
        neighbours: ``previous``'s neighbours in the previous snapshot.
        pool: Resources still available this step.

    Returns:
        The pool left after any consumption by this cell.
    """
    if cell.zone is ZoneType.RESIDENTIAL:
        grow_residential(cell, previous, neighbours)
        return pool
    if cell.zone is ZoneType.COMMERCIAL:
        return grow_commercial(cell, previous, neighbours, pool)
    if cell.zone is ZoneType.INDUSTRIAL:
        return grow_industrial(cell, previous, neighbours, pool)
    return pool
