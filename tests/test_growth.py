"""Tests for sprawl.growth — resource pool and per-zone growth rules."""

from __future__ import annotations

import pytest

from sprawl.growth.resources import ResourcePool
from sprawl.growth.rules import grow, has_qualifying_neighbours
from sprawl.world.cell import Cell
from sprawl.world.grid import Grid


def make_cell(
    symbol: str,
    population: int = 0,
    pollution: int = 0,
    *,
    powerline: bool = False,
) -> Cell:
    cell = Cell.from_symbol(0, 0, symbol)
    cell.population = population
    cell.pollution = pollution
    cell.is_powerline_adjacent = powerline
    return cell


def populated(*populations: int) -> list[Cell]:
    """Residential neighbours with the given populations."""
    return [make_cell("R", p) for p in populations]


def grow_once(
    previous: Cell,
    neighbours: list[Cell],
    pool: ResourcePool,
) -> tuple[Cell, ResourcePool]:
    cell = previous.copy()
    remaining = grow(cell, previous, neighbours, pool)
    return cell, remaining


PLENTY = ResourcePool(workers=10, goods=10)


class TestResourcePool:
    """Tests for the shared worker/goods pool."""

    def test_consume_returns_new_pool(self) -> None:
        pool = ResourcePool(workers=3, goods=2)
        left = pool.consume(2, 1)
        assert left == ResourcePool(workers=1, goods=1)
        assert pool == ResourcePool(workers=3, goods=2)

    def test_consume_unaffordable_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot take"):
            ResourcePool(workers=1, goods=5).consume(workers=2)

    def test_negative_pool_affords_nothing(self) -> None:
        pool = ResourcePool(workers=-4, goods=-1)
        assert not pool.can_afford(1, 0)
        assert not pool.can_afford(0, 1)
        assert pool.can_afford()

    def test_from_grid(self) -> None:
        grid = Grid.from_layout([["R", "R", "I", "C"]])
        grid.cell_at(0, 0).population = 4
        grid.cell_at(1, 0).population = 3
        grid.cell_at(2, 0).population = 2
        grid.cell_at(3, 0).population = 1
        assert ResourcePool.from_grid(grid) == ResourcePool(workers=2, goods=1)


class TestQualifyingNeighbours:
    def test_counts_only_populated_enough(self) -> None:
        assert has_qualifying_neighbours(populated(2, 1, 2), 2, 2)
        assert not has_qualifying_neighbours(populated(2, 1, 1), 2, 2)

    def test_stops_at_required_count(self) -> None:
        def neighbours():
            yield make_cell("R", 1)
            yield make_cell("R", 1)
            raise AssertionError("scanned past the required count")

        assert has_qualifying_neighbours(neighbours(), 2, 1)


class TestResidential:
    """Residential growth is free and gated on neighbours."""

    def test_empty_without_support_stays(self) -> None:
        cell, pool = grow_once(make_cell("R"), populated(0, 0, 0), PLENTY)
        assert cell.population == 0
        assert pool == PLENTY

    def test_empty_next_to_powerline_grows(self) -> None:
        cell, pool = grow_once(make_cell("R", powerline=True), [], PLENTY)
        assert cell.population == 1
        assert pool == PLENTY

    def test_empty_next_to_population_grows(self) -> None:
        cell, _ = grow_once(make_cell("R"), populated(0, 1), PLENTY)
        assert cell.population == 1

    def test_grows_without_resources(self) -> None:
        empty = ResourcePool(workers=0, goods=0)
        cell, pool = grow_once(make_cell("R", powerline=True), [], empty)
        assert cell.population == 1
        assert pool == empty

    @pytest.mark.parametrize(
        ("population", "neighbours", "expected"),
        [
            (1, (1, 1), 2),
            (1, (1, 0, 0), 1),
            (2, (2, 2, 2, 2), 3),
            (2, (2, 2, 2, 1, 1), 2),
            (3, (3, 3, 3, 3, 3, 3), 4),
            (3, (3, 3, 3, 3, 3, 2, 2, 2), 3),
            (4, (4,) * 8, 5),
            (4, (4,) * 7 + (3,), 4),
            (5, (5,) * 8, 5),
        ],
    )
    def test_thresholds(
        self,
        population: int,
        neighbours: tuple[int, ...],
        expected: int,
    ) -> None:
        previous = make_cell("R", population, powerline=True)
        cell, _ = grow_once(previous, populated(*neighbours), PLENTY)
        assert cell.population == expected


class TestCommercial:
    """Commercial growth costs one worker and one good."""

    def test_powerline_start(self) -> None:
        cell, pool = grow_once(make_cell("C", powerline=True), [], PLENTY)
        assert cell.population == 1
        assert pool == ResourcePool(workers=9, goods=9)

    def test_needs_a_worker(self) -> None:
        pool = ResourcePool(workers=0, goods=5)
        cell, left = grow_once(make_cell("C", powerline=True), [], pool)
        assert cell.population == 0
        assert left == pool

    def test_needs_a_good(self) -> None:
        pool = ResourcePool(workers=5, goods=0)
        cell, left = grow_once(make_cell("C", powerline=True), [], pool)
        assert cell.population == 0
        assert left == pool

    def test_empty_with_populated_neighbour(self) -> None:
        cell, pool = grow_once(make_cell("C"), populated(0, 1), PLENTY)
        assert cell.population == 1
        assert pool == ResourcePool(workers=9, goods=9)

    def test_one_needs_two_neighbours(self) -> None:
        cell, pool = grow_once(make_cell("C", 1), populated(1), PLENTY)
        assert cell.population == 1
        assert pool == PLENTY

        cell, pool = grow_once(make_cell("C", 1), populated(1, 3), PLENTY)
        assert cell.population == 2
        assert pool == ResourcePool(workers=9, goods=9)

    def test_powerline_does_not_help_past_zero(self) -> None:
        cell, _ = grow_once(make_cell("C", 1, powerline=True), [], PLENTY)
        assert cell.population == 1

    def test_stops_at_two(self) -> None:
        cell, pool = grow_once(make_cell("C", 2), populated(*(2,) * 8), PLENTY)
        assert cell.population == 2
        assert pool == PLENTY


class TestIndustrial:
    """Industrial growth costs two workers and adds pollution."""

    def test_powerline_start(self) -> None:
        pool = ResourcePool(workers=10, goods=0)
        cell, left = grow_once(make_cell("I", powerline=True), [], pool)
        assert cell.population == 1
        assert cell.pollution == 1
        assert left == ResourcePool(workers=8, goods=0)

    def test_needs_two_workers(self) -> None:
        pool = ResourcePool(workers=1, goods=10)
        cell, left = grow_once(make_cell("I", powerline=True), [], pool)
        assert cell.population == 0
        assert cell.pollution == 0
        assert left == pool

    def test_goods_untouched(self) -> None:
        pool = ResourcePool(workers=2, goods=-3)
        cell, left = grow_once(make_cell("I", powerline=True), [], pool)
        assert cell.population == 1
        assert left == ResourcePool(workers=0, goods=-3)

    @pytest.mark.parametrize(
        ("population", "neighbours", "expected"),
        [
            (0, (1,), 1),
            (0, (0, 0), 0),
            (1, (1, 1), 2),
            (1, (1,), 1),
            (2, (2, 2, 2, 2), 3),
            (2, (2, 2, 2, 1), 2),
            (3, (3,) * 8, 3),
        ],
    )
    def test_thresholds(
        self,
        population: int,
        neighbours: tuple[int, ...],
        expected: int,
    ) -> None:
        previous = make_cell("I", population, pollution=population)
        cell, _ = grow_once(previous, populated(*neighbours), PLENTY)
        assert cell.population == expected
        assert cell.pollution == expected

    def test_pollution_builds_on_previous(self) -> None:
        previous = make_cell("I", 1, pollution=4)
        cell, _ = grow_once(previous, populated(1, 1), PLENTY)
        assert cell.pollution == 5


class TestOther:
    def test_never_grows(self) -> None:
        for symbol in ("T", "#", "-"):
            previous = make_cell(symbol, powerline=True)
            cell, pool = grow_once(previous, populated(*(5,) * 8), PLENTY)
            assert cell.population == 0
            assert cell.pollution == 0
            assert pool == PLENTY


def test_decision_reads_previous_not_current() -> None:
    previous = make_cell("R", 0)
    cell = make_cell("R", 0)
    cell.is_powerline_adjacent = True  # only the current copy is flagged
    grow(cell, previous, populated(0, 0), PLENTY)
    assert cell.population == 0
