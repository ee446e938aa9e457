"""Shared fixtures for the sprawl test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from sprawl.simulation.config import SimulationConfig
from sprawl.simulation.region import Region
from sprawl.world.grid import Grid

POWERLINE_LAYOUT = [
    ["R", "R", "R"],
    ["R", "#", "R"],
    ["R", "R", "R"],
]

CITY_LAYOUT = [
    list("--T#TTT-"),
    list("-III-C--"),
    list("-III#CC-"),
    list("-III-CC-"),
    list("----#---"),
    list("-RRR#RRR"),
    list("-RRR#RRR"),
    list("-RRR#---"),
]


@pytest.fixture
def powerline_grid() -> Grid:
    """A 3x3 residential grid around a powerline cell."""
    return Grid.from_layout(POWERLINE_LAYOUT)


@pytest.fixture
def powerline_region() -> Region:
    return Region.from_layout(POWERLINE_LAYOUT)


@pytest.fixture
def city_layout() -> list[list[str]]:
    """An 8x8 mixed-zone layout."""
    return [row[:] for row in CITY_LAYOUT]


@pytest.fixture
def city_region(city_layout: list[list[str]]) -> Region:
    return Region.from_layout(city_layout)


@pytest.fixture
def layout_file(tmp_path: Path) -> Path:
    """The 3x3 powerline layout written as a CSV file."""
    path = tmp_path / "region.csv"
    path.write_text("\n".join(",".join(row) for row in POWERLINE_LAYOUT) + "\n")
    return path


@pytest.fixture
def default_config(layout_file: Path) -> SimulationConfig:
    """A config pointing at ``layout_file`` (no YAML file needed)."""
    return SimulationConfig(region_layout=layout_file, time_limit=20, refresh_rate=1)
