"""Cell — a single zoned parcel in the region grid.

Cells only carry values.  Neighbour relations are stored as ``(x, y)``
coordinates and resolved through the owning ``Grid``, so copying a grid
never has to untangle references between cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

POWERLINE_SYMBOLS = frozenset({"T", "#"})


class ZoneType(Enum):
    """Land-use category of a cell."""

    RESIDENTIAL = "R"
    COMMERCIAL = "C"
    INDUSTRIAL = "I"
    OTHER = "other"

    @classmethod
    def from_symbol(cls, symbol: str) -> ZoneType:
        """Return the zone for a layout symbol; unknown symbols are OTHER."""
        for zone in (cls.RESIDENTIAL, cls.COMMERCIAL, cls.INDUSTRIAL):
            if zone.value == symbol:
                return zone
        return cls.OTHER

    @property
    def priority(self) -> int:
        """Processing priority when resources are contested (higher first)."""
        return _PRIORITY[self]


_PRIORITY = {
    ZoneType.COMMERCIAL: 3,
    ZoneType.INDUSTRIAL: 2,
    ZoneType.RESIDENTIAL: 1,
    ZoneType.OTHER: 0,
}


@dataclass
class Cell:
    """A single parcel of land.

    Attributes:
        x: Column position.
        y: Row position.
        zone: Land-use category.
        symbol: Layout symbol the cell was read from.
        population: Current population (never decreases).
        pollution: Current pollution (never decreases).
        is_powerline_adjacent: Whether a powerline cell touches this one.
            Cached by the adjacency pass of the snapshot that owns the cell.
        neighbours: Coordinates of the in-bounds surrounding cells.
    """

    x: int
    y: int
    zone: ZoneType
    symbol: str
    population: int = 0
    pollution: int = 0
    is_powerline_adjacent: bool = field(default=False, compare=False)
    neighbours: list[tuple[int, int]] = field(
        default_factory=list,
        compare=False,
        repr=False,
    )

    @classmethod
    def from_symbol(cls, x: int, y: int, symbol: str) -> Cell:
        """Create an empty cell for a layout symbol."""
        return cls(x=x, y=y, zone=ZoneType.from_symbol(symbol), symbol=symbol)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def is_powerline(self) -> bool:
        """True for infrastructure cells that let neighbours start growing."""
        return self.zone is ZoneType.OTHER and self.symbol in POWERLINE_SYMBOLS

    def copy(self) -> Cell:
        """Return a value copy of this cell with no neighbour relations."""
        return Cell(
            x=self.x,
            y=self.y,
            zone=self.zone,
            symbol=self.symbol,
            population=self.population,
            pollution=self.pollution,
            is_powerline_adjacent=self.is_powerline_adjacent,
        )
