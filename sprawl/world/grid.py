"""Grid — one complete snapshot of the region.

The grid is an arena of cells addressed as ``cells[y][x]``.  Neighbour
relations are coordinate lists resolved through the arena, which keeps
each snapshot self-contained: copying a grid means copying cell values
and rebuilding adjacency.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from sprawl.world.adjacency import track_adjacency
from sprawl.world.cell import Cell


@dataclass
class Grid:
    """A rectangular snapshot of zoned cells.

    Attributes:
        cells: 2D list of Cell objects indexed as ``cells[y][x]``.
    """

    cells: list[list[Cell]]

    @classmethod
    def from_layout(cls, rows: Sequence[Sequence[str]]) -> Grid:
        """Build an initial grid from a table of zone symbols.

        ``R``, ``C`` and ``I`` become residential, commercial and
        industrial cells; any other symbol becomes an OTHER cell that
        keeps the symbol.  Adjacency is built before returning.

        Args:
            rows: Symbols in reading order, one sequence per row.

        Returns:
            A grid with all populations and pollution at zero.
        """
        grid = cls(
            cells=[
                [Cell.from_symbol(x, y, symbol) for x, symbol in enumerate(row)]
                for y, row in enumerate(rows)
            ],
        )
        track_adjacency(grid.cells)
        return grid

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over all cells in reading order (row, then column)."""
        for row in self.cells:
            yield from row

    def cell_at(self, x: int, y: int) -> Cell:
        """Return the cell at grid coordinates ``(x, y)``.

        Args:
            x: Column index.
            y: Row index.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        if not (0 <= y < self.height and 0 <= x < len(self.cells[y])):
            msg = f"({x}, {y}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)
        return self.cells[y][x]

    def neighbours(self, x: int, y: int) -> list[Cell]:
        """Return the cells related to ``(x, y)`` in this snapshot."""
        return [self.cells[ny][nx] for nx, ny in self.cell_at(x, y).neighbours]

    def adjacent_population(self, x: int, y: int) -> int:
        """Return the summed population of the cells around ``(x, y)``."""
        return sum(n.population for n in self.neighbours(x, y))

    def snapshot(self) -> Grid:
        """Return an independent copy with its own adjacency."""
        grid = Grid(cells=[[cell.copy() for cell in row] for row in self.cells])
        track_adjacency(grid.cells)
        return grid

    def processing_order(self) -> list[Cell]:
        """Return all cells in the order growth is applied for one step.

        Commercial cells come first, then industrial, residential and
        other.  Within a zone, larger populations go first, then larger
        adjacent populations, then lower row, then lower column.  The
        order decides who gets workers and goods when they run short.
        """
        return sorted(
            self,
            key=lambda c: (
                -c.zone.priority,
                -c.population,
                -self.adjacent_population(c.x, c.y),
                c.y,
                c.x,
            ),
        )

    def population_array(self) -> NDArray[np.int64]:
        """Return populations as a ``(height, width)`` array."""
        return np.array(
            [[cell.population for cell in row] for row in self.cells],
            dtype=np.int64,
        )

    def pollution_array(self) -> NDArray[np.int64]:
        """Return pollution as a ``(height, width)`` array."""
        return np.array(
            [[cell.pollution for cell in row] for row in self.cells],
            dtype=np.int64,
        )
