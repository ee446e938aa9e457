"""Region — the two-snapshot grid stepper.

``current`` is grown in place each step; ``previous`` is a fresh copy of
``current`` taken at the start of the step and used read-only for every
growth decision.  Only one step of history is kept.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sprawl.growth.resources import ResourcePool
from sprawl.growth.rules import grow
from sprawl.pollution.diffusion import spread_pollution
from sprawl.world.grid import Grid
from sprawl.world.statistics import RegionStats, summarize

logger = logging.getLogger(__name__)


@dataclass
class Region:
    """A simulated region.

    Attributes:
        current: The snapshot being grown.
        previous: The snapshot ``current`` was grown from in the last
            step, or None before the first step.
    """

    current: Grid
    previous: Grid | None = None

    @classmethod
    def from_layout(cls, rows: Sequence[Sequence[str]]) -> Region:
        return cls(current=Grid.from_layout(rows))

    @property
    def is_stable(self) -> bool:
        """True when the last step changed nothing."""
        return self.previous is not None and self.current == self.previous

    def step(self) -> ResourcePool:
        """Advance the region by one time step.

        1. Copy ``current`` into a new ``previous`` (with its own adjacency).
        2. Compute available workers and goods from ``previous``.
        3. Visit ``current``'s cells in processing order, growing each
           from its ``previous`` counterpart and threading the pool.

        Returns:
            The resources left unused at the end of the step.
        """
        self.previous = self.current.snapshot()
        pool = ResourcePool.from_grid(self.previous)
        logger.debug("step start: %d workers, %d goods", pool.workers, pool.goods)

        for cell in self.current.processing_order():
            pool = grow(
                cell,
                self.previous.cell_at(cell.x, cell.y),
                self.previous.neighbours(cell.x, cell.y),
                pool,
            )
        return pool

    def spread_pollution(self) -> None:
        """Run the final pollution spread on ``current``."""
        spread_pollution(self.current)

    def stats(self) -> RegionStats:
        return summarize(self.current)
