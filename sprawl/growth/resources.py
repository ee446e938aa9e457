"""ResourcePool — city-wide workers and goods available during one step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from sprawl.world.statistics import available_goods, available_workers

if TYPE_CHECKING:
    from sprawl.world.grid import Grid


@dataclass(frozen=True)
class ResourcePool:
    """Workers and goods left to hand out this step.

    The pool is computed from the previous snapshot and threaded through
    the ordered cell visits; each visit gets back a new pool.  Starting
    values may be negative when demand already exceeds supply, in which
    case nothing can be afforded.

    Attributes:
        workers: Available workers.
        goods: Available goods.
    """

    workers: int
    goods: int

    @classmethod
    def from_grid(cls, grid: Grid) -> ResourcePool:
        return cls(workers=available_workers(grid), goods=available_goods(grid))

    def can_afford(self, workers: int = 0, goods: int = 0) -> bool:
        """True if the pool covers the request; unrequested kinds are ignored."""
        return (workers <= 0 or self.workers >= workers) and (
            goods <= 0 or self.goods >= goods
        )

    def consume(self, workers: int = 0, goods: int = 0) -> ResourcePool:
        """Return the pool left after taking ``workers`` and ``goods``.

        Raises:
            ValueError: If the pool cannot cover the request.
        """
        if not self.can_afford(workers, goods):
            msg = (
                f"cannot take {workers} workers and {goods} goods "
                f"from {self.workers} workers and {self.goods} goods"
            )
            raise ValueError(msg)
        return ResourcePool(workers=self.workers - workers, goods=self.goods - goods)
