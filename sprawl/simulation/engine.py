"""SimulationEngine — the time-step driver.

Owns a Region and the run policy around it:

1. Step the region once per tick.
2. Every ``refresh_rate`` ticks, hand the state to a reporting callback.
3. Stop at ``time_limit`` ticks or as soon as a step changes nothing.
4. Finish by recording the final statistics and spreading pollution once.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from sprawl.simulation.config import SimulationConfig
from sprawl.simulation.region import Region
from sprawl.world.layout import read_layout
from sprawl.world.statistics import RegionStats

logger = logging.getLogger(__name__)

RefreshCallback = Callable[[int, "SimulationEngine"], None]


@dataclass
class SimulationEngine:
    """Drives a region forward step by step.

    Attributes:
        config: Loaded simulation configuration.
        region: The simulated region.
        tick: Number of steps taken so far.
        refreshes: Number of refresh reports issued so far.
        final_stats: Statistics recorded by ``finish()``, or None while
            still running.
    """

    config: SimulationConfig
    region: Region
    tick: int = 0
    refreshes: int = 0
    final_stats: RegionStats | None = field(default=None, init=False)

    @property
    def finished(self) -> bool:
        return self.final_stats is not None

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SimulationEngine:
        """Read the configured layout and build an engine around it."""
        config.validate()
        region = Region.from_layout(read_layout(config.region_layout))
        return cls(config=config, region=region)

    def step(self) -> None:
        """Advance the region by one tick."""
        remaining = self.region.step()
        self.tick += 1
        logger.debug(
            "tick %d done: %d workers and %d goods unused",
            self.tick,
            remaining.workers,
            remaining.goods,
        )

    def should_stop(self) -> bool:
        """True once the time limit is reached or the region is stable."""
        return self.tick >= self.config.time_limit or self.region.is_stable

    def run(self, on_refresh: RefreshCallback | None = None) -> None:
        """Step until the time limit is reached or the region is stable.

        Does not call ``finish()``, so the final grid can be reported
        before pollution is spread.

        Args:
            on_refresh: Called as ``on_refresh(state, engine)`` every
                ``refresh_rate`` ticks, with ``state`` counting reports
                from 1.
        """
        while not self.should_stop():
            self.step()
            if self.tick % self.config.refresh_rate == 0:
                self.refreshes += 1
                if on_refresh is not None:
                    on_refresh(self.refreshes, self)

        if self.region.is_stable:
            logger.info("region stable after %d steps", self.tick)
        else:
            logger.info("time limit of %d steps reached", self.tick)

    def finish(self) -> RegionStats:
        """Record final statistics and spread pollution, once.

        Workers, goods and populations are taken before the spread; the
        returned total pollution is measured after it.  Calling this
        again returns the same result without spreading a second time.
        """
        if self.final_stats is not None:
            return self.final_stats

        before = self.region.stats()
        self.region.spread_pollution()
        after = self.region.stats()
        self.final_stats = RegionStats(
            available_workers=before.available_workers,
            available_goods=before.available_goods,
            residential=before.residential,
            commercial=before.commercial,
            industrial=before.industrial,
            total_population=before.total_population,
            total_pollution=after.total_pollution,
        )
        logger.debug("final stats: %s", self.final_stats)
        return self.final_stats
