"""Entry point for ``python -m sprawl``.

Loads a config (YAML, or the legacy ``.txt`` format), reads the region
layout it points at, and either prints the simulation to the terminal or
opens a Pygame window to watch the city grow.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

from sprawl.simulation.config import ConfigError, SimulationConfig
from sprawl.simulation.engine import SimulationEngine
from sprawl.ui.text import (
    format_grid,
    format_pollution,
    format_resources,
    format_stats,
)
from sprawl.world.layout import LayoutError

logger = logging.getLogger("sprawl")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def print_refresh(state: int, engine: SimulationEngine) -> None:
    """Print the region state for one refresh."""
    print(f"STATE: {state}")
    print(f"Time Step: {engine.tick}")
    print(format_grid(engine.region.current))
    print(format_resources(engine.region.stats()))
    print()


def run_text(engine: SimulationEngine) -> None:
    """Run the simulation to completion, printing as it goes."""
    print("INITIAL REGION STATE")
    print(format_grid(engine.region.current))
    print()

    engine.run(on_refresh=print_refresh)

    print("FINAL REGION STATE")
    print(format_grid(engine.region.current))
    stats = engine.finish()
    print(format_stats(stats))
    print()
    print("FINAL POLLUTION SPREAD")
    print(format_pollution(engine.region.current))


def main() -> None:
    """Parse CLI args, create engine, run in the terminal or a window."""
    parser = argparse.ArgumentParser(
        prog="sprawl",
        description="sprawl - zoned urban growth simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML or .txt config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--gui",
        action="store_true",
        help="Watch the simulation in a Pygame window",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=24,
        help="Pixel size per grid cell (default: 24)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=2.0,
        help="Simulation ticks per second (default: 2)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every step",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = SimulationConfig.load(args.config)
        engine = SimulationEngine.from_config(config)
    except (FileNotFoundError, ConfigError, LayoutError) as exc:
        logger.error("%s", exc)
        raise SystemExit(2) from exc

    if args.gui:
        from sprawl.ui.pygame_client import PygameRenderer

        renderer = PygameRenderer(
            engine=engine,
            cell_size=args.cell_size,
            ticks_per_second=args.speed,
        )
        renderer.run(fps=args.fps)
    else:
        run_text(engine)


if __name__ == "__main__":
    main()
