"""Pygame 2D visualization for the sprawl simulation.

Renders each zone in its own colour, brightened by population, with an
optional pollution overlay.  The simulation steps at a configurable tick
rate until the engine stops, then the pollution spread is applied and
the final state stays on screen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from sprawl.simulation.engine import SimulationEngine

from sprawl.world.cell import ZoneType

# Colour palette
_BG = (20, 20, 24)
_POWERLINE = (230, 200, 40)
_OTHER = (60, 60, 66)
_POLLUTION_COLOUR = np.array([150, 90, 40], dtype=np.float64)

# (empty colour, fully grown colour) per zone
_ZONE_COLOURS: dict[ZoneType, tuple[np.ndarray, np.ndarray]] = {
    ZoneType.RESIDENTIAL: (
        np.array([20, 60, 20], dtype=np.float64),
        np.array([80, 220, 80], dtype=np.float64),
    ),
    ZoneType.COMMERCIAL: (
        np.array([20, 30, 70], dtype=np.float64),
        np.array([80, 140, 255], dtype=np.float64),
    ),
    ZoneType.INDUSTRIAL: (
        np.array([70, 50, 15], dtype=np.float64),
        np.array([240, 170, 40], dtype=np.float64),
    ),
}

# Largest population any growth rule can reach
_MAX_POPULATION = 5.0


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: ticks per second
    _SPEED_STEPS: ClassVar[list[float]] = [0.5, 1.0, 2.0, 5.0, 10.0, 30.0]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 24,
        ticks_per_second: float = 2.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            ticks_per_second: Simulation ticks per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.ticks_per_second = ticks_per_second
        self._speed_index = self._nearest_speed(ticks_per_second)
        self._tick_accumulator = 0.0

        grid = engine.region.current
        self._panel_width = 240
        self._win_w = grid.width * cell_size + self._panel_width
        self._win_h = max(grid.height * cell_size, 330)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("sprawl")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False
        self.show_pollution = False

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        return min(
            range(len(self._SPEED_STEPS)),
            key=lambda i: abs(self._SPEED_STEPS[i] - tps),
        )

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, step sim, render.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused and not self.engine.finished:
                self._tick_accumulator += self.ticks_per_second * dt
                steps = int(self._tick_accumulator)
                self._tick_accumulator -= steps
                for _ in range(steps):
                    if self.engine.should_stop():
                        self.engine.finish()
                        self.show_pollution = True
                        break
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_p:
                    self.show_pollution = not self.show_pollution
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.ticks_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_zones()
        if self.show_pollution:
            self._draw_pollution_overlay()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_zones(self) -> None:
        """Draw each cell in its zone colour scaled by population."""
        cs = self.cell_size
        grid = self.engine.region.current
        shade = np.clip(grid.population_array() / _MAX_POPULATION, 0.0, 1.0)
        for cell in grid:
            if cell.zone is ZoneType.OTHER:
                colour = _POWERLINE if cell.is_powerline else _OTHER
            else:
                lo, hi = _ZONE_COLOURS[cell.zone]
                t = float(shade[cell.y, cell.x])
                colour = (lo + t * (hi - lo)).astype(int).tolist()
            pygame.draw.rect(
                self.screen,
                colour,
                (cell.x * cs + 1, cell.y * cs + 1, cs - 2, cs - 2),
            )

    def _draw_pollution_overlay(self) -> None:
        """Draw pollution as a translucent brown overlay."""
        cs = self.cell_size
        grid = self.engine.region.current
        pollution = grid.pollution_array()
        max_val = pollution.max() if pollution.size else 0
        if max_val <= 0:
            return

        overlay = pygame.Surface((grid.width * cs, grid.height * cs), pygame.SRCALPHA)
        colour = _POLLUTION_COLOUR.astype(int).tolist()
        ys, xs = np.nonzero(pollution)
        for y, x in zip(ys.tolist(), xs.tolist(), strict=True):
            alpha = int(pollution[y, x] / max_val * 180)
            pygame.draw.rect(overlay, (*colour, alpha), (x * cs, y * cs, cs, cs))

        self.screen.blit(overlay, (0, 0))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self.engine.region.current.width * self.cell_size + 10
        y = 10
        stats = self.engine.final_stats or self.engine.region.stats()

        if self.engine.finished:
            status = "FINISHED"
        else:
            status = "PAUSED" if self.paused else "RUNNING"

        lines = [
            f"Step: {self.engine.tick}/{self.engine.config.time_limit}",
            f"Speed: {self.ticks_per_second:.1f} t/s",
            status,
            "",
            "--- Region ---",
            f"Workers: {stats.available_workers}",
            f"Goods: {stats.available_goods}",
            f"Residential: {stats.residential}",
            f"Commercial: {stats.commercial}",
            f"Industrial: {stats.industrial}",
            f"Pollution: {stats.total_pollution}",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "P: pollution",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, (200, 200, 200))
            self.screen.blit(surf, (panel_x, y))
            y += 18
