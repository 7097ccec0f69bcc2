"""Draws the simulation's bodies onto a pygame surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from verletring.vector import Vec2

if TYPE_CHECKING:
    from verletring.simulation import Simulation

BACKGROUND_COLOR = (0, 0, 0)
BODY_COLOR = (255, 255, 255)


class Renderer:
    """Maps world coordinates onto a surface and draws bodies as circles.

    The visible world spans ``zoom`` units from the centre to the top and
    bottom edges; horizontally the span is stretched by the aspect ratio.
    """

    def __init__(self, surface: pygame.Surface, zoom: float = 100.0) -> None:
        self.surface = surface
        self.zoom = zoom

    @property
    def aspect_ratio(self) -> float:
        width, height = self.surface.get_size()
        return width / height

    def clear(self, color: tuple[int, int, int] = BACKGROUND_COLOR) -> None:
        """Fill the whole surface with a single colour."""
        self.surface.fill(color)

    def world_to_screen(self, point: Vec2) -> tuple[float, float]:
        """Pixel position of a world point, with y growing downwards."""
        width, height = self.surface.get_size()
        ndc_x = point.x / self.zoom / self.aspect_ratio
        ndc_y = point.y / self.zoom
        return (ndc_x + 1.0) * 0.5 * width, (1.0 - ndc_y) * 0.5 * height

    def _pixel_radius(self, radius: float) -> int:
        height = self.surface.get_height()
        return max(1, round(radius / self.zoom * height * 0.5))

    def render(self, sim: Simulation) -> None:
        """Draw every body of the simulation."""
        for body in sim.bodies:
            sx, sy = self.world_to_screen(body.position)
            pygame.draw.circle(
                self.surface,
                BODY_COLOR,
                (round(sx), round(sy)),
                self._pixel_radius(body.radius),
            )