"""Window, main loop and pointer input for the ring simulation."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

import pygame

from verletring.renderer import Renderer
from verletring.simulation import Simulation
from verletring.vector import Vec2

FIXED_DELTA = 1.0 / 60.0
SUBSTEPS = 8
MAX_FRAME_TIME = 0.1
WINDOW_TITLE = "Test window"


def screen_to_world(x: float, y: float, width: int, height: int, zoom: float) -> Vec2:
    """World position of a pixel on a surface of the given size."""
    aspect_ratio = width / height
    xpos = 2.0 * (x / width) - 1.0
    ypos = -(2.0 * (y / height) - 1.0)
    return Vec2(xpos * zoom * aspect_ratio, ypos * zoom)


def step_simulation(sim: Simulation, accumulator: float, frame_time: float) -> float:
    """Run as many fixed steps as the elapsed time allows.

    Each fixed step is split into equal substeps. The frame time is capped
    so a long pause cannot trigger a burst of updates. Returns the time
    left over for the next frame.
    """
    accumulator += min(frame_time, MAX_FRAME_TIME)
    while accumulator >= FIXED_DELTA:
        for _ in range(SUBSTEPS):
            sim.update(FIXED_DELTA / SUBSTEPS)
        accumulator -= FIXED_DELTA
    return accumulator


class App:
    """Interactive window showing the simulation; drag the first body with the left button."""

    def __init__(self, width: int = 512, height: int = 512, zoom: float = 100.0) -> None:
        self.width = width
        self.height = height
        self.zoom = zoom
        self.aspect_ratio = width / height

    def run(self) -> None:
        """Open the window and run until it is closed."""
        try:
            pygame.init()
            surface = pygame.display.set_mode((self.width, self.height), pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"Failed to create a window: {exc}", file=sys.stderr)
            pygame.quit()
            return
        pygame.display.set_caption(WINDOW_TITLE)

        renderer = Renderer(surface, self.zoom)
        sim = Simulation(self)

        last_time = time.perf_counter()
        accumulator = 0.0
        running = True
        try:
            while running:
                surface = pygame.display.get_surface()
                self.width, self.height = surface.get_size()
                self.aspect_ratio = self.width / self.height
                renderer.surface = surface
                renderer.zoom = self.zoom

                current_time = time.perf_counter()
                accumulator = step_simulation(sim, accumulator, current_time - last_time)
                last_time = current_time

                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False

                renderer.clear()
                renderer.render(sim)
                pygame.display.flip()
        finally:
            sim.cleanup()
            pygame.quit()

    def mouse_world_position(self) -> Vec2:
        """Pointer position in world coordinates."""
        x, y = pygame.mouse.get_pos()
        return screen_to_world(x, y, self.width, self.height, self.zoom)

    def is_left_mouse_button_down(self) -> bool:
        """Whether the left mouse button is held."""
        return bool(pygame.mouse.get_pressed()[0])

    def is_right_mouse_button_down(self) -> bool:
        """Whether the right mouse button is held."""
        return bool(pygame.mouse.get_pressed()[2])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive simulation."""
    parser = argparse.ArgumentParser(
        prog="verletring",
        description="A ring of spring-linked bodies; drag the first one with the left mouse button.",
    )
    parser.parse_args(argv)
    App().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())