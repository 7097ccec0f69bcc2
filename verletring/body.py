"""A point body integrated with position Verlet."""

from __future__ import annotations

from dataclasses import dataclass, field

from verletring.vector import Vec2


@dataclass
class Body:
    """A circular body whose velocity is implied by its last position."""

    radius: float = 1.0
    mass: float = 1.0
    position: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    last_position: Vec2 = field(init=False)

    def __post_init__(self) -> None:
        self.last_position = self.position

    def accelerate(self, a: Vec2) -> None:
        """Add to the acceleration accumulated for this step."""
        self.acceleration = self.acceleration + a

    def set_velocity(self, v: Vec2, dt: float) -> None:
        """Make the implied velocity over a step of length dt equal to v."""
        self.last_position = self.position - v * dt

    def add_velocity(self, v: Vec2, dt: float) -> None:
        """Add v to the implied velocity over a step of length dt."""
        self.last_position = self.last_position - v * dt

    def velocity(self) -> Vec2:
        """Displacement since the previous step."""
        return self.position - self.last_position