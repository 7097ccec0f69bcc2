"""A ring of spring-linked bodies confined to a circle."""

from __future__ import annotations

from typing import Optional, Protocol

from verletring.body import Body
from verletring.constraint import Constraint
from verletring.vector import Vec2

BODY_COUNT = 5
BODY_SPACING = 5.0
BOUND_RADIUS = 90.0
DAMPING = -1000.0


class PointerInput(Protocol):
    """Source of the pointer state used to drag the first body."""

    def is_left_mouse_button_down(self) -> bool:
        """Whether the dragging button is held."""
        ...

    def mouse_world_position(self) -> Vec2:
        """Pointer position in world coordinates."""
        ...


class Simulation:
    """Verlet simulation of bodies joined in a closed ring of springs."""

    def __init__(self, pointer: Optional[PointerInput] = None) -> None:
        self.pointer = pointer
        self.gravity = Vec2(0.0, -1000.0)
        self.bodies: list[Body] = [
            Body(1.0, 1.0, Vec2((i - 0.5) * BODY_SPACING, 0.0)) for i in range(BODY_COUNT)
        ]
        self.constraints: list[Constraint] = [
            Constraint(body, self.bodies[(i + 1) % len(self.bodies)])
            for i, body in enumerate(self.bodies)
        ]

    def update(self, dt: float) -> None:
        """Advance the simulation by one step of length dt."""
        self._apply_accelerations()
        self._apply_constraints(dt)
        self._update_positions(dt)

    def cleanup(self) -> None:
        """Release the bodies and constraints."""
        self.constraints.clear()
        self.bodies.clear()

    def _apply_accelerations(self) -> None:
        for body in self.bodies:
            body.accelerate(body.velocity() * DAMPING)

    def _apply_constraints(self, dt: float) -> None:
        for i, body in enumerate(self.bodies):
            for constraint in self.constraints:
                constraint.satisfy()

            if body.position.length() > BOUND_RADIUS:
                body.position = body.position.normalized() * BOUND_RADIUS

            if i == 0 and self.pointer is not None and self.pointer.is_left_mouse_button_down():
                body.position = self.pointer.mouse_world_position()
                body.set_velocity(Vec2(), dt)
                body.acceleration = Vec2()

    def _update_positions(self, dt: float) -> None:
        for body in self.bodies:
            velocity = body.position - body.last_position
            body.last_position = body.position
            body.position = body.position + velocity + body.acceleration * (dt * dt)
            body.acceleration = Vec2()