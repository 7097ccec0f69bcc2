"""A spring holding two bodies at their initial separation."""

from __future__ import annotations

from verletring.body import Body


class Constraint:
    """Spring between two bodies with rest length taken at creation."""

    k: float = 100.0

    def __init__(self, b1: Body, b2: Body) -> None:
        self.b1 = b1
        self.b2 = b2
        self.initial_length = (b1.position - b2.position).length()

    def satisfy(self) -> None:
        """Push both bodies' accelerations towards the rest length."""
        delta = self.b2.position - self.b1.position

        x = self.b1.position - ((-delta).normalized() * self.initial_length + self.b2.position)
        self.b1.accelerate(x * -self.k)

        x = self.b2.position - (delta.normalized() * self.initial_length + self.b1.position)
        self.b2.accelerate(x * -self.k)