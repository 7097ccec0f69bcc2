import pytest

from verletring.simulation import BODY_SPACING, BOUND_RADIUS, Simulation
from verletring.vector import Vec2

DT = 1.0 / 480.0


class FakePointer:
    def __init__(self, pressed, where):
        self.pressed = pressed
        self.where = where
        self.queries = 0

    def is_left_mouse_button_down(self):
        self.queries += 1
        return self.pressed

    def mouse_world_position(self):
        return self.where


def test_creates_five_bodies_in_a_row():
    sim = Simulation()
    assert len(sim.bodies) == 5
    for left, right in zip(sim.bodies, sim.bodies[1:]):
        assert (right.position - left.position).x == pytest.approx(BODY_SPACING)
        assert right.position.y == 0.0


def test_constraints_form_a_closed_ring():
    sim = Simulation()
    assert len(sim.constraints) == len(sim.bodies)
    for i, constraint in enumerate(sim.constraints):
        assert constraint.b1 is sim.bodies[i]
        assert constraint.b2 is sim.bodies[(i + 1) % len(sim.bodies)]


def test_ring_closing_spring_spans_the_row():
    sim = Simulation()
    closing = sim.constraints[-1]
    expected = (sim.bodies[-1].position - sim.bodies[0].position).length()
    assert closing.initial_length == pytest.approx(expected)


def test_resting_ring_stays_still():
    sim = Simulation(FakePointer(False, Vec2()))
    before = [b.position for b in sim.bodies]
    for _ in range(10):
        sim.update(DT)
    for body, start in zip(sim.bodies, before):
        assert tuple(body.position) == pytest.approx(tuple(start), abs=1e-9)


def test_update_resets_acceleration():
    sim = Simulation()
    sim.bodies[2].position = Vec2(12.0, 3.0)
    sim.update(DT)
    for body in sim.bodies:
        assert tuple(body.acceleration) == (0.0, 0.0)


def test_damping_slows_a_free_body():
    sim = Simulation()
    sim.constraints.clear()
    body = sim.bodies[1]
    body.set_velocity(Vec2(30.0, 40.0), DT)
    before = body.velocity()
    sim.update(DT)
    after = body.velocity()
    assert after.length() < before.length()
    assert tuple(after.normalized()) == pytest.approx(tuple(before.normalized()))


def test_body_outside_bound_is_clamped():
    sim = Simulation()
    sim.constraints.clear()
    body = sim.bodies[3]
    body.position = Vec2(200.0, 150.0)
    body.last_position = body.position
    sim.update(DT)
    assert body.last_position.length() == pytest.approx(BOUND_RADIUS)
    assert tuple(body.last_position.normalized()) == pytest.approx(
        tuple(Vec2(200.0, 150.0).normalized())
    )


def test_pointer_drags_first_body():
    target = Vec2(10.0, 20.0)
    sim = Simulation(FakePointer(True, target))
    sim.update(DT)
    first = sim.bodies[0]
    assert tuple(first.last_position) == pytest.approx(tuple(target))
    assert (first.position - target).length() < 1.0


def test_pointer_queried_only_for_first_body():
    pointer = FakePointer(False, Vec2())
    sim = Simulation(pointer)
    sim.update(DT)
    sim.update(DT)
    assert pointer.queries == 2


def test_released_pointer_does_not_move_body():
    sim = Simulation(FakePointer(False, Vec2(50.0, 50.0)))
    start = sim.bodies[0].position
    sim.update(DT)
    assert tuple(sim.bodies[0].position) == pytest.approx(tuple(start), abs=1e-9)


def test_cleanup_empties_simulation():
    sim = Simulation()
    sim.cleanup()
    assert sim.bodies == []
    assert sim.constraints == []