# verletring

A small interactive physics sandbox. Five bodies are joined into a closed ring
by springs. They move under position-Verlet integration with strong velocity
damping, inside a circular boundary of radius 90. Hold the left mouse button
to grab the first body and drag the ring around.

## Install

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Run

    verletring

This opens a resizable window of 512×512 pixels. The command takes no options
apart from `--help`. The simulation advances at a fixed 60 Hz, and each tick
is split into 8 substeps. Frame times longer than 0.1 s are clamped, so the
simulation never tries to catch up too far. The view shows 100 world units
from the centre to the top and bottom edges. The horizontal range scales with
the window's aspect ratio. Closing the window ends the program.

## Using the pieces

The simulation does not depend on any window. You can pass any object that
offers `is_left_mouse_button_down()` and `mouse_world_position()` to drive the
grab. You can also pass nothing, and then the grab is never used:

    from verletring.simulation import Simulation

    sim = Simulation()
    for _ in range(480):
        sim.update(1 / 480)

    for body in sim.bodies:
        print(body.position, body.velocity())

The building blocks are:

- `verletring.vector.Vec2`: an immutable 2-D vector. It supports `+`, `-`,
  negation, multiplication and division by a scalar, and unpacking, and it
  has `length()` and `normalized()`. `normalized()` raises `ValueError` for
  the zero vector.
- `verletring.body.Body`: a point body that stores its current and previous
  positions. It has `accelerate()`, `set_velocity()`, `add_velocity()` and
  `velocity()`. `velocity()` returns the displacement since the last step.
- `verletring.constraint.Constraint`: a spring with stiffness `k = 100`
  between two bodies. It pulls them back towards the distance they had when
  the spring was created.
- `verletring.simulation.Simulation`: holds the ring (`bodies`,
  `constraints`), applies the boundary and handles the mouse grab. It has
  `update(dt)` and `cleanup()`. `cleanup()` empties both lists.
- `verletring.renderer.Renderer`: draws a simulation onto a pygame surface.
  Each body is drawn as a white circle on a black background. It has
  `clear()`, `world_to_screen()` and `render()`.
- `verletring.app`: provides the `App` window and main loop, along with
  `screen_to_world()` and `step_simulation()`.

## What it does not do

- `Simulation` has a `gravity` attribute, but no step uses it, so the ring
  does not fall.
- `App.is_right_mouse_button_down()` reports the right button, but nothing
  acts on it.
- There is no way to change the number of bodies, the window size or the zoom
  from the command line. Nothing saves or loads a simulation state.