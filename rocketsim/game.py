"""The game loop: input handling, physics, collisions and frame rendering."""

from __future__ import annotations

import argparse
import random
import time
from collections.abc import Callable, Iterable, Sequence

from rocketsim.objects import (
    EXPLOSION_SPRITE,
    GROUND_LEVEL,
    ROCKET_STAGES,
    Rocket,
    World,
    is_star_at,
    launch_rocket,
)
from rocketsim.physics import STANDARD_GRAVITY, update_rocket
from rocketsim.render import (
    DEFAULT_STYLE,
    Canvas,
    Color,
    draw_clouds,
    draw_exhaust,
    draw_ground,
    draw_notification_box,
    draw_sprite,
    draw_stars,
    draw_stats,
    draw_text,
    draw_trees,
    get_sky_color,
)
from rocketsim.terminal import Key, Terminal

VERTICAL_STEP = 0.5
HORIZONTAL_STEP = 0.5
THRUST_DECAY_RATE = 0.0
SAFE_LANDING_SPEED = 20.0
COSMIC_SPEED_THRESHOLD = 100.0
CRASH_PAUSE = 2.0
FRAME_DELAY = 0.03


def process_input(rocket: Rocket, keys: Iterable[Key], dt: float) -> bool:
    """Apply the keys pressed this frame to the rocket; True means quit."""
    pressed: set[Key] = set()
    for key in keys:
        if key is Key.QUIT:
            return True
        pressed.add(key)

    if Key.STAGE in pressed:
        rocket.active_stage = (rocket.active_stage + 1) % len(ROCKET_STAGES)
    stage = ROCKET_STAGES[rocket.active_stage]

    if Key.UP in pressed:
        rocket.thrust_y = min(rocket.thrust_y + VERTICAL_STEP, stage.max_thrust_y)
    elif Key.DOWN in pressed:
        rocket.thrust_y -= VERTICAL_STEP
    else:
        rocket.thrust_y += -rocket.thrust_y * THRUST_DECAY_RATE * dt

    if Key.LEFT in pressed:
        rocket.thrust_x = max(rocket.thrust_x - HORIZONTAL_STEP, -stage.max_thrust_x)
    elif Key.RIGHT in pressed:
        rocket.thrust_x = min(rocket.thrust_x + HORIZONTAL_STEP, stage.max_thrust_x)
    else:
        rocket.thrust_x += -rocket.thrust_x * THRUST_DECAY_RATE * dt

    return False


def update_game(rocket: Rocket, dt: float, hover_thrust: float) -> None:
    """Advance the physics by dt seconds."""
    update_rocket(rocket, dt, GROUND_LEVEL, hover_thrust)


def _camera(canvas: Canvas, rocket: Rocket) -> tuple[int, int]:
    return rocket.x - canvas.width // 2, rocket.y - canvas.height // 2


def handle_collisions(
    canvas: Canvas,
    rocket: Rocket,
    on_crash: Callable[[Canvas], None] | None = None,
) -> bool:
    """Blow the rocket up if it hits the ground too fast; True if it crashed.

    The explosion is drawn onto the canvas, on_crash is given the canvas to show
    it, and the rocket is then put back on the launch pad.
    """
    if not (rocket.y + len(rocket.sprite()) >= GROUND_LEVEL and rocket.vy > SAFE_LANDING_SPEED):
        return False
    camera_x, camera_y = _camera(canvas, rocket)
    draw_sprite(
        canvas, rocket.x - camera_x, rocket.y - camera_y, EXPLOSION_SPRITE, Color.RED, Color.BLACK
    )
    if on_crash is not None:
        on_crash(canvas)
    rocket.respawn()
    return True


def render_frame(canvas: Canvas, rocket: Rocket, world: World) -> None:
    """Draw the whole scene, centred on the rocket, onto the canvas."""
    width, height = canvas.width, canvas.height
    camera_x, camera_y = _camera(canvas, rocket)
    canvas.clear(DEFAULT_STYLE.background(get_sky_color(rocket, GROUND_LEVEL)))

    draw_clouds(canvas, world.clouds, camera_x, camera_y, width, height)
    draw_stars(canvas, camera_x, camera_y, width, height, world.stars, is_star_at)
    draw_ground(canvas, camera_x, camera_y, width, height, GROUND_LEVEL)
    draw_trees(canvas, world.trees, camera_x, camera_y, width, height)
    draw_sprite(
        canvas, rocket.x - camera_x, rocket.y - camera_y, rocket.sprite(), Color.WHITE, Color.BLACK
    )
    draw_exhaust(canvas, rocket, camera_x, camera_y)
    draw_stats(canvas, rocket, GROUND_LEVEL)

    stage_name = ROCKET_STAGES[rocket.active_stage].name
    draw_text(canvas, 1, 1, "Stage:" + stage_name, DEFAULT_STYLE.foreground(Color.YELLOW))

    if rocket.vy > COSMIC_SPEED_THRESHOLD:
        draw_notification_box(canvas, width, "COSMIC SPEED!")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game in the terminal until the player quits."""
    parser = argparse.ArgumentParser(
        prog="rocketsim",
        description="Fly a rocket through the atmosphere. Arrows or WASD steer, "
        "space switches stage, q or Esc quits.",
    )
    parser.parse_args(argv)

    world = World.generate(stars=100, clouds=200, trees=200, rng=random.Random())
    hover_thrust = STANDARD_GRAVITY
    rocket = launch_rocket(hover_thrust)

    with Terminal() as term:

        def show_crash(frame: Canvas) -> None:
            term.present(frame)
            time.sleep(CRASH_PAUSE)

        canvas = Canvas(*term.size())
        last = time.monotonic()
        try:
            while True:
                now = time.monotonic()
                dt = now - last
                last = now

                if process_input(rocket, term.poll_keys(), dt):
                    return 0

                update_game(rocket, dt, hover_thrust)
                size = term.size()
                if canvas.size != size:
                    canvas = Canvas(*size)
                handle_collisions(canvas, rocket, show_crash)
                render_frame(canvas, rocket, world)
                term.present(canvas)
                time.sleep(FRAME_DELAY)
        except KeyboardInterrupt:
            return 0