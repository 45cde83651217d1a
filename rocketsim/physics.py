"""Flight physics: altitude-dependent gravity and rocket integration."""

from __future__ import annotations

from rocketsim.objects import ROCKET_STAGES, Rocket, Stage

EARTH_RADIUS = 6371000.0
STANDARD_GRAVITY = 9.80665
KARMAN_LINE = 100000.0
GAME_TO_REAL_SCALE = 100.0


def calculate_gravity(altitude: float) -> float:
    """Gravity at a game altitude, by the inverse square law."""
    altitude_m = altitude * GAME_TO_REAL_SCALE
    return STANDARD_GRAVITY * (EARTH_RADIUS / (EARTH_RADIUS + altitude_m)) ** 2


def _stage_of(rocket: Rocket) -> Stage:
    if not 0 <= rocket.active_stage < len(ROCKET_STAGES):
        raise IndexError(f"no rocket stage with index {rocket.active_stage}")
    return ROCKET_STAGES[rocket.active_stage]


def update_rocket(rocket: Rocket, dt: float, ground_level: int, hover_thrust: float) -> None:
    """Advance the rocket by dt seconds using the characteristics of its active stage."""
    altitude = float(ground_level - rocket.y)
    gravity = calculate_gravity(altitude)
    stage = _stage_of(rocket)

    if rocket.thrust_y > gravity:
        rocket.fuel -= (rocket.thrust_y - gravity) * dt * stage.fuel_consumption_rate
        if rocket.fuel < 0:
            rocket.fuel = 0.0
            rocket.thrust_y = 0.0

    efficiency_y = stage.max_thrust_y / 15.0
    efficiency_x = stage.max_thrust_x / 2.0

    applied_y = min(rocket.thrust_y, stage.max_thrust_y)
    applied_x = rocket.thrust_x
    if abs(applied_x) > stage.max_thrust_x:
        applied_x = stage.max_thrust_x if applied_x > 0 else -stage.max_thrust_x

    net_acc_y = applied_y * efficiency_y - gravity
    net_acc_x = applied_x * efficiency_x

    # Negative vy means moving up.
    rocket.vy -= net_acc_y * dt
    rocket.vx += net_acc_x * dt

    rocket.accumulated_x += rocket.vx * dt
    rocket.accumulated_y += rocket.vy * dt

    delta_x = int(rocket.accumulated_x)
    delta_y = int(rocket.accumulated_y)
    if delta_x:
        rocket.x += delta_x
        rocket.accumulated_x -= delta_x
    if delta_y:
        rocket.y += delta_y
        rocket.accumulated_y -= delta_y

    height = len(rocket.sprite())
    if rocket.y + height > ground_level and rocket.vy >= 0:
        rocket.y = ground_level - height
        rocket.vy = 0.0
        rocket.accumulated_y = 0.0

    rocket.vx *= 0.9**dt