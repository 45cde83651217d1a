"""Game objects: rocket stages, the rocket itself and the scenery of the world."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

WORLD_WIDTH = 10000
WORLD_HEIGHT = 20000
GROUND_LEVEL = 1

_INT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63


@dataclass(frozen=True)
class Stage:
    """Characteristics of one rocket stage."""

    name: str
    max_thrust_x: float
    max_thrust_y: float
    bottom_sprite: tuple[str, ...]
    fuel_consumption_rate: float


ROCKET_STAGES: tuple[Stage, ...] = (
    Stage(
        name="Основная",
        max_thrust_x=2.0,
        max_thrust_y=15.0,
        bottom_sprite=("  /\\  ",),
        fuel_consumption_rate=1.0,
    ),
    Stage(
        name="Ускоритель",
        max_thrust_x=1.0,
        max_thrust_y=25.0,
        bottom_sprite=(" /||\\ ",),
        fuel_consumption_rate=2.0,
    ),
    Stage(
        name="Маневровый",
        max_thrust_x=3.5,
        max_thrust_y=10.0,
        bottom_sprite=(" <||> ",),
        fuel_consumption_rate=0.7,
    ),
)

ROCKET_BODY: tuple[str, ...] = (
    "  /\\  ",
    " |==| ",
    " |  | ",
)

ROCKET_SPRITE: tuple[str, ...] = (
    "  /\\  ",
    " |==| ",
    " |  | ",
    "  /\\  ",
)

EXPLOSION_SPRITE: tuple[str, ...] = (
    "   ***   ",
    "  *****  ",
    " ******* ",
    "*********",
    " ******* ",
    "  *****  ",
    "   ***   ",
)

CLOUD_SPRITE: tuple[str, ...] = (
    "  ~~  ",
    "~~~~~~",
    "  ~~  ",
)

TREE_SPRITE: tuple[str, ...] = (
    "  ^  ",
    " /|\\ ",
    "  |  ",
)


def _spawn_position() -> tuple[int, int]:
    x = WORLD_WIDTH // 2 - len(ROCKET_SPRITE[0]) // 2
    y = GROUND_LEVEL - len(ROCKET_SPRITE)
    return x, y


@dataclass
class Rocket:
    """State of the rocket; (x, y) is the top-left corner of its sprite."""

    x: int = 0
    y: int = 0
    vx: float = 0.0
    vy: float = 0.0
    thrust_x: float = 0.0
    thrust_y: float = 0.0
    fuel: float = 0.0
    accumulated_x: float = 0.0
    accumulated_y: float = 0.0
    active_stage: int = 0

    def sprite(self) -> list[str]:
        """Full sprite: the body followed by the nozzles of the active stage.

        An out-of-range stage index is reset to the first stage.
        """
        if not 0 <= self.active_stage < len(ROCKET_STAGES):
            self.active_stage = 0
        return [*ROCKET_BODY, *ROCKET_STAGES[self.active_stage].bottom_sprite]

    def respawn(self) -> None:
        """Put the rocket back on the launch pad after a crash."""
        self.x, self.y = _spawn_position()
        self.vx = 0.0
        self.vy = 0.0
        self.fuel = 100.0


@dataclass(frozen=True)
class Cloud:
    x: int
    y: int
    sprite: tuple[str, ...] = CLOUD_SPRITE


@dataclass(frozen=True)
class Star:
    x: int
    y: int


@dataclass(frozen=True)
class Tree:
    x: int
    y: int
    sprite: tuple[str, ...] = TREE_SPRITE


def _rng(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def init_stars(n: int, rng: random.Random | None = None) -> list[Star]:
    """Generate n stars scattered over the world width."""
    rng = _rng(rng)
    return [Star(x=rng.randrange(WORLD_WIDTH), y=rng.randrange(GROUND_LEVEL)) for _ in range(n)]


def init_clouds(n: int, rng: random.Random | None = None) -> list[Cloud]:
    """Generate n clouds in the band 10 <= y < 30."""
    rng = _rng(rng)
    return [Cloud(x=rng.randrange(WORLD_WIDTH), y=10 + rng.randrange(20)) for _ in range(n)]


def init_trees(n: int, rng: random.Random | None = None) -> list[Tree]:
    """Generate n trees standing on the ground."""
    rng = _rng(rng)
    return [Tree(x=rng.randrange(WORLD_WIDTH), y=GROUND_LEVEL - len(TREE_SPRITE)) for _ in range(n)]


@dataclass
class World:
    """The scenery of the game world."""

    stars: list[Star] = field(default_factory=list)
    clouds: list[Cloud] = field(default_factory=list)
    trees: list[Tree] = field(default_factory=list)

    @classmethod
    def generate(
        cls,
        stars: int = 100,
        clouds: int = 200,
        trees: int = 200,
        rng: random.Random | None = None,
    ) -> World:
        """Create a world with the given numbers of stars, clouds and trees."""
        rng = _rng(rng)
        return cls(
            stars=init_stars(stars, rng),
            clouds=init_clouds(clouds, rng),
            trees=init_trees(trees, rng),
        )


def _wrap_int64(value: int) -> int:
    value &= _INT64_MASK
    return value - (1 << 64) if value & _INT64_SIGN else value


def is_star_at(x: int, y: int) -> bool:
    """Whether a star shows at world coordinates (x, y), by a fixed hash."""
    h = _wrap_int64(_wrap_int64(x * 73856093) ^ _wrap_int64(y * 19349663))
    if h < 0:
        h = _wrap_int64(-h)
    if h < 0:
        # Only the most negative 64-bit value survives negation; its remainder is negative.
        return True
    return h % 100 < 3


def launch_rocket(hover_thrust: float) -> Rocket:
    """A fully fuelled rocket standing on the launch pad in the middle of the world."""
    x, y = _spawn_position()
    return Rocket(x=x, y=y, thrust_y=hover_thrust, fuel=10000.0, active_stage=0)