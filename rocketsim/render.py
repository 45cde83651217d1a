"""Drawing of the scene onto a character canvas."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import ClassVar

from rocketsim.objects import GROUND_LEVEL, ROCKET_STAGES, Cloud, Rocket, Star, Tree
from rocketsim.physics import KARMAN_LINE, calculate_gravity

_EXHAUST_THRESHOLD = 0.5


@dataclass(frozen=True)
class Color:
    """A 24-bit RGB colour."""

    r: int
    g: int
    b: int

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    YELLOW: ClassVar[Color]
    PURPLE: ClassVar[Color]

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 128, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.PURPLE = Color(128, 0, 128)


@dataclass(frozen=True)
class Style:
    """Foreground and background colours of a cell; None means the terminal default."""

    fg: Color | None = None
    bg: Color | None = None

    def foreground(self, color: Color) -> Style:
        return replace(self, fg=color)

    def background(self, color: Color) -> Style:
        return replace(self, bg=color)


DEFAULT_STYLE = Style()


class Canvas:
    """A fixed-size grid of styled characters; writes outside it are ignored."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid canvas size {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[list[tuple[str, Style]]] = []
        self.clear()

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_content(self, x: int, y: int, ch: str, style: Style = DEFAULT_STYLE) -> None:
        if self._inside(x, y):
            self._cells[y][x] = (ch, style)

    def clear(self, style: Style = DEFAULT_STYLE) -> None:
        self._cells = [[(" ", style)] * self.width for _ in range(self.height)]

    def cell(self, x: int, y: int) -> tuple[str, Style]:
        if not self._inside(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the canvas")
        return self._cells[y][x]

    def row_text(self, y: int) -> str:
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(ch for ch, _ in self._cells[y])


def _columns(text: str) -> Iterator[tuple[int, str]]:
    # Each character advances the column by its UTF-8 byte length.
    offset = 0
    for ch in text:
        yield offset, ch
        offset += len(ch.encode("utf-8"))


def _to_uint8(value: float) -> int:
    return int(value) & 0xFF


def draw_sprite(
    screen: Canvas, x: int, y: int, sprite: Sequence[str], fg: Color, bg: Color
) -> None:
    """Draw a sprite; spaces are transparent."""
    style = Style(fg, bg)
    for dy, line in enumerate(sprite):
        for dx, ch in _columns(line):
            if ch != " ":
                screen.set_content(x + dx, y + dy, ch, style)


def draw_text(screen: Canvas, x: int, y: int, text: str, style: Style) -> None:
    """Write a line of text starting at (x, y)."""
    for dx, ch in _columns(text):
        screen.set_content(x + dx, y, ch, style)


def draw_text_lines(screen: Canvas, x: int, y: int, lines: Iterable[str], style: Style) -> None:
    """Write lines of text one below the other."""
    for dy, line in enumerate(lines):
        draw_text(screen, x, y + dy, line, style)


def stats_lines(rocket: Rocket, ground_level: int) -> list[str]:
    """The flight statistics shown in the corner of the screen."""
    altitude = float(ground_level - rocket.y)
    altitude_km = altitude / 10.0

    if rocket.vy < 0:
        vertical = "▲"
    elif rocket.vy > 0:
        vertical = "▼"
    else:
        vertical = ""

    if rocket.vx > 0:
        horizontal = "►"
    elif rocket.vx < 0:
        horizontal = "◄"
    else:
        horizontal = ""

    gravity = calculate_gravity(altitude)
    rate = ROCKET_STAGES[rocket.active_stage].fuel_consumption_rate

    lines = [
        f"Altitude: {altitude_km:.2f} km",
        f"Vspeed: {abs(rocket.vy):.2f} {vertical}",
        f"Hspeed: {abs(rocket.vx):.2f} {horizontal}",
        f"Thrust: V={rocket.thrust_y:.2f} H={rocket.thrust_x:.2f}",
        f"Gravity: {gravity:.2f}",
        f"Fuel: {rocket.fuel:.1f}% (Rate: {rate:.1f}x)",
    ]
    if altitude_km > KARMAN_LINE / 1000.0:
        lines.append("*** SPACE ***")
    return lines


def draw_stats(screen: Canvas, rocket: Rocket, ground_level: int) -> None:
    """Draw the flight statistics near the top-right corner."""
    style = Style(Color.WHITE, Color.BLACK)
    draw_text_lines(screen, screen.width - 25, 1, stats_lines(rocket, ground_level), style)


def get_sky_color(rocket: Rocket, ground_level: int) -> Color:
    """Sky colour of the atmospheric layer the rocket is in."""
    altitude = float(ground_level - rocket.y)
    altitude_km = altitude / 10.0

    if altitude_km < 12:
        blue = _to_uint8(255 - altitude * 5)
        return Color(100, 100, max(blue, 100))
    if altitude_km < 50:
        progress = (altitude_km - 12) / 38
        blue = _to_uint8(100 - progress * 50)
        return Color(0, 0, (blue + 50) & 0xFF)
    if altitude_km < 85:
        progress = (altitude_km - 50) / 35
        val = _to_uint8(50 - progress * 50)
        return Color(val // 2, 0, val)
    return Color.BLACK


def _visible(
    x: int, y: int, sprite: Sequence[str], screen_width: int, screen_height: int
) -> bool:
    return (
        x + len(sprite[0]) >= 0
        and x < screen_width
        and y + len(sprite) >= 0
        and y < screen_height
    )


def draw_trees(
    screen: Canvas,
    trees: Iterable[Tree],
    camera_x: int,
    camera_y: int,
    screen_width: int,
    screen_height: int,
) -> None:
    for tree in trees:
        sx, sy = tree.x - camera_x, tree.y - camera_y
        if _visible(sx, sy, tree.sprite, screen_width, screen_height):
            draw_sprite(screen, sx, sy, tree.sprite, Color.GREEN, Color.BLACK)


def draw_clouds(
    screen: Canvas,
    clouds: Iterable[Cloud],
    camera_x: int,
    camera_y: int,
    screen_width: int,
    screen_height: int,
) -> None:
    for cloud in clouds:
        sx, sy = cloud.x - camera_x, cloud.y - camera_y
        if _visible(sx, sy, cloud.sprite, screen_width, screen_height):
            draw_sprite(screen, sx, sy, cloud.sprite, Color.WHITE, Color.BLACK)


def draw_stars(
    screen: Canvas,
    camera_x: int,
    camera_y: int,
    screen_width: int,
    screen_height: int,
    stars: Iterable[Star],
    is_star_at: Callable[[int, int], bool],
) -> None:
    """Draw a star on every screen cell whose world position is_star_at selects."""
    style = Style(Color.YELLOW, Color.BLACK)
    for sy in range(screen_height):
        for sx in range(screen_width):
            if is_star_at(sx + camera_x, sy + camera_y):
                screen.set_content(sx, sy, "*", style)


def draw_ground(
    screen: Canvas,
    camera_x: int,
    camera_y: int,
    screen_width: int,
    screen_height: int,
    ground_level: int,
) -> None:
    sy = ground_level - camera_y
    if 0 <= sy < screen_height:
        style = Style(Color.GREEN, Color.BLACK)
        for sx in range(screen_width):
            screen.set_content(sx, sy, "=", style)


def draw_notification_box(screen: Canvas, screen_width: int, message: str) -> None:
    """Draw a framed message in the top-right corner."""
    box_width = len(message.encode("utf-8")) + 4
    start_x = screen_width - box_width
    end_x = start_x + box_width - 1
    style = Style(Color.PURPLE, Color.BLACK)

    for row in (0, 2):
        for x in range(start_x, end_x + 1):
            screen.set_content(x, row, "+" if x in (start_x, end_x) else "-", style)

    inner = box_width - 4
    screen.set_content(start_x, 1, "|", style)
    screen.set_content(start_x + 1, 1, " ", style)
    draw_text(screen, start_x + 1, 1, message, style)
    screen.set_content(start_x + 1 + inner, 1, " ", style)
    screen.set_content(start_x + 2 + inner, 1, " ", style)
    screen.set_content(end_x, 1, "|", style)


def draw_exhaust(screen: Canvas, rocket: Rocket, camera_x: int, camera_y: int) -> None:
    """Draw engine flames for the thrust the rocket currently applies."""
    sprite = rocket.sprite()
    width = len(sprite[0])
    height = len(sprite)
    gravity = calculate_gravity(float(GROUND_LEVEL - rocket.y))
    stage = ROCKET_STAGES[rocket.active_stage]

    blue = Style(Color.BLUE, Color.BLACK)
    red = Style(Color.RED, Color.BLACK)
    left = rocket.x - camera_x
    top = rocket.y - camera_y

    side_length = min(int(stage.max_thrust_x) + 1, 5)
    if rocket.thrust_x > _EXHAUST_THRESHOLD:
        flame = "=" * side_length + ">"
        x = left - len(flame)
    elif rocket.thrust_x < -_EXHAUST_THRESHOLD:
        flame = "<" + "=" * side_length
        x = left + width
    else:
        flame = ""
        x = left
    if flame:
        for row in (top + height // 3, top + (2 * height) // 3):
            draw_text(screen, x, row, flame, blue)

    symbols = min(max(int(stage.max_thrust_y / 5.0), 1), 6)
    if rocket.thrust_y > gravity + _EXHAUST_THRESHOLD:
        flame, row, style = "v" * symbols, top + height, red
    elif rocket.thrust_y < gravity - _EXHAUST_THRESHOLD:
        flame, row, style = "^" * symbols, top - 1, blue
    else:
        return
    x1 = left + width // 3
    x2 = left + (2 * width) // 3 - symbols
    for i, ch in enumerate(flame):
        screen.set_content(x1 + i, row, ch, style)
        screen.set_content(x2 + i, row, ch, style)