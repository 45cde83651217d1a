"""Keyboard input and screen output on a real terminal."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import ExitStack
from enum import Enum
from typing import Any

import blessed

from rocketsim.render import Canvas, Style

_CTRL_C = "\x03"


class Key(Enum):
    """The game actions a key press can stand for."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    STAGE = "stage"
    QUIT = "quit"


_NAMED_KEYS = {
    "KEY_ESCAPE": Key.QUIT,
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
}

_CHAR_KEYS = {
    _CTRL_C: Key.QUIT,
    "w": Key.UP,
    "W": Key.UP,
    "s": Key.DOWN,
    "S": Key.DOWN,
    "a": Key.LEFT,
    "A": Key.LEFT,
    "d": Key.RIGHT,
    "D": Key.RIGHT,
    " ": Key.STAGE,
    "q": Key.QUIT,
    "Q": Key.QUIT,
}


def key_from_input(name: str | None, char: str) -> Key | None:
    """Map a keystroke, given by its sequence name and its text, to a game key."""
    if name and name in _NAMED_KEYS:
        return _NAMED_KEYS[name]
    return _CHAR_KEYS.get(char)


class Terminal:
    """A full-screen terminal session in raw mode with the cursor hidden."""

    def __init__(self, term: Any = None) -> None:
        self._term = term if term is not None else blessed.Terminal(stream=sys.stdout)
        self._stack: ExitStack | None = None

    def __enter__(self) -> Terminal:
        stack = ExitStack()
        try:
            stack.enter_context(self._term.fullscreen())
            stack.enter_context(self._term.raw())
            stack.enter_context(self._term.hidden_cursor())
        except BaseException:
            stack.close()
            raise
        self._stack = stack
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._stack is not None:
            stack, self._stack = self._stack, None
            stack.close()

    def size(self) -> tuple[int, int]:
        """Width and height of the terminal in cells."""
        return self._term.width, self._term.height

    def poll_keys(self) -> Iterator[Key]:
        """Yield the game keys pressed since the last poll, without waiting."""
        while True:
            stroke = self._term.inkey(timeout=0)
            if not stroke:
                return
            key = key_from_input(getattr(stroke, "name", None), str(stroke))
            if key is not None:
                yield key

    def _style_codes(self, style: Style) -> str:
        term = self._term
        codes = [term.normal]
        if style.fg is not None:
            codes.append(term.color_rgb(style.fg.r, style.fg.g, style.fg.b))
        if style.bg is not None:
            codes.append(term.on_color_rgb(style.bg.r, style.bg.g, style.bg.b))
        return "".join(codes)

    def present(self, canvas: Canvas) -> None:
        """Draw the whole canvas onto the terminal."""
        term = self._term
        parts: list[str] = []
        for y in range(canvas.height):
            parts.append(term.move_xy(0, y))
            current: Style | None = None
            for x in range(canvas.width):
                ch, style = canvas.cell(x, y)
                if style != current:
                    parts.append(self._style_codes(style))
                    current = style
                parts.append(ch)
            parts.append(term.normal)
        term.stream.write("".join(parts))
        term.stream.flush()