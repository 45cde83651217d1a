import io
from contextlib import contextmanager

import pytest
from blessed.keyboard import Keystroke

from rocketsim.render import Canvas, Color, Style
from rocketsim.terminal import Key, Terminal, key_from_input


class FakeTerm:
    def __init__(self, keys=(), width=80, height=24):
        self.stream = io.StringIO()
        self.width = width
        self.height = height
        self.normal = "|"
        self.events = []
        self._keys = list(keys)

    @contextmanager
    def _track(self, name):
        self.events.append(f"enter {name}")
        yield
        self.events.append(f"exit {name}")

    def fullscreen(self):
        return self._track("fullscreen")

    def raw(self):
        return self._track("raw")

    def hidden_cursor(self):
        return self._track("hidden_cursor")

    def move_xy(self, x, y):
        return f"<{x},{y}>"

    def color_rgb(self, r, g, b):
        return f"[fg {r},{g},{b}]"

    def on_color_rgb(self, r, g, b):
        return f"[bg {r},{g},{b}]"

    def inkey(self, timeout=None):
        return self._keys.pop(0) if self._keys else Keystroke("")


@pytest.mark.parametrize(
    "name, char, expected",
    [
        ("KEY_UP", "", Key.UP),
        ("KEY_DOWN", "", Key.DOWN),
        ("KEY_LEFT", "", Key.LEFT),
        ("KEY_RIGHT", "", Key.RIGHT),
        ("KEY_ESCAPE", "\x1b", Key.QUIT),
        (None, "\x03", Key.QUIT),
        (None, "w", Key.UP),
        (None, "W", Key.UP),
        (None, "s", Key.DOWN),
        (None, "a", Key.LEFT),
        (None, "D", Key.RIGHT),
        (None, " ", Key.STAGE),
        (None, "q", Key.QUIT),
        (None, "Q", Key.QUIT),
    ],
)
def test_key_from_input_maps_keys(name, char, expected):
    assert key_from_input(name, char) is expected


@pytest.mark.parametrize("name, char", [(None, "x"), ("KEY_F1", ""), (None, "1")])
def test_key_from_input_ignores_other_keys(name, char):
    assert key_from_input(name, char) is None


def test_size_reports_terminal_dimensions():
    assert Terminal(FakeTerm(width=120, height=40)).size() == (120, 40)


def test_poll_keys_drains_queue_and_skips_unknown():
    strokes = [
        Keystroke("\x1b[A", name="KEY_UP"),
        Keystroke("x"),
        Keystroke(" "),
        Keystroke("q"),
    ]
    fake = FakeTerm(keys=strokes)
    keys = list(Terminal(fake).poll_keys())
    assert keys == [Key.UP, Key.STAGE, Key.QUIT]
    assert list(Terminal(fake).poll_keys()) == []


def test_context_manager_sets_up_and_restores_in_reverse_order():
    fake = FakeTerm()
    with Terminal(fake) as term:
        assert isinstance(term, Terminal)
        assert fake.events == ["enter fullscreen", "enter raw", "enter hidden_cursor"]
    assert fake.events[3:] == ["exit hidden_cursor", "exit raw", "exit fullscreen"]


def test_present_writes_every_row_with_styles():
    fake = FakeTerm()
    canvas = Canvas(3, 2)
    canvas.set_content(1, 0, "X", Style(Color.RED, Color.BLACK))
    canvas.set_content(2, 1, "Y")
    Terminal(fake).present(canvas)
    out = fake.stream.getvalue()
    assert out.startswith("<0,0>")
    assert "<0,1>" in out
    assert "[fg 255,0,0][bg 0,0,0]X" in out
    plain = out.replace("|", "").replace("[fg 255,0,0][bg 0,0,0]", "")
    assert plain == "<0,0> X <0,1>  Y"