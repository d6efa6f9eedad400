import sys

from blackwall.constants import Color
from blackwall.renderer import Renderer


class Capture:
    def __init__(self):
        self.chunks = []

    def write(self, s):
        self.chunks.append(s)

    def flush(self):
        pass

    def take(self):
        out, self.chunks = "".join(self.chunks), []
        return out


def _renderer(monkeypatch):
    renderer = Renderer()
    monkeypatch.setattr(renderer.term, "move_xy", lambda x, y: "")
    monkeypatch.setattr(renderer.term, "clear", lambda: "", raising=False)
    out = Capture()
    monkeypatch.setattr(sys, "stdout", out)
    return renderer, out


def test_draw_grid_writes_text(monkeypatch):
    renderer, out = _renderer(monkeypatch)
    renderer.draw_grid([list("DATA"), list("BANK")])
    text = out.take()
    assert "DATA" in text
    assert "BANK" in text


def test_unchanged_rows_are_skipped(monkeypatch):
    renderer, out = _renderer(monkeypatch)
    renderer.draw_grid([list("DATA"), list("BANK")])
    out.take()
    renderer.draw_grid([list("DATA"), list("BANK")])
    assert out.take() == ""
    renderer.draw_grid([list("DATA"), list("BUNK")])
    text = out.take()
    assert "BUNK" in text
    assert "DATA" not in text


def test_colour_attribute_applied(monkeypatch):
    renderer, out = _renderer(monkeypatch)
    monkeypatch.setattr(
        renderer.term, "green", lambda text: f"<g>{text}</g>", raising=False
    )
    renderer.draw_grid([list("ab")], [[Color.AFFORDABLE, None]])
    assert "<g>a</g>b" in out.take()


def test_size_reports_real_terminal(monkeypatch):
    renderer, _ = _renderer(monkeypatch)
    monkeypatch.setattr(type(renderer.term), "width", property(lambda self: 20))
    monkeypatch.setattr(type(renderer.term), "height", property(lambda self: 10))
    assert renderer.size() == (20, 10)


def test_size_defaults_when_unknown(monkeypatch):
    renderer, _ = _renderer(monkeypatch)
    monkeypatch.setattr(type(renderer.term), "width", property(lambda self: 0))
    monkeypatch.setattr(type(renderer.term), "height", property(lambda self: None))
    assert renderer.size() == (80, 36)


class FakeScreen:
    """Records ``addstr`` calls like a curses window."""

    def __init__(self):
        self.calls = []

    def addstr(self, y, x, text, attr=0):
        self.calls.append((y, x, text, attr))

    def clear(self):
        pass

    def refresh(self):
        pass


def test_curses_path_applies_colour_attributes(monkeypatch):
    renderer, _ = _renderer(monkeypatch)
    renderer.term = FakeScreen()
    renderer.use_curses = True
    renderer._curses_attrs = {Color.AFFORDABLE: 7, Color.UNAFFORDABLE: 9}
    renderer.draw_grid(
        [list("okno")],
        [[Color.AFFORDABLE, Color.AFFORDABLE, Color.UNAFFORDABLE, None]],
    )
    assert renderer.term.calls == [(0, 0, "ok", 7), (0, 2, "n", 9), (0, 3, "o", 0)]
