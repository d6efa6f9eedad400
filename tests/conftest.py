import pytest

from blackwall.game import Game


@pytest.fixture(autouse=True)
def isolate_cwd(tmp_path, monkeypatch):
    # Keep stray save files out of the working tree.
    monkeypatch.chdir(tmp_path)
    yield


@pytest.fixture
def game(tmp_path):
    return Game(seed=1, save_path=tmp_path / "save_data.dat")


class FakeRenderer:
    """Stand-in for ``Renderer`` that records frames instead of drawing."""

    def __init__(self, keys=None, size=(80, 36)):
        self.keys = list(keys or [])
        self._size = size
        self.frames = []
        self.clears = 0

    def size(self):
        return self._size

    def read_keys(self):
        keys, self.keys = self.keys, []
        return keys

    def clear(self):
        self.clears += 1

    def draw_grid(self, glyphs, colors=None):
        self.frames.append(["".join(row) for row in glyphs])


@pytest.fixture
def fake_renderer():
    return FakeRenderer()
