import pytest
from PIL import Image


def save_frames(directory, levels, size=(8, 4), name="{:06d}.png"):
    """Write one solid grey PNG per level, named by 1-based index."""
    directory.mkdir(parents=True, exist_ok=True)
    paths = []
    for i, level in enumerate(levels, start=1):
        path = directory / name.format(i)
        Image.new("L", size, level).save(path)
        paths.append(path)
    return paths


@pytest.fixture
def make_frames(tmp_path):
    def _make(levels, **kwargs):
        return save_frames(tmp_path / "frames", levels, **kwargs)

    return _make


class RecordingScreen:
    """Screen stand-in that records what was shown, optionally advancing a fake clock."""

    def __init__(self, clock=None, render_time=None):
        self.clock = clock
        self.render_time = render_time or {}
        self.shown = []
        self.times = []

    def show(self, text):
        if self.clock is not None:
            self.times.append(self.clock())
            self.clock.advance(self.render_time.get(len(self.shown), 0.0))
        self.shown.append(text)


class FakeClock:
    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds
