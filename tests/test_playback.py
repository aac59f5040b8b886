import io
import sys
import time

import pytest
from conftest import FakeClock, RecordingScreen

from asciiframes import playback
from asciiframes.errors import EmptyInputSet, FrameIOError, InvalidParameter
from asciiframes.playback import frame_interval, play, play_directory


def test_frame_interval():
    assert frame_interval(10) == pytest.approx(0.1)
    assert frame_interval(1000) == pytest.approx(0.001)
    assert frame_interval(5000) == pytest.approx(0.001)


@pytest.mark.parametrize("fps", [0, -5])
def test_frame_interval_rejects_non_positive(fps):
    with pytest.raises(InvalidParameter, match="--fps"):
        frame_interval(fps)


def test_steady_cadence():
    clock = FakeClock()
    screen = RecordingScreen(clock)
    frames = [f"frame {i}\n" for i in range(5)]
    assert play(frames, 10, screen, clock=clock, sleep=clock.sleep) == 5
    assert screen.shown == frames
    assert screen.times == pytest.approx([0.0, 0.1, 0.2, 0.3, 0.4])


def test_slow_frame_does_not_accumulate_drift():
    clock = FakeClock()
    # Frame 1 takes one and a half slots to render
    screen = RecordingScreen(clock, render_time={1: 0.15})
    play(["a", "b", "c", "d", "e"], 10, screen, clock=clock, sleep=clock.sleep)
    assert screen.shown == ["a", "b", "c", "d", "e"]
    assert screen.times == pytest.approx([0.0, 0.1, 0.25, 0.3, 0.4])
    # No sleep after the late frame
    assert len(clock.sleeps) == 4


def test_no_frames_dropped_when_always_late():
    clock = FakeClock()
    screen = RecordingScreen(clock, render_time={i: 0.5 for i in range(4)})
    assert play(["1", "2", "3", "4"], 10, screen, clock=clock, sleep=clock.sleep) == 4
    assert screen.shown == ["1", "2", "3", "4"]
    assert clock.sleeps == []


def test_should_stop_checked_between_frames():
    clock = FakeClock()
    screen = RecordingScreen(clock)
    shown = play(
        ["a", "b", "c", "d"],
        30,
        screen,
        clock=clock,
        sleep=clock.sleep,
        should_stop=lambda: len(screen.shown) >= 2,
    )
    assert shown == 2
    assert screen.shown == ["a", "b"]


def test_never_faster_than_cadence():
    fps = 50
    stamps = []

    class SlowScreen:
        def show(self, text):
            stamps.append(time.perf_counter())
            if text == "slow":
                time.sleep(0.03)

    play(["fast", "slow", "fast", "slow", "fast"], fps, SlowScreen())
    assert stamps[-1] - stamps[0] >= (5 - 1) * (1 / fps)


def test_reads_path_frames(tmp_path):
    first = tmp_path / "000001.txt"
    first.write_text("one\n", encoding="utf-8")
    screen = RecordingScreen()
    play([first], 1000, screen)
    assert screen.shown == ["one\n"]


def test_missing_path_frame(tmp_path):
    with pytest.raises(FrameIOError, match="gone.txt"):
        play([tmp_path / "gone.txt"], 1000, RecordingScreen())


def test_play_directory_in_name_order(tmp_path):
    for index, text in [(2, "second\n"), (1, "first\n"), (10, "tenth\n")]:
        (tmp_path / f"{index:06d}.txt").write_text(text, encoding="utf-8")
    (tmp_path / "cover.png").write_bytes(b"")
    screen = RecordingScreen()
    assert play_directory(tmp_path, 1000, screen=screen) == 3
    assert screen.shown == ["first\n", "second\n", "tenth\n"]


def test_play_directory_empty(tmp_path):
    with pytest.raises(EmptyInputSet, match=r"\.txt"):
        play_directory(tmp_path, 30, screen=RecordingScreen())


def test_play_directory_validates_fps_first(tmp_path):
    (tmp_path / "000001.txt").write_text("x\n", encoding="utf-8")
    screen = RecordingScreen()
    with pytest.raises(InvalidParameter):
        play_directory(tmp_path, 0, screen=screen)
    assert screen.shown == []


def test_play_directory_on_terminal_reads_each_frame_once(tmp_path, monkeypatch):
    for index in (1, 2, 3):
        (tmp_path / f"{index:06d}.txt").write_text(f"frame {index}\n", encoding="utf-8")
    stream = io.StringIO()
    monkeypatch.setattr(sys, "stdout", stream)
    reads = []

    def counting_read(path):
        reads.append(path.name)
        return path.read_text(encoding="utf-8")

    monkeypatch.setattr(playback, "read_frame", counting_read)
    assert play_directory(tmp_path, 1000) == 3
    assert reads == ["000001.txt", "000002.txt", "000003.txt"]
    out = stream.getvalue()
    assert out.index("frame 1") < out.index("frame 2") < out.index("frame 3")
