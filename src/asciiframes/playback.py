import logging
import time
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Protocol

from asciiframes.errors import EmptyInputSet, InvalidParameter
from asciiframes.frames import FRAME_SUFFIX, list_frames, read_frame
from asciiframes.terminal import TerminalScreen, get_terminal_size

logger = logging.getLogger(__name__)

MIN_FRAME_TIME = 0.001


class Screen(Protocol):
    def show(self, text: str) -> None:
        """Replace whatever is on screen with `text`."""
        ...


def frame_interval(fps: int) -> float:
    """Seconds between frame starts, never below one millisecond."""
    if fps < 1:
        raise InvalidParameter(f"--fps must be positive, got {fps}")
    return max(MIN_FRAME_TIME, 1.0 / fps)


def play(
    frames: Iterable[str | Path],
    fps: int,
    screen: Screen,
    clock: Callable[[], float] = time.perf_counter,
    sleep: Callable[[float], None] = time.sleep,
    should_stop: Callable[[], bool] | None = None,
) -> int:
    """Show `frames` on `screen` at `fps`, returning how many were shown.

    Items are glyph grids, or `Path` objects read lazily as UTF-8. Every
    deadline is measured from one start time, so a slow frame delays only
    itself: the following frames catch up instead of inheriting the lag.
    Late frames are still shown, never skipped. `should_stop` is polled once
    per frame, before it is shown.
    """
    frame_time = frame_interval(fps)
    start = None
    shown = 0
    for i, frame in enumerate(frames):
        if should_stop is not None and should_stop():
            logger.debug("Playback stopped after %d frames", shown)
            break
        text = read_frame(frame) if isinstance(frame, Path) else frame
        if start is None:
            start = clock()
        screen.show(text)
        shown += 1

        remaining = start + frame_time * (i + 1) - clock()
        if remaining > 0:
            sleep(remaining)
        else:
            logger.debug("Frame %d ran %.1f ms over its slot", i + 1, -remaining * 1000)
    return shown


def play_directory(txt_dir: str | Path, fps: int, screen: Screen | None = None, **kwargs) -> int:
    """Play the `.txt` frames of `txt_dir` in name order.

    Without a `screen` the frames go to a `TerminalScreen` on stdout.
    """
    txt_dir = Path(txt_dir)
    frames = list_frames(txt_dir, FRAME_SUFFIX)
    if not frames:
        raise EmptyInputSet(f"no .txt frames found in {txt_dir}")
    frame_interval(fps)

    logger.info("Playing %d frames from %s at %d fps", len(frames), txt_dir, fps)
    if screen is not None:
        return play(frames, fps, screen, **kwargs)

    first = read_frame(frames[0])
    columns, rows = get_terminal_size()
    lines = first.splitlines()
    if lines and (len(lines) > rows or max(len(line) for line in lines) > columns):
        logger.warning("Frames are larger than the %dx%d terminal and will be clipped", columns, rows)
    with TerminalScreen() as terminal:
        return play([first, *frames[1:]], fps, terminal, **kwargs)
