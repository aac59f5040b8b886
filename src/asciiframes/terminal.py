import os
import sys

ENTER_ALT_SCREEN = "\033[?1049h"
LEAVE_ALT_SCREEN = "\033[?1049l"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_HOME = "\033[2J\033[H"


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return (80, 24)
    size = os.get_terminal_size()
    return (size.columns, size.lines)


class TerminalScreen:
    """Full-screen frame surface on an ANSI terminal.

    Use as a context manager: entering switches to the alternate screen and
    hides the cursor, leaving restores both even if playback raised.
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def __enter__(self) -> "TerminalScreen":
        self.stream.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        self.stream.flush()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stream.write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        self.stream.flush()

    def show(self, text: str) -> None:
        self.stream.write(CLEAR_HOME + text)
        self.stream.flush()
