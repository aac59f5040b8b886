from pathlib import Path

from asciiframes.errors import FrameIOError

SOURCE_SUFFIX = ".png"
FRAME_SUFFIX = ".txt"


def frame_name(index: int) -> str:
    """File name of the 1-based frame `index` in a rendered sequence."""
    return f"{index:06d}{FRAME_SUFFIX}"


def list_frames(directory: str | Path, suffix: str) -> list[Path]:
    """List the files in `directory` ending in `suffix`, in name order.

    Name order is the only thing that sequences frames, so sources must use
    fixed-width zero-padded numeric names (000001.png, 000002.png, ...).
    """
    directory = Path(directory)
    try:
        entries = [p for p in directory.iterdir() if p.suffix == suffix and p.is_file()]
    except OSError as exc:
        raise FrameIOError(f"reading directory {directory}: {exc}") from exc
    return sorted(entries, key=lambda p: p.name)


def read_frame(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FrameIOError(f"read {path}: {exc}") from exc


def write_frame(path: Path, text: str) -> None:
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FrameIOError(f"write {path}: {exc}") from exc
