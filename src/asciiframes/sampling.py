from dataclasses import dataclass
from enum import Enum

from PIL import Image

from asciiframes.errors import UnknownStrategy


class Mode(Enum):
    FILTERED = "filtered"  # resize with a kernel, then sample every pixel
    PIXEL = "pixel"  # sample one source pixel per cell, no resize
    EXACT = "exact"  # one glyph per source pixel


@dataclass(frozen=True)
class Strategy:
    name: str
    mode: Mode
    kernel: Image.Resampling | None = None


# Pillow calls the triangle filter BILINEAR
_STRATEGIES = {
    "nearest": Strategy("nearest", Mode.FILTERED, Image.Resampling.NEAREST),
    "triangle": Strategy("triangle", Mode.FILTERED, Image.Resampling.BILINEAR),
    "lanczos3": Strategy("lanczos3", Mode.FILTERED, Image.Resampling.LANCZOS),
    "pixel": Strategy("pixel", Mode.PIXEL),
    "1to1": Strategy("1to1", Mode.EXACT),
}

STRATEGY_NAMES = tuple(_STRATEGIES)


def select_strategy(name: str) -> Strategy:
    """Map a resizer name to its sampling strategy."""
    try:
        return _STRATEGIES[name]
    except KeyError:
        raise UnknownStrategy(
            f"unknown resizer: {name}. Available options: {', '.join(STRATEGY_NAMES)}"
        ) from None
