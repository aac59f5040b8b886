import math
import struct
from pathlib import Path

import numpy as np
from PIL import Image

from asciiframes.errors import DecodeError, InvalidParameter
from asciiframes.params import RenderParams
from asciiframes.sampling import Mode, Strategy


def decode(path: str | Path) -> Image.Image:
    """Open and fully load an image so the file handle can be released."""
    # Corrupt chunks past the header surface as SyntaxError, ValueError or struct.error
    try:
        with Image.open(path) as image:
            image.load()
    except (OSError, SyntaxError, ValueError, struct.error, Image.DecompressionBombError) as exc:
        raise DecodeError(f"failed to decode {path}: {exc}") from exc
    return image


_SIXTEEN_BIT_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}


def normalise_mode(image: Image.Image) -> Image.Image:
    """Bring a decoded image to an 8-bit mode that grayscale and kernel resizing handle.

    16-bit samples are scaled down to 0-255 rather than clipped. Palette and
    1-bit images are expanded, because Pillow only resizes them with NEAREST.
    """
    if image.mode in _SIXTEEN_BIT_MODES:
        samples = np.clip(np.asarray(image).astype(np.int64), 0, 65535) >> 8
        return Image.fromarray(samples.astype(np.uint8))
    if image.mode == "1":
        return image.convert("L")
    if image.mode in ("P", "PA"):
        return image.convert("RGBA" if image.mode == "PA" or "transparency" in image.info else "RGB")
    return image


def luminance_to_index(values, palette_length: int):
    """Map 0-255 luminance to a palette index; 0 is always 0, 255 always the last entry."""
    top = palette_length - 1
    if isinstance(values, np.ndarray):
        return np.minimum(values.astype(np.intp) * top // 255, top)
    return min(int(values) * top // 255, top)


def output_rows(width: int, height: int, cols: int, cell_aspect: float) -> int:
    """Row count for a `cols` wide grid, squashed by the glyph cell aspect ratio."""
    scale = cols / width
    # Half-up rounding, never fewer than one row
    return max(1, math.floor(height * scale / cell_aspect + 0.5))


def _to_text(pixels: np.ndarray, palette: str) -> str:
    lut = np.array(list(palette), dtype=object)
    glyphs = lut[luminance_to_index(pixels, len(palette))]
    return "".join("".join(row) + "\n" for row in glyphs)


def rasterize(image: Image.Image, cols: int, cell_aspect: float, strategy: Strategy, palette: str) -> str:
    """Render an image as newline-terminated rows of palette glyphs.

    `1to1` keeps the source dimensions and ignores `cols` and `cell_aspect`.
    The filtered strategies resize to `cols` x rows with their kernel before
    sampling; `pixel` samples the centre of each cell straight from the source
    so no interpolation softens the result.
    """
    if not palette:
        raise InvalidParameter("palette must contain at least one glyph")
    if cols < 1:
        raise InvalidParameter(f"cols must be positive, got {cols}")
    width, height = image.size
    if width == 0 or height == 0:
        raise InvalidParameter(f"image has zero size: {width}x{height}")
    image = normalise_mode(image)

    if strategy.mode is Mode.EXACT:
        return _to_text(np.asarray(image.convert("L")), palette)

    if cell_aspect <= 0:
        raise InvalidParameter(f"cell aspect must be positive, got {cell_aspect}")
    rows = output_rows(width, height, cols, cell_aspect)

    if strategy.mode is Mode.FILTERED:
        resized = image.resize((cols, rows), strategy.kernel)
        return _to_text(np.asarray(resized.convert("L")), palette)

    scale = cols / width
    gray = np.asarray(image.convert("L"))
    xs = np.minimum(np.floor((np.arange(cols) + 0.5) / scale).astype(np.intp), width - 1)
    ys = np.minimum(np.floor((np.arange(rows) + 0.5) / scale * cell_aspect).astype(np.intp), height - 1)
    return _to_text(gray[np.ix_(ys, xs)], palette)


def image_to_ascii(image: Image.Image | str | Path, params: RenderParams) -> str:
    if not isinstance(image, Image.Image):
        image = decode(image)
    return rasterize(image, params.cols, params.cell_aspect, params.strategy, params.palette)
