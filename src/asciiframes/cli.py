import argparse
import logging
import sys
from pathlib import Path

from asciiframes.converter import image_to_ascii
from asciiframes.errors import AsciiFramesError
from asciiframes.frames import write_frame
from asciiframes.html_export import HtmlConfig, ascii_to_html
from asciiframes.params import RenderParams
from asciiframes.pipeline import convert_batch
from asciiframes.playback import play_directory
from asciiframes.ramps import RAMP_PRESETS
from asciiframes.sampling import STRATEGY_NAMES


def _add_render_args(parser: argparse.ArgumentParser, cols: int) -> None:
    parser.add_argument(
        "--cols", type=int, default=cols, help=f"Output width in columns, ignored by 1to1 (default: {cols})"
    )
    parser.add_argument(
        "--cell-aspect",
        type=float,
        default=2.0,
        help="Terminal cell aspect ratio, height/width, 0.5 to 5.0 (default: 2.0)",
    )
    parser.add_argument(
        "--resizer",
        default="triangle",
        help=f"Resampling strategy: {', '.join(STRATEGY_NAMES)} (default: triangle)",
    )
    parser.add_argument(
        "--ramp",
        default="basic",
        help=f"Glyph ramp, dark to bright: {' or '.join(RAMP_PRESETS)}, or a custom string (default: basic)",
    )


def _add_verbose(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Enable debug logging")


def _setup_logging(verbose: bool, level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _params(args) -> RenderParams:
    return RenderParams(cols=args.cols, cell_aspect=args.cell_aspect, resizer=args.resizer, ramp=args.ramp)


def _fail(exc: Exception):
    print(f"error: {exc}", file=sys.stderr)
    sys.exit(1)


def print_conversion_summary(input_path, output_path, dimensions: tuple[int, int], font_size: int, resizer: str):
    print("Conversion complete!")
    print(f"Input: {input_path}")
    print(f"Output: {output_path}")
    print(f"ASCII dimensions: {dimensions[0]}x{dimensions[1]} characters")
    print(f"Font size: {font_size}px")
    print(f"Resizer: {resizer}")
    print("\nOpen the HTML file in your browser to view the ASCII art!")
    print("Use Ctrl/Cmd + +/- to zoom in/out, Ctrl/Cmd + 0 to reset zoom.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render an image as ASCII art")
    parser.add_argument("image", help="Path to input image")
    _add_render_args(parser, cols=120)
    parser.add_argument("-o", "--output", default=None, help="Output file path (default: stdout)")
    _add_verbose(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        ascii_art = image_to_ascii(Path(args.image), _params(args))
        if args.output is None:
            sys.stdout.write(ascii_art)
            return
        write_frame(Path(args.output), ascii_art)
    except AsciiFramesError as exc:
        _fail(exc)
    print(f"ASCII art saved to: {args.output}")


def batch_main(argv=None):
    parser = argparse.ArgumentParser(description="Convert a directory of PNG frames to ASCII text frames")
    parser.add_argument("frames_dir", nargs="?", default="frames", help="Directory of PNG frames (default: frames)")
    parser.add_argument("out_dir", nargs="?", default="out_txt", help="Output directory (default: out_txt)")
    _add_render_args(parser, cols=160)
    parser.add_argument("-j", "--workers", type=int, default=None, help="Worker processes (default: CPU count)")
    _add_verbose(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose, level=logging.INFO)

    try:
        written = convert_batch(args.frames_dir, args.out_dir, _params(args), max_workers=args.workers)
    except AsciiFramesError as exc:
        _fail(exc)
    print(f"Done: {len(written)} frames written to {args.out_dir}", file=sys.stderr)


def play_main(argv=None):
    parser = argparse.ArgumentParser(description="Play a directory of ASCII text frames in the terminal")
    parser.add_argument("txt_dir", nargs="?", default="out_txt", help="Directory of .txt frames (default: out_txt)")
    parser.add_argument("--fps", type=int, default=30, help="Frames per second (default: 30)")
    _add_verbose(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        play_directory(args.txt_dir, args.fps)
    except AsciiFramesError as exc:
        _fail(exc)
    except KeyboardInterrupt:
        sys.exit(130)


def html_main(argv=None):
    parser = argparse.ArgumentParser(description="Convert an image directly to an HTML ASCII art page")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-o", "--output", default="ascii_art.html", help="Output HTML file path (default: ascii_art.html)"
    )
    _add_render_args(parser, cols=120)
    parser.add_argument("--font-size", type=int, default=1, help="Font size in pixels (default: 1)")
    parser.add_argument("--background", default="000000", help="Background colour as hex (default: 000000)")
    parser.add_argument("--text-color", default="ffffff", help="Text colour as hex (default: ffffff)")
    parser.add_argument("--font-family", default="monospace", help="Font family (default: monospace)")
    _add_verbose(parser)
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    config = HtmlConfig(
        font_size=args.font_size,
        background_color=args.background,
        text_color=args.text_color,
        font_family=args.font_family,
    )
    try:
        params = _params(args)
        config.validate()
        print(f"Converting {args.image} to ASCII art...")
        ascii_art = image_to_ascii(Path(args.image), params)
        write_frame(Path(args.output), ascii_to_html(ascii_art, config))
    except AsciiFramesError as exc:
        _fail(exc)

    lines = ascii_art.splitlines()
    width = max((len(line) for line in lines), default=0)
    print_conversion_summary(args.image, args.output, (width, len(lines)), args.font_size, args.resizer)
