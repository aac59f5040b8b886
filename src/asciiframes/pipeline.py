import logging
from concurrent.futures import Executor, ProcessPoolExecutor, as_completed
from pathlib import Path

from asciiframes.converter import decode, rasterize
from asciiframes.errors import EmptyInputSet, FrameIOError, InvalidParameter
from asciiframes.frames import SOURCE_SUFFIX, frame_name, list_frames, write_frame
from asciiframes.params import RenderParams

logger = logging.getLogger(__name__)


def convert_frame(index: int, source: Path, out_dir: Path, params: RenderParams) -> Path:
    """Decode, rasterize and write one frame. Runs inside a worker."""
    image = decode(source)
    try:
        text = rasterize(image, params.cols, params.cell_aspect, params.strategy, params.palette)
    except InvalidParameter as exc:
        raise InvalidParameter(f"{source}: {exc}") from exc
    target = out_dir / frame_name(index)
    try:
        write_frame(target, text)
    except FrameIOError as exc:
        raise FrameIOError(f"{exc} (from {source})") from exc
    return target


def convert_batch(
    frames_dir: str | Path,
    out_dir: str | Path,
    params: RenderParams,
    max_workers: int | None = None,
    executor: Executor | None = None,
) -> list[Path]:
    """Convert every PNG in `frames_dir` to `out_dir/000001.txt`, `000002.txt`, ...

    Frames are rendered in parallel and may finish in any order; the output
    name is derived from the source's position in name order, so the result is
    deterministic. The first failing frame aborts the batch. A supplied
    `executor` is used as-is and left running, otherwise a process pool sized
    to the machine (or `max_workers`) is created for the call.

    Returns the written paths in frame order.
    """
    frames_dir = Path(frames_dir)
    out_dir = Path(out_dir)

    frames = list_frames(frames_dir, SOURCE_SUFFIX)
    if not frames:
        raise EmptyInputSet(f"no PNG frames found in {frames_dir}")

    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FrameIOError(f"creating {out_dir}: {exc}") from exc

    logger.info("Converting %d frames -> %s (parallel)", len(frames), out_dir)

    owned = executor is None
    if owned:
        executor = ProcessPoolExecutor(max_workers=max_workers)
    try:
        futures = [
            executor.submit(convert_frame, index, path, out_dir, params)
            for index, path in enumerate(frames, start=1)
        ]
        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                for other in futures:
                    other.cancel()
                raise error
            logger.debug("wrote %s", future.result())
    finally:
        if owned:
            executor.shutdown(wait=True, cancel_futures=True)

    logger.info("Done: %d frames written to %s", len(futures), out_dir)
    return [future.result() for future in futures]
