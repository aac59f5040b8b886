from dataclasses import dataclass

from asciiframes.errors import InvalidParameter
from asciiframes.ramps import resolve_ramp
from asciiframes.sampling import Strategy, select_strategy

MIN_CELL_ASPECT = 0.5
MAX_CELL_ASPECT = 5.0


def validate_image_args(cols: int, cell_aspect: float) -> None:
    if cols < 1:
        raise InvalidParameter(f"--cols must be positive, got {cols}")
    if not MIN_CELL_ASPECT <= cell_aspect <= MAX_CELL_ASPECT:
        raise InvalidParameter(
            f"--cell-aspect should be between {MIN_CELL_ASPECT} and {MAX_CELL_ASPECT}, got {cell_aspect}"
        )


@dataclass(frozen=True)
class RenderParams:
    """Everything a rasterization run needs apart from the image itself.

    Instances are validated on construction, so an unknown resizer or an empty
    ramp fails before any frame is touched. They are immutable and picklable,
    which lets the batch pipeline hand one to every worker process.
    """

    cols: int = 120
    cell_aspect: float = 2.0
    resizer: str = "triangle"
    ramp: str = "basic"

    def __post_init__(self):
        validate_image_args(self.cols, self.cell_aspect)
        select_strategy(self.resizer)
        resolve_ramp(self.ramp)

    @property
    def strategy(self) -> Strategy:
        return select_strategy(self.resizer)

    @property
    def palette(self) -> str:
        return resolve_ramp(self.ramp)
