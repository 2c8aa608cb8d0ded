from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Real
from numpy.typing import NDArray
from typing import ClassVar, Optional, override
import numpy as np

from .config import Config
from .coordinates import Serializable, Spacing, format_percent, normalize
from .spans import extract_spans

SpacingLike = Spacing | Real | str


@dataclass(frozen=True)
class Rect(Serializable):
    """
    Absolutely positioned box, with every dimension a percentage of the
    container.
    """

    position: ClassVar[str] = "absolute"

    top: float
    left: float
    width: float
    height: float

    def style(self) -> dict[str, str]:
        return {
            "position": self.position,
            "top": format_percent(self.top),
            "left": format_percent(self.left),
            "width": format_percent(self.width),
            "height": format_percent(self.height),
        }

    @override
    def serialize(self) -> str:
        return " ".join(f"{key}: {value};" for key, value in self.style().items())


@dataclass(frozen=True)
class AxisMetrics:
    """
    Percentage arithmetic along one axis of the grid.

    The axis is split into `count` equal portions once the gutter, padding on
    both edges plus a gap between each pair of adjacent portions, is taken
    out. Nothing is clamped: a gutter over 100% gives negative portions.
    """

    padding: float
    gap: float
    count: int

    @property
    def gutter(self) -> float:
        return 2 * self.padding + self.gap * (self.count - 1)

    @property
    def remaining(self) -> float:
        return 100 - self.gutter

    @property
    def portion(self) -> float:
        return self.remaining / self.count

    def offset(self, starts: NDArray[np.int64]) -> NDArray[np.float64]:
        """
        Distance from the container edge to the start of the given 1-indexed
        grid lines.
        """
        preceding = starts - 1
        return self.gap * preceding + preceding * self.portion + self.padding

    def extent(
        self, starts: NDArray[np.int64], ends: NDArray[np.int64]
    ) -> NDArray[np.float64]:
        """
        Size of the inclusive ranges `starts..ends`, including the gaps
        between the covered portions.
        """
        covered = ends - starts + 1
        return covered * self.portion + (covered - 1) * self.gap


def compute_rects(
    grid: Sequence[Sequence[str]] = (),
    padding: Optional[SpacingLike] = None,
    gap: Optional[SpacingLike] = None,
    container_width: Optional[float] = None,
    container_height: Optional[float] = None,
    *,
    config: Optional[Config] = None,
    validate: Optional[bool] = None,
) -> dict[str, Rect]:
    """
    Compute the percentage rectangle of every area in `grid`.

    Arguments left as `None` are taken from `config`. Without one they default
    to no padding, no gap and no container size.
    An empty grid has no areas to place and gives an empty mapping.
    """

    config = config if config is not None else Config()
    padding = config.padding if padding is None else padding
    gap = config.gap if gap is None else gap
    if container_width is None:
        container_width = config.container_width
    if container_height is None:
        container_height = config.container_height
    if validate is None:
        validate = config.validate_areas

    layout = extract_spans(grid, validate=validate)
    if layout.isempty():
        return {}

    padding_pct = normalize(
        padding, container_width, container_height, strict=config.strict_units
    )
    gap_pct = normalize(
        gap, container_width, container_height, strict=config.strict_units
    )

    h = AxisMetrics(padding_pct.h, gap_pct.h, layout.column_count)
    v = AxisMetrics(padding_pct.v, gap_pct.v, layout.row_count)

    spans = list(layout.spans.values())
    start_cols = np.array([s.start_col for s in spans], dtype=np.int64)
    start_rows = np.array([s.start_row for s in spans], dtype=np.int64)
    end_cols = np.array([s.end_col for s in spans], dtype=np.int64)
    end_rows = np.array([s.end_row for s in spans], dtype=np.int64)

    tops = v.offset(start_rows)
    lefts = h.offset(start_cols)
    widths = h.extent(start_cols, end_cols)
    heights = v.extent(start_rows, end_rows)

    return {
        area: Rect(
            top=float(tops[i]),
            left=float(lefts[i]),
            width=float(widths[i]),
            height=float(heights[i]),
        )
        for i, area in enumerate(layout.spans)
    }


def compute_coordinates(
    grid: Sequence[Sequence[str]] = (),
    padding: Optional[SpacingLike] = None,
    gap: Optional[SpacingLike] = None,
    container_width: Optional[float] = None,
    container_height: Optional[float] = None,
    *,
    config: Optional[Config] = None,
    validate: Optional[bool] = None,
) -> dict[str, dict[str, str]]:
    """
    Like `compute_rects`, but gives each area's rectangle as a style mapping,
    e.g. `{"position": "absolute", "top": "2%", "left": "2%", ...}`.
    """

    rects = compute_rects(
        grid,
        padding,
        gap,
        container_width,
        container_height,
        config=config,
        validate=validate,
    )
    return {area: rect.style() for area, rect in rects.items()}
