"""
Derive the row and column span of every named area in a grid of area tokens.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType


class NonRectangularAreaError(ValueError):
    """Exception raised when an area's cells don't fill its bounding box."""

    def __init__(self, area: str, message: str):
        super().__init__(f"Area '{area}' {message}")
        self.area = area


@dataclass(frozen=True)
class AreaSpan:
    """
    Inclusive, 1-indexed row and column range of an area.
    """

    start_row: int
    start_col: int
    end_row: int
    end_col: int

    @property
    def row_span(self) -> int:
        return self.end_row - self.start_row + 1

    @property
    def col_span(self) -> int:
        return self.end_col - self.start_col + 1

    def cells(self) -> Iterator[tuple[int, int]]:
        for row in range(self.start_row, self.end_row + 1):
            for col in range(self.start_col, self.end_col + 1):
                yield row, col


@dataclass(frozen=True)
class Layout:
    row_count: int = 0
    column_count: int = 0
    spans: Mapping[str, AreaSpan] = field(default_factory=dict)

    def __post_init__(self):
        # spans is read-only, and independent of the mapping passed in
        object.__setattr__(self, "spans", MappingProxyType(dict(self.spans)))

    def areas(self) -> list[str]:
        return list(self.spans)

    def isempty(self) -> bool:
        return self.row_count == 0 or self.column_count == 0


def extract_spans(
    grid: Sequence[Sequence[str]] = (), validate: bool = False
) -> Layout:
    """
    Scan `grid` in row-major order. The first occurrence of a name sets both the
    start and end of its span, every later occurrence moves the end to its own
    position. For a name occupying one filled rectangle this is exactly its
    bounding box. Other occupancy patterns are accepted as they are unless
    `validate` is set, in which case `NonRectangularAreaError` is raised.
    """

    # [start_row, start_col, end_row, end_col] per name, in order of appearance
    bounds: dict[str, list[int]] = {}

    for i, row in enumerate(grid):
        pos_y = i + 1
        for j, area in enumerate(row):
            pos_x = j + 1
            if area not in bounds:
                bounds[area] = [pos_y, pos_x, pos_y, pos_x]
            else:
                bounds[area][2] = pos_y
                bounds[area][3] = pos_x

    layout = Layout(
        row_count=len(grid),
        column_count=max((len(row) for row in grid), default=0),
        spans={area: AreaSpan(*b) for area, b in bounds.items()},
    )

    if validate:
        check_rectangular(grid, layout)

    return layout


def check_rectangular(grid: Sequence[Sequence[str]], layout: Layout) -> None:
    """
    Raise `NonRectangularAreaError` for the first area whose occurrences don't
    exactly fill the span recorded in `layout`.
    """

    counts: dict[str, int] = {}
    for row in grid:
        for area in row:
            counts[area] = counts.get(area, 0) + 1

    for area, span in layout.spans.items():
        if span.end_col < span.start_col:
            raise NonRectangularAreaError(
                area,
                f"ends in column {span.end_col} left of its start column {span.start_col}",
            )

        for row, col in span.cells():
            cells = grid[row - 1]
            if col > len(cells) or cells[col - 1] != area:
                raise NonRectangularAreaError(
                    area, f"does not cover row {row}, column {col}"
                )

        if counts[area] != span.row_span * span.col_span:
            raise NonRectangularAreaError(
                area, "also occurs outside of its bounding box"
            )
