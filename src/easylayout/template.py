"""
Tokenize the text form of an area grid: one row per line, area names separated
by whitespace.

    header header
    nav    main
    footer footer
"""

from collections.abc import Sequence


class TemplateError(ValueError):
    """Exception raised when template text doesn't describe a grid."""

    pass


def parse_template(text: str) -> list[list[str]]:
    lines = text.strip().splitlines()
    if not lines:
        raise TemplateError("layout is empty")

    grid: list[list[str]] = []
    for i, line in enumerate(lines):
        tokens = line.split()
        if not tokens:
            raise TemplateError(f"row {i + 1}: rows must contain area names")
        grid.append(tokens)

    return grid


def format_template(grid: Sequence[Sequence[str]]) -> str:
    """
    Render a grid back to template text, padding each column to its widest name.
    """
    ncols = max((len(row) for row in grid), default=0)
    widths = [
        max((len(row[j]) for row in grid if j < len(row)), default=0)
        for j in range(ncols)
    ]
    return "\n".join(
        " ".join(area.ljust(widths[j]) for j, area in enumerate(row)).rstrip()
        for row in grid
    )
