"""Plain-text rendering of puzzle grids."""

from typing import Iterable, List, Optional, Sequence, Set

from .models import Cell


def render_grid(
    rows: Sequence[Sequence[Optional[str]]],
    empty: str = ".",
    marked: Optional[Iterable[Cell]] = None,
) -> str:
    """
    Render a rectangular grid to a string, one line per row.

    Empty cells (None or "") render as `empty`. Cells in `marked` are
    wrapped in brackets; every other cell is padded so columns line up.
    """
    if not rows:
        return ""

    highlight: Set[Cell] = {Cell(*cell) for cell in marked} if marked else set()
    lines: List[str] = []
    for r, row in enumerate(rows):
        parts = []
        for c, value in enumerate(row):
            text = value if value else empty
            parts.append(f"[{text}]" if (r, c) in highlight else f" {text} ")
        lines.append("".join(parts).rstrip())
    return "\n".join(lines)
