"""Line selection on a letter grid.

A drag gesture is reduced to the cells it spans. Only the eight compass
directions count as lines: horizontal, vertical and exact 45 degree diagonals.
"""

from typing import List, Tuple

from .models import Cell


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def direction(start: Cell, end: Cell) -> Tuple[int, int]:
    """Unit step (d_row, d_col) pointing from start towards end."""
    return _sign(end.row - start.row), _sign(end.col - start.col)


def chebyshev(start: Cell, end: Cell) -> int:
    return max(abs(end.row - start.row), abs(end.col - start.col))


def is_line(start: Cell, end: Cell) -> bool:
    """True if start and end lie on a horizontal, vertical or diagonal line."""
    d_row = end.row - start.row
    d_col = end.col - start.col
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def line_cells(start: Cell, end: Cell) -> List[Cell]:
    """
    Compute the cells covered by a selection from start to end.

    For a valid line the cells are returned in order from start to end,
    both inclusive. Any other shape degrades to just the two endpoints.
    """
    start, end = Cell(*start), Cell(*end)
    if start == end:
        return [start]
    if not is_line(start, end):
        return [start, end]

    d_row, d_col = direction(start, end)
    steps = chebyshev(start, end)
    return [Cell(start.row + i * d_row, start.col + i * d_col) for i in range(steps + 1)]


def trusted_walk(start: Cell, end: Cell) -> List[Cell]:
    """
    Walk from start towards end along the normalized direction.

    Endpoints come from generator output and are not re-validated. The walk
    stops at end or after chebyshev(start, end) steps, whichever comes first.
    """
    start, end = Cell(*start), Cell(*end)
    d_row, d_col = direction(start, end)
    cells = [start]
    row, col = start
    for _ in range(chebyshev(start, end)):
        if (row, col) == end:
            break
        row += d_row
        col += d_col
        cells.append(Cell(row, col))
    return cells
