"""Grid operations — header detection and transpose."""

from __future__ import annotations

from sheetpaste.models import Grid
from sheetpaste.utils import is_blank, looks_numeric, max_row_length


def detect_header(grid: Grid) -> bool:
    """Guess whether row 0 holds column labels.

    True when every first-row cell is non-numeric text and the second row
    has at least one number. Grids with fewer than two rows default to True.
    """
    if len(grid) < 2:
        return True

    first, second = grid[0], grid[1]
    first_all_text = all(not is_blank(cell) and not looks_numeric(cell) for cell in first)
    second_has_numbers = any(looks_numeric(cell) for cell in second)
    return first_all_text and second_has_numbers


def transpose(grid: Grid) -> Grid:
    """Swap rows and columns, padding short rows with empty cells.

    Example::

        [["Ideas", "Idea1", "Idea2"], ["Bugs", "BugX"]]
        -> [["Ideas", "Bugs"], ["Idea1", "BugX"], ["Idea2", ""]]
    """
    return [
        [row[col] if col < len(row) else "" for row in grid]
        for col in range(max_row_length(grid))
    ]
