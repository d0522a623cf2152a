"""Merged-cell inference — fill blanks spreadsheets leave under merged ranges.

When merged cells are copied, only the top-left position carries the value;
every other position arrives blank. The filler copies each value into the
run of blanks that follows it, first along rows, then down columns.

This is a heuristic: a column of genuinely optional values looks exactly like
a vertical merge and will be filled too.
"""

from __future__ import annotations

from sheetpaste.models import FillStats, Grid, MergeDetection
from sheetpaste.utils import is_blank, max_row_length


def _cell_at(grid: Grid, row: int, col: int) -> str:
    cells = grid[row]
    return cells[col] if col < len(cells) else ""


def _blank_run(values: list[str], start: int) -> int:
    """Length of the run of blank values beginning at *start*."""
    run = 0
    for value in values[start:]:
        if not is_blank(value):
            break
        run += 1
    return run


# ── Horizontal pass ─────────────────────────────────────────────


def fill_horizontal_merges(grid: Grid) -> tuple[Grid, int, int]:
    """Copy each value rightwards into the blanks that follow it in its row.

    Returns ``(filled_grid, merge_count, filled_count)``.
    """
    merges = 0
    filled = 0
    result: Grid = []

    for row in grid:
        new_row = list(row)
        i = 0
        while i < len(new_row):
            value = new_row[i]
            if is_blank(value):
                i += 1
                continue
            run = _blank_run(new_row, i + 1)
            if run:
                merges += 1
                for j in range(i + 1, i + 1 + run):
                    new_row[j] = value
                filled += run
            i += run + 1
        result.append(new_row)

    return result, merges, filled


# ── Vertical pass ───────────────────────────────────────────────


def fill_vertical_merges(grid: Grid) -> tuple[Grid, int, int]:
    """Copy each value downwards into the blanks below it in its column.

    Rows too short to reach a filled column are padded with ``""`` first.
    Returns ``(filled_grid, merge_count, filled_count)``.
    """
    result: Grid = [list(row) for row in grid]
    if not result:
        return result, 0, 0

    merges = 0
    filled = 0

    for col in range(max_row_length(result)):
        column = [_cell_at(result, r, col) for r in range(len(result))]
        r = 0
        while r < len(column):
            value = column[r]
            if is_blank(value):
                r += 1
                continue
            run = _blank_run(column, r + 1)
            if run:
                merges += 1
                for below in range(r + 1, r + 1 + run):
                    target = result[below]
                    if len(target) <= col:
                        target.extend([""] * (col + 1 - len(target)))
                    target[col] = value
                filled += run
            r += run + 1

    return result, merges, filled


# ── Combined fill + detection ───────────────────────────────────


def fill_merges(grid: Grid) -> tuple[Grid, FillStats]:
    """Fill horizontal merges, then vertical merges on that result.

    The input grid is not modified.
    """
    horizontal, h_merges, h_filled = fill_horizontal_merges(grid)
    vertical, v_merges, v_filled = fill_vertical_merges(horizontal)
    stats = FillStats(
        horizontal_merges=h_merges,
        vertical_merges=v_merges,
        horizontal_filled=h_filled,
        vertical_filled=v_filled,
    )
    return vertical, stats


def detect_merges(grid: Grid) -> MergeDetection:
    """Count merge-shaped runs in both directions without filling anything."""
    horizontal = 0
    for row in grid:
        for i in range(len(row) - 1):
            if not is_blank(row[i]) and is_blank(row[i + 1]):
                horizontal += 1

    vertical = 0
    for col in range(max_row_length(grid)):
        for r in range(len(grid) - 1):
            if not is_blank(_cell_at(grid, r, col)) and is_blank(_cell_at(grid, r + 1, col)):
                vertical += 1

    return MergeDetection(horizontal_count=horizontal, vertical_count=vertical)
