"""Clipboard TSV parser — pure functions, no side effects."""

from __future__ import annotations

from typing import Any

from sheetpaste.models import Grid, GridStats
from sheetpaste.utils import is_blank, max_row_length

_QUOTE = '"'
_TAB = "\t"
_PREVIEW_CHARS = 200


def _flush_row(grid: Grid, row: list[str]) -> None:
    if any(not is_blank(cell) for cell in row):
        grid.append(row)


def parse_tsv(raw: str) -> Grid:
    """Parse spreadsheet clipboard text into a grid of cells.

    Quoted cells may span tabs and newlines; ``""`` inside quotes is a
    literal quote. Fully blank lines are dropped. An unterminated quote
    keeps the rest of the input in the open cell.
    """
    if not raw or not raw.strip():
        return []

    grid: Grid = []
    row: list[str] = []
    cell: list[str] = []
    quoted = False
    i = 0
    n = len(raw)

    while i < n:
        ch = raw[i]

        if quoted:
            if ch == _QUOTE:
                if i + 1 < n and raw[i + 1] == _QUOTE:
                    cell.append(_QUOTE)
                    i += 2
                    continue
                quoted = False
            else:
                cell.append(ch)
            i += 1
            continue

        if ch == _QUOTE:
            quoted = True
        elif ch == _TAB:
            row.append("".join(cell))
            cell = []
        elif ch == "\n" or (ch == "\r" and i + 1 < n and raw[i + 1] == "\n"):
            row.append("".join(cell))
            _flush_row(grid, row)
            row, cell = [], []
            if ch == "\r":
                i += 1
        else:
            cell.append(ch)
        i += 1

    if cell or row:
        row.append("".join(cell))
        _flush_row(grid, row)

    return grid


def looks_like_tsv(raw: str) -> bool:
    """Return True when *raw* contains at least one tab."""
    return bool(raw) and _TAB in raw


def grid_stats(grid: Grid) -> GridStats:
    """Return row/column counts and how many cells hold a value."""
    row_count = len(grid)
    column_count = max_row_length(grid)
    non_empty = sum(1 for row in grid for cell in row if not is_blank(cell))
    return GridStats(
        row_count=row_count,
        column_count=column_count,
        total_cells=row_count * column_count,
        non_empty_cells=non_empty,
    )


def describe_input(raw: str) -> dict[str, Any]:
    """Summarize what a raw paste looks like, for diagnosing clipboard content."""
    raw = raw or ""
    return {
        "length": len(raw),
        "has_tabs": _TAB in raw,
        "has_quotes": _QUOTE in raw,
        "has_crlf": "\r\n" in raw,
        "line_count": len(raw.splitlines()),
        "preview": raw[:_PREVIEW_CHARS],
    }
