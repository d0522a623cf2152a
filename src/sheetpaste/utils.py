"""Shared helpers — blank and numeric cell checks."""

from __future__ import annotations

import re

# Decimal literal: optional sign, digits with optional fraction, optional exponent.
_NUMERIC_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def is_blank(cell: str | None) -> bool:
    """Return True when *cell* is missing or whitespace only."""
    return cell is None or not cell.strip()


def looks_numeric(cell: str | None) -> bool:
    """Return True when *cell* reads as a plain decimal number."""
    if cell is None:
        return False
    return _NUMERIC_RE.match(cell.strip()) is not None


def max_row_length(grid: list[list[str]]) -> int:
    return max((len(row) for row in grid), default=0)
