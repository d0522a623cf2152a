"""Data models / typed containers used across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Any

Cell = str
Grid = list[list[Cell]]


def _to_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{field_name} must be an integer")
    result = int(value)
    if result < 0:
        raise ValueError(f"{field_name} must be >= 0")
    return result


class OutputFormat(str, Enum):
    """Closed set of text renderings a grid can be turned into."""

    markdown_table = "markdown_table"
    json_flat = "json_flat"
    markdown_hierarchical = "markdown_hierarchical"
    plain_list = "plain_list"

    @classmethod
    def parse(cls, value: OutputFormat | str | None) -> OutputFormat:
        """Resolve *value* to a member; reserved or unknown names give a table."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.markdown_table


@dataclass
class FillStats:
    """Counts of merge runs found and cells filled by the merge filler."""

    horizontal_merges: int = 0
    vertical_merges: int = 0
    horizontal_filled: int = 0
    vertical_filled: int = 0

    def __post_init__(self) -> None:
        self.horizontal_merges = _to_non_negative_int(self.horizontal_merges, "horizontal_merges")
        self.vertical_merges = _to_non_negative_int(self.vertical_merges, "vertical_merges")
        self.horizontal_filled = _to_non_negative_int(self.horizontal_filled, "horizontal_filled")
        self.vertical_filled = _to_non_negative_int(self.vertical_filled, "vertical_filled")
        if self.horizontal_filled < self.horizontal_merges:
            raise ValueError("horizontal_filled must be >= horizontal_merges")
        if self.vertical_filled < self.vertical_merges:
            raise ValueError("vertical_filled must be >= vertical_merges")

    @property
    def total_filled(self) -> int:
        return self.horizontal_filled + self.vertical_filled

    def to_dict(self) -> dict[str, Any]:
        return {
            "horizontal_merges": self.horizontal_merges,
            "vertical_merges": self.vertical_merges,
            "horizontal_filled": self.horizontal_filled,
            "vertical_filled": self.vertical_filled,
            "total_filled": self.total_filled,
        }


@dataclass
class MergeDetection:
    """Merge runs found by inspection only; the grid is left untouched."""

    horizontal_count: int = 0
    vertical_count: int = 0

    def __post_init__(self) -> None:
        self.horizontal_count = _to_non_negative_int(self.horizontal_count, "horizontal_count")
        self.vertical_count = _to_non_negative_int(self.vertical_count, "vertical_count")

    @property
    def has_horizontal_merges(self) -> bool:
        return self.horizontal_count > 0

    @property
    def has_vertical_merges(self) -> bool:
        return self.vertical_count > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_horizontal_merges": self.has_horizontal_merges,
            "has_vertical_merges": self.has_vertical_merges,
            "horizontal_count": self.horizontal_count,
            "vertical_count": self.vertical_count,
        }


@dataclass
class GridStats:
    """Shape summary of a grid.

    Contract invariant: ``total_cells == row_count * column_count``.
    """

    row_count: int = 0
    column_count: int = 0
    total_cells: int = 0
    non_empty_cells: int = 0

    def __post_init__(self) -> None:
        self.row_count = _to_non_negative_int(self.row_count, "row_count")
        self.column_count = _to_non_negative_int(self.column_count, "column_count")
        self.total_cells = _to_non_negative_int(self.total_cells, "total_cells")
        self.non_empty_cells = _to_non_negative_int(self.non_empty_cells, "non_empty_cells")
        if self.total_cells != self.row_count * self.column_count:
            raise ValueError("total_cells must equal row_count * column_count")
        if self.non_empty_cells > self.total_cells:
            raise ValueError("non_empty_cells must be <= total_cells")

    def to_dict(self) -> dict[str, Any]:
        return {
            "row_count": self.row_count,
            "column_count": self.column_count,
            "total_cells": self.total_cells,
            "non_empty_cells": self.non_empty_cells,
        }


@dataclass
class PipelineResult:
    """Everything one pipeline invocation derives from a raw paste."""

    parsed: Grid = field(default_factory=list)
    grid: Grid = field(default_factory=list)
    has_header: bool = True
    fill_stats: FillStats | None = None
    output: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
