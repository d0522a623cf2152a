"""Parse → repair → transform pipeline — pure functions, no side effects."""

from __future__ import annotations

from collections.abc import Callable

from sheetpaste.merges import fill_merges
from sheetpaste.models import FillStats, Grid, OutputFormat, PipelineResult
from sheetpaste.operations import detect_header, transpose
from sheetpaste.parser import parse_tsv
from sheetpaste.transformers import (
    to_json_flat,
    to_markdown_hierarchical,
    to_markdown_table,
    to_plain_list,
)

Transformer = Callable[[Grid, bool], str]

TRANSFORMERS: dict[OutputFormat, Transformer] = {
    OutputFormat.markdown_table: to_markdown_table,
    OutputFormat.json_flat: to_json_flat,
    OutputFormat.markdown_hierarchical: to_markdown_hierarchical,
    OutputFormat.plain_list: to_plain_list,
}


def internal_error_message(exc: BaseException) -> str:
    return f"Unexpected internal error: {exc}"


def transform(grid: Grid, has_header: bool, fmt: OutputFormat | str) -> str:
    """Render *grid* in *fmt*; unknown format names render a Markdown table."""
    return TRANSFORMERS[OutputFormat.parse(fmt)](grid, has_header)


def fill_grid(parsed: Grid, *, fill: bool = True) -> tuple[Grid, FillStats]:
    """Fill merged cells, or just copy the grid when *fill* is off."""
    if not fill:
        return [list(row) for row in parsed], FillStats()
    return fill_merges(parsed)


def repair(raw: str, *, fill: bool = True) -> tuple[Grid, Grid, FillStats]:
    """Parse *raw* and fill merged cells.

    Returns ``(parsed, filled, fill_stats)``.
    """
    parsed = parse_tsv(raw)
    filled, stats = fill_grid(parsed, fill=fill)
    return parsed, filled, stats


def process_grid(
    parsed: Grid,
    fmt: OutputFormat | str = OutputFormat.markdown_table,
    *,
    fill: bool = True,
    transpose_grid: bool = False,
    has_header: bool | None = None,
) -> PipelineResult:
    """Fill, classify, optionally transpose and render an already parsed grid.

    Header detection runs on the filled grid before any transpose; pass
    *has_header* to override it. Unexpected failures are reported in
    ``result.error`` instead of being raised.
    """
    try:
        grid, stats = fill_grid(parsed, fill=fill)
        header = detect_header(grid) if has_header is None else has_header
        if transpose_grid:
            grid = transpose(grid)
        output = transform(grid, header, fmt)
    except Exception as exc:
        return PipelineResult(parsed=parsed, error=internal_error_message(exc))

    return PipelineResult(
        parsed=parsed,
        grid=grid,
        has_header=header,
        fill_stats=stats,
        output=output,
    )


def run_pipeline(
    raw: str,
    fmt: OutputFormat | str = OutputFormat.markdown_table,
    *,
    fill: bool = True,
    transpose_grid: bool = False,
    has_header: bool | None = None,
) -> PipelineResult:
    """Run the full pipeline on a raw paste; see :func:`process_grid`."""
    try:
        parsed = parse_tsv(raw)
    except Exception as exc:
        return PipelineResult(error=internal_error_message(exc))
    return process_grid(
        parsed, fmt, fill=fill, transpose_grid=transpose_grid, has_header=has_header
    )
