"""Application state for an interactive front end.

The state object is immutable. Each user event maps to a pure transition
that returns a new state; the pipeline itself keeps no state between calls.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace

from sheetpaste.models import FillStats, Grid, OutputFormat
from sheetpaste.operations import detect_header, transpose
from sheetpaste.pipeline import internal_error_message, repair, transform


@dataclass(frozen=True)
class AppState:
    raw_text: str = ""
    parsed: Grid = field(default_factory=list)
    grid: Grid = field(default_factory=list)
    has_header: bool = True
    fill_stats: FillStats | None = None
    selected_format: OutputFormat = OutputFormat.markdown_table
    transposed: bool = False
    output: str = ""
    error: str | None = None


def _guarded(state: AppState, step: Callable[[], AppState]) -> AppState:
    try:
        return step()
    except Exception as exc:
        return replace(state, error=internal_error_message(exc))


def _render(state: AppState) -> str:
    if not state.grid:
        return ""
    return transform(state.grid, state.has_header, state.selected_format)


def text_changed(state: AppState, raw: str) -> AppState:
    """New paste: re-parse, re-fill and re-detect the header from scratch."""

    def step() -> AppState:
        parsed, grid, stats = repair(raw)
        if not parsed:
            return AppState(raw_text=raw, selected_format=state.selected_format)
        updated = replace(
            state,
            raw_text=raw,
            parsed=parsed,
            grid=grid,
            has_header=detect_header(grid),
            fill_stats=stats,
            transposed=False,
            error=None,
        )
        return replace(updated, output=_render(updated))

    return _guarded(state, step)


def format_changed(state: AppState, fmt: OutputFormat | str) -> AppState:
    """Re-render the current grid in another format."""

    def step() -> AppState:
        updated = replace(state, selected_format=OutputFormat.parse(fmt), error=None)
        return replace(updated, output=_render(updated))

    return _guarded(state, step)


def transpose_requested(state: AppState) -> AppState:
    """Swap rows and columns of the current grid; the header flag is kept."""

    def step() -> AppState:
        updated = replace(
            state, grid=transpose(state.grid), transposed=not state.transposed, error=None
        )
        return replace(updated, output=_render(updated))

    return _guarded(state, step)


def header_toggled(state: AppState, has_header: bool) -> AppState:
    """Override the detected header flag."""

    def step() -> AppState:
        updated = replace(state, has_header=has_header, error=None)
        return replace(updated, output=_render(updated))

    return _guarded(state, step)


def cleared(state: AppState) -> AppState:
    """Drop the paste and every derived value, including the chosen format."""
    return AppState()
