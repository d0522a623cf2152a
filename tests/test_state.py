from __future__ import annotations

import json

import pytest

from sheetpaste import state as state_mod
from sheetpaste.models import OutputFormat
from sheetpaste.state import (
    AppState,
    cleared,
    format_changed,
    header_toggled,
    text_changed,
    transpose_requested,
)

RAW = "Name\tAge\nAlice\t25\nBob\t30"


def test_initial_state_is_empty() -> None:
    state = AppState()

    assert state.grid == []
    assert state.output == ""
    assert state.selected_format is OutputFormat.markdown_table
    assert state.error is None


def test_text_changed_runs_the_pipeline() -> None:
    state = text_changed(AppState(), RAW)

    assert state.raw_text == RAW
    assert state.has_header is True
    assert state.output == "| Name | Age |\n|---|---|\n| Alice | 25 |\n| Bob | 30 |\n"
    assert state.fill_stats is not None


def test_transitions_do_not_modify_previous_state() -> None:
    before = AppState()

    after = text_changed(before, RAW)

    assert before.raw_text == ""
    assert after is not before


def test_text_changed_keeps_selected_format() -> None:
    state = format_changed(AppState(), OutputFormat.plain_list)

    state = text_changed(state, RAW)

    assert state.output == "- Alice\n- 25\n- Bob\n- 30"


def test_blank_text_resets_grid_but_keeps_format() -> None:
    state = format_changed(text_changed(AppState(), RAW), "json_flat")

    state = text_changed(state, "  \n ")

    assert state.grid == []
    assert state.output == ""
    assert state.selected_format is OutputFormat.json_flat


def test_format_changed_rerenders_current_grid() -> None:
    state = format_changed(text_changed(AppState(), RAW), OutputFormat.json_flat)

    assert json.loads(state.output) == [
        {"name": "Alice", "age": 25},
        {"name": "Bob", "age": 30},
    ]


def test_unknown_format_name_falls_back_to_table() -> None:
    state = format_changed(text_changed(AppState(), RAW), "key_value")

    assert state.selected_format is OutputFormat.markdown_table


def test_transpose_requested_keeps_header_flag() -> None:
    state = transpose_requested(text_changed(AppState(), RAW))

    assert state.transposed is True
    assert state.has_header is True
    assert state.grid == [["Name", "Alice", "Bob"], ["Age", "25", "30"]]

    back = transpose_requested(state)

    assert back.transposed is False
    assert back.grid == [["Name", "Age"], ["Alice", "25"], ["Bob", "30"]]


def test_new_text_clears_transpose() -> None:
    state = transpose_requested(text_changed(AppState(), RAW))

    state = text_changed(state, "A\tB\n1\t2")

    assert state.transposed is False
    assert state.grid == [["A", "B"], ["1", "2"]]


def test_header_toggled_rerenders() -> None:
    state = header_toggled(text_changed(AppState(), RAW), False)

    assert state.output.startswith("| Column 1 | Column 2 |\n")


def test_cleared_resets_everything() -> None:
    state = format_changed(text_changed(AppState(), RAW), OutputFormat.plain_list)

    assert cleared(state) == AppState()


def test_errors_are_reported_not_raised(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(raw: str) -> None:
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(state_mod, "repair", _boom)
    previous = AppState(output="previous")

    state = text_changed(previous, RAW)

    assert state.error == "Unexpected internal error: parser exploded"
    assert state.output == "previous"
