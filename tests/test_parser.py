from __future__ import annotations

import pytest

from sheetpaste.models import GridStats
from sheetpaste.parser import describe_input, grid_stats, looks_like_tsv, parse_tsv


def test_parse_simple_rows() -> None:
    raw = "Name\tAge\tCity\nAlice\t25\tNYC\nBob\t30\tLA"

    assert parse_tsv(raw) == [
        ["Name", "Age", "City"],
        ["Alice", "25", "NYC"],
        ["Bob", "30", "LA"],
    ]


@pytest.mark.parametrize("raw", ["", "   ", "\n\n", "\t\t\n \t "])
def test_blank_input_gives_empty_grid(raw: str) -> None:
    assert parse_tsv(raw) == []


def test_blank_lines_are_dropped() -> None:
    assert parse_tsv("A\tB\n\nC\tD\n\n") == [["A", "B"], ["C", "D"]]


def test_whitespace_only_row_is_dropped() -> None:
    assert parse_tsv("A\tB\n \t \nC\tD") == [["A", "B"], ["C", "D"]]


def test_crlf_is_a_single_row_delimiter() -> None:
    assert parse_tsv("A\tB\r\nC\tD\r\n") == [["A", "B"], ["C", "D"]]


def test_quoted_cell_spans_lines() -> None:
    raw = 'Name\tDescription\nProject A\t"Line 1\nLine 2\nLine 3"\nProject B\tSingle line'

    assert parse_tsv(raw) == [
        ["Name", "Description"],
        ["Project A", "Line 1\nLine 2\nLine 3"],
        ["Project B", "Single line"],
    ]


def test_doubled_quotes_decode_to_one_quote() -> None:
    raw = 'Name\tQuote\nPerson A\t"He said ""Hello"""'

    assert parse_tsv(raw) == [["Name", "Quote"], ["Person A", 'He said "Hello"']]


def test_tabs_inside_quotes_are_content() -> None:
    raw = 'Name\tData\nTest\t"Value1\tValue2\tValue3"'

    assert parse_tsv(raw) == [["Name", "Data"], ["Test", "Value1\tValue2\tValue3"]]


def test_mixed_quoted_and_plain_cells() -> None:
    raw = 'A\t"B\nB2"\tC\n"D\nD2"\tE\t"F"'

    assert parse_tsv(raw) == [["A", "B\nB2", "C"], ["D\nD2", "E", "F"]]


def test_unterminated_quote_keeps_rest_of_input_in_cell() -> None:
    raw = 'A\t"open cell\nstill\topen'

    assert parse_tsv(raw) == [["A", "open cell\nstill\topen"]]


def test_trailing_tab_keeps_empty_cell() -> None:
    assert parse_tsv("A\t\tB\t\nC") == [["A", "", "B", ""], ["C"]]


def test_ragged_rows_are_kept_as_is() -> None:
    assert parse_tsv("A\tB\tC\nD") == [["A", "B", "C"], ["D"]]


@pytest.mark.parametrize(
    "value",
    ["line1\nline2", "tab\there", 'say "hi"', '"', '""', "\n\t\"\n", "a\r\nb"],
)
def test_quoted_value_round_trips(value: str) -> None:
    encoded = '"' + value.replace('"', '""') + '"'
    raw = f"left\t{encoded}\tright"

    assert parse_tsv(raw) == [["left", value, "right"]]


def test_looks_like_tsv() -> None:
    assert looks_like_tsv("A\tB\tC") is True
    assert looks_like_tsv("Name\tAge\nAlice\t25") is True
    assert looks_like_tsv("A,B,C") is False
    assert looks_like_tsv("just text") is False
    assert looks_like_tsv("") is False


def test_grid_stats_counts_shape_and_values() -> None:
    grid = [["Name", "Age", "City"], ["Alice", "25", "NYC"], ["Bob", "", "LA"]]

    assert grid_stats(grid) == GridStats(
        row_count=3, column_count=3, total_cells=9, non_empty_cells=8
    )


def test_grid_stats_uses_longest_row_for_columns() -> None:
    stats = grid_stats([["A"], ["B", "C", " "]])

    assert stats.column_count == 3
    assert stats.total_cells == 6
    assert stats.non_empty_cells == 3


def test_grid_stats_empty_grid() -> None:
    assert grid_stats([]).to_dict() == {
        "row_count": 0,
        "column_count": 0,
        "total_cells": 0,
        "non_empty_cells": 0,
    }


def test_describe_input_reports_clipboard_features() -> None:
    info = describe_input('A\t"B"\r\nC\tD')

    assert info["has_tabs"] is True
    assert info["has_quotes"] is True
    assert info["has_crlf"] is True
    assert info["line_count"] == 2
    assert info["length"] == 10


def test_describe_input_truncates_preview() -> None:
    info = describe_input("x" * 500)

    assert len(info["preview"]) == 200
