from __future__ import annotations

import pytest

from sheetpaste.utils import is_blank, looks_numeric, max_row_length


@pytest.mark.parametrize("cell,expected", [(None, True), ("", True), (" \t\n", True), ("x", False)])
def test_is_blank(cell: str | None, expected: bool) -> None:
    assert is_blank(cell) is expected


@pytest.mark.parametrize(
    "cell,expected",
    [
        ("42", True),
        (" 42 ", True),
        ("-3.5", True),
        ("+.5", True),
        ("1e-3", True),
        ("7.", True),
        ("", False),
        ("  ", False),
        (None, False),
        ("1,000", False),
        ("nan", False),
        ("inf", False),
        ("0x1F", False),
        ("12abc", False),
    ],
)
def test_looks_numeric(cell: str | None, expected: bool) -> None:
    assert looks_numeric(cell) is expected


def test_max_row_length() -> None:
    assert max_row_length([]) == 0
    assert max_row_length([["a"], ["b", "c"], []]) == 2
