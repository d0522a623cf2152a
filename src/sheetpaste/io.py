"""I/O helpers — load pasted text or workbooks as grids, write output text."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, cast

import pandas as pd

from sheetpaste.models import Grid
from sheetpaste.parser import parse_tsv
from sheetpaste.utils import is_blank

TEXT_SUFFIXES = (".tsv", ".tab", ".txt")
EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xltx", ".xltm")

# ── Loading ──────────────────────────────────────────────────────


def load_text(path: Path) -> str:
    """Read *path* as text, falling back to latin-1 when it is not UTF-8.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    last_exc: UnicodeDecodeError | None = None
    for encoding in ("utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError as exc:
            last_exc = exc
    raise ValueError(f"Could not decode {path}") from last_exc


def _frame_to_grid(df: pd.DataFrame) -> Grid:
    df = df.astype("string").fillna("")
    grid: Grid = []
    for values in df.itertuples(index=False, name=None):
        row = [str(value) for value in values]
        if any(not is_blank(cell) for cell in row):
            grid.append(row)
    return grid


def load_grid(path: Path, sheet: str | None = None) -> Grid:
    """Load pasted TSV text or an Excel worksheet as a raw, unfilled grid.

    Merged ranges in a workbook come through with only their top-left cell
    set, the same shape clipboard text has.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the extension is not supported or the sheet cannot be read.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in TEXT_SUFFIXES:
        return parse_tsv(load_text(path))

    if suffix in EXCEL_SUFFIXES:
        read_excel = cast(Callable[..., pd.DataFrame], getattr(pd, "read_excel"))
        try:
            df = read_excel(
                path,
                sheet_name=sheet if sheet is not None else 0,
                header=None,
                dtype="string",
                engine="openpyxl",
            )
        except (KeyError, ValueError) as exc:
            raise ValueError(f"Could not read sheet from {path}: {exc}") from exc
        return _frame_to_grid(df)

    raise ValueError(
        f"Unsupported file type: {suffix!r}. Use .tsv/.txt pasted text or .xlsx"
    )


# ── Writing ──────────────────────────────────────────────────────


def write_text(path: Path, text: str) -> Path:
    """Write *text* to *path* atomically and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    tmp_path.write_text(text, encoding="utf-8")
    tmp_path.replace(path)
    return path
