"""Output transformers — render a grid as LLM-friendly text.

Every transformer takes ``(grid, has_header)``, never mutates the grid and
accepts ragged or empty grids.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from sheetpaste.models import Grid

_KEY_RE = re.compile(r"[^a-z0-9]+")
_INT_RE = re.compile(r"^-?\d+$")
_DECIMAL_RE = re.compile(r"^-?\d+\.\d+$")
_NULL_TOKENS = frozenset({"null", "n/a", "na", "-"})


def _split_header(grid: Grid, has_header: bool, label: str) -> tuple[list[str], Grid]:
    if has_header:
        return list(grid[0]), grid[1:]
    return [label.format(i + 1) for i in range(len(grid[0]))], grid


# ── Markdown table ──────────────────────────────────────────────


def _table_line(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |\n"


def to_markdown_table(grid: Grid, has_header: bool = True) -> str:
    """Render a pipe table; body rows are padded or cut to the header width."""
    if not grid:
        return ""

    headers, rows = _split_header(grid, has_header, "Column {}")
    width = len(headers)

    lines = [_table_line(headers), "|" + "|".join("---" for _ in headers) + "|\n"]
    for row in rows:
        cells = list(row[:width]) + [""] * (width - len(row))
        lines.append(_table_line(cells))
    return "".join(lines)


# ── Flat JSON ───────────────────────────────────────────────────


def sanitize_key(header: str) -> str:
    """Lowercase *header* and collapse non-alphanumeric runs to ``_``."""
    return _KEY_RE.sub("_", header.lower()).strip("_")


def infer_value(value: str) -> Any:
    """Interpret a cell as bool, null, number or trimmed text."""
    text = value.strip()
    if not text:
        return ""

    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if lowered in _NULL_TOKENS:
        return None

    # Only values that print back unchanged count as numbers ("042" stays text).
    # Whole numbers past double precision (IDs, codes) stay text too.
    if _INT_RE.match(text):
        number = int(text)
        if str(number) == text and abs(number) < 1e21 and float(number) == number:
            return number
    elif _DECIMAL_RE.match(text):
        real = float(text)
        if math.isfinite(real) and not real.is_integer() and repr(real) == text:
            return real
    return text


def to_json_flat(grid: Grid, has_header: bool = True) -> str:
    """Render one JSON object per body row, keyed by sanitized headers."""
    if not grid or (len(grid) == 1 and has_header):
        return "[]"

    headers, rows = _split_header(grid, has_header, "column_{}")
    keys = [sanitize_key(header) for header in headers]

    records: list[dict[str, Any]] = []
    for row in rows:
        record: dict[str, Any] = {}
        for index, key in enumerate(keys):
            record[key] = infer_value(row[index] if index < len(row) else "")
        records.append(record)

    return json.dumps(records, indent=2, ensure_ascii=False)


# ── Hierarchical Markdown list ──────────────────────────────────


def to_markdown_hierarchical(grid: Grid, has_header: bool = True) -> str:
    """Render each column as a ``##`` section listing its non-blank cells."""
    if not grid:
        return ""

    headers, rows = _split_header(grid, has_header, "Category {}")

    sections: list[str] = []
    for col, header in enumerate(headers):
        title = header if header else f"Category {col + 1}"
        items = [row[col] for row in rows if col < len(row) and row[col].strip()]
        if items:
            body = "".join(f"- {item}\n" for item in items)
        else:
            body = "_No items_\n"
        sections.append(f"## {title}\n\n{body}\n")
    return "".join(sections)


# ── Plain list ──────────────────────────────────────────────────


def to_plain_list(grid: Grid, has_header: bool = True) -> str:
    """Flatten body cells row by row into a single bullet list."""
    if not grid:
        return ""

    rows = grid[1:] if has_header else grid
    items = [cell.strip() for row in rows for cell in row if cell.strip()]
    return "\n".join(f"- {item}" for item in items)
