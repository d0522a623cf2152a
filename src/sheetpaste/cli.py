"""CLI entry point for sheetpaste."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table as RichTable

from sheetpaste import __version__
from sheetpaste.io import TEXT_SUFFIXES, load_grid, load_text, write_text
from sheetpaste.merges import detect_merges, fill_merges
from sheetpaste.models import Grid, OutputFormat
from sheetpaste.operations import detect_header
from sheetpaste.parser import describe_input, grid_stats, looks_like_tsv, parse_tsv
from sheetpaste.pipeline import internal_error_message, process_grid

app = typer.Typer(
    name="sheetpaste",
    help="sheetpaste — Turn pasted spreadsheet cells into LLM-ready Markdown or JSON.",
    add_completion=False,
    no_args_is_help=True,
)
# Converted text goes to stdout; status messages stay on stderr.
console = Console(stderr=True)


class HeaderOption(str, Enum):
    auto = "auto"
    yes = "yes"
    no = "no"


_HEADER_OVERRIDES: dict[HeaderOption, bool | None] = {
    HeaderOption.auto: None,
    HeaderOption.yes: True,
    HeaderOption.no: False,
}


def _noop(*_args: object, **_kwargs: object) -> None:
    return None


def _printer(quiet: bool) -> Callable[..., None]:
    return _noop if quiet else console.print


def _err(msg: str) -> None:
    console.print(f"[red]x[/red] {msg}")


# ── Helpers ──────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"sheetpaste v{__version__}")
        raise typer.Exit()


def _read_input(input_file: Path | None, sheet: str | None) -> tuple[str, Grid]:
    """Return ``(raw_text, parsed_grid)``; raw text is empty for workbooks."""
    if input_file is None:
        raw = sys.stdin.read()
        return raw, parse_tsv(raw)
    if input_file.suffix.lower() in TEXT_SUFFIXES:
        raw = load_text(input_file)
        return raw, parse_tsv(raw)
    return "", load_grid(input_file, sheet=sheet)


def _source_label(input_file: Path | None) -> str:
    return str(input_file) if input_file else "<stdin>"


_INPUT_HELP = "Pasted TSV text (.tsv/.txt) or an .xlsx workbook. Reads stdin when omitted."
_SHEET_HELP = "Worksheet name for .xlsx input (defaults to the first sheet)."


# ── Callbacks ────────────────────────────────────────────────────


@app.callback()
def main(
    version: bool | None = typer.Option(
        None, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """sheetpaste CLI."""


# ── convert command ──────────────────────────────────────────────


@app.command()
def convert(
    input_file: Path | None = typer.Option(
        None, "--input", "-i",
        help=_INPUT_HELP,
        exists=True, readable=True, dir_okay=False,
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.markdown_table, "--format", "-f",
        help="Output format.",
    ),
    transpose_grid: bool = typer.Option(
        False, "--transpose", "-t",
        help="Swap rows and columns before rendering.",
    ),
    fill: bool = typer.Option(
        True, "--fill/--no-fill",
        help="Fill cells left blank by merged ranges.",
    ),
    header: HeaderOption = typer.Option(
        HeaderOption.auto, "--header",
        help="Treat the first row as headers: auto (detect), yes, or no.",
    ),
    sheet: str | None = typer.Option(None, "--sheet", help=_SHEET_HELP),
    out_file: Path | None = typer.Option(
        None, "--out", "-o",
        help="Write the result to this file instead of stdout.",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Suppress informational output.",
    ),
) -> None:
    """Convert pasted spreadsheet cells into the selected text format."""
    echo = _printer(quiet)

    try:
        _raw, parsed = _read_input(input_file, sheet)
    except (FileNotFoundError, ValueError, OSError) as exc:
        _err(str(exc))
        raise typer.Exit(code=2)

    if not parsed:
        _err(f"No cells found in {_source_label(input_file)}.")
        raise typer.Exit(code=2)

    result = process_grid(
        parsed,
        fmt,
        fill=fill,
        transpose_grid=transpose_grid,
        has_header=_HEADER_OVERRIDES[header],
    )
    if result.error is not None:
        _err(result.error)
        raise typer.Exit(code=1)

    if not quiet:
        shape = grid_stats(parsed)
        console.print(Panel(
            f"[bold]sheetpaste[/bold] v{__version__}\n"
            f"Input:  {_source_label(input_file)}\n"
            f"Shape:  {shape.row_count} rows x {shape.column_count} columns\n"
            f"Format: {fmt.value}",
            title="Convert", border_style="blue",
        ))
        stats = result.fill_stats
        if stats is not None and stats.total_filled:
            echo(
                f"  [yellow]![/yellow] Filled {stats.total_filled} merged cells "
                f"({stats.horizontal_merges} horizontal, {stats.vertical_merges} vertical runs)"
            )
        origin = "detected" if header is HeaderOption.auto else "forced"
        echo(f"  Header row: {'yes' if result.has_header else 'no'} ({origin})")
        if transpose_grid:
            echo("  Transposed rows and columns")

    if out_file is not None:
        try:
            path = write_text(out_file, result.output)
        except OSError as exc:
            _err(f"Cannot write {out_file}: {exc}")
            raise typer.Exit(code=2)
        echo(f"  Output -> {path}")
        return

    typer.echo(result.output, nl=not result.output.endswith("\n"))


# ── stats command ────────────────────────────────────────────────


@app.command()
def stats(
    input_file: Path | None = typer.Option(
        None, "--input", "-i",
        help=_INPUT_HELP,
        exists=True, readable=True, dir_okay=False,
    ),
    sheet: str | None = typer.Option(None, "--sheet", help=_SHEET_HELP),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print statistics as JSON on stdout.",
    ),
) -> None:
    """Show the shape, merge patterns and header guess of a paste."""
    try:
        raw, parsed = _read_input(input_file, sheet)
    except (FileNotFoundError, ValueError, OSError) as exc:
        _err(str(exc))
        raise typer.Exit(code=2)

    try:
        shape = grid_stats(parsed)
        merges = detect_merges(parsed)
        filled, fill_stats = fill_merges(parsed)
        has_header = detect_header(filled)
    except Exception as exc:
        _err(internal_error_message(exc))
        raise typer.Exit(code=1)

    if as_json:
        payload = {
            "grid": shape.to_dict(),
            "merges": merges.to_dict(),
            "fill": fill_stats.to_dict(),
            "has_header": has_header,
            "input": describe_input(raw),
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    tbl = RichTable(title="Paste Summary", show_lines=True)
    tbl.add_column("Check", style="bold")
    tbl.add_column("Result")

    tbl.add_row("Rows", str(shape.row_count))
    tbl.add_row("Columns", str(shape.column_count))
    tbl.add_row("Cells", str(shape.total_cells))
    tbl.add_row("Non-empty cells", str(shape.non_empty_cells))
    tbl.add_row("Horizontal merges", str(merges.horizontal_count))
    tbl.add_row("Vertical merges", str(merges.vertical_count))
    tbl.add_row("Cells to fill", str(fill_stats.total_filled))
    tbl.add_row("Header row", "[green]yes[/green]" if has_header else "no")
    if raw and not looks_like_tsv(raw):
        tbl.add_row("Warning", "[yellow]no tab characters; is this spreadsheet data?[/yellow]")

    console.print(tbl)
