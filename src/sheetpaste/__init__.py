"""sheetpaste — Turn pasted spreadsheet cells into LLM-ready Markdown or JSON."""

__version__ = "0.1.0"
