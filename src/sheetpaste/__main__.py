from sheetpaste.cli import app

app()
