"""CLI for typeguess.

Guesses column types of delimited text files from the command line.

Usage:
    typeguess infer data.csv
    typeguess infer data.csv --culture de-DE --json
    typeguess cultures

Environment:
    Reads TYPEGUESS_* variables (and a .env file) for defaults.
"""

from typeguess.cli.main import app, main

__all__ = ["app", "main"]
