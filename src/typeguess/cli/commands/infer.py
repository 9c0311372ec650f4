"""Infer command - guess the column types of a CSV file."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import pandas as pd
import typer
from rich.table import Table as RichTable

from typeguess.cli.common import (
    CultureOption,
    JsonFlag,
    VerboseOption,
    console,
    resolve_culture,
    setup_logging,
)
from typeguess.core.exceptions import TypeGuessError
from typeguess.core.logging import get_logger
from typeguess.core.models import DatabaseTypeRequest
from typeguess.frames import guess_frame
from typeguess.settings import GuessSettings

logger = get_logger(__name__)


def infer(
    path: Annotated[
        Path,
        typer.Argument(
            help="CSV file to inspect",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
    culture: CultureOption = None,
    char_bool: Annotated[
        bool,
        typer.Option(
            "--char-bool",
            help="Treat single letters such as Y/N or T/F as booleans",
        ),
    ] = False,
    compact_dates: Annotated[
        bool,
        typer.Option(
            "--compact-dates",
            help="Treat eight digit yyyymmdd values as dates",
        ),
    ] = False,
    separator: Annotated[
        str,
        typer.Option(
            "--sep",
            help="Field separator",
        ),
    ] = ",",
    json_output: JsonFlag = False,
    verbose: VerboseOption = 0,
) -> None:
    """Guess the narrowest storage type for every column of a CSV file.

    All cells are read as text; empty cells are ignored.

    Examples:

        typeguess infer data.csv

        typeguess infer data.csv --culture de-DE --sep ";"

        typeguess infer data.csv --json
    """
    setup_logging(verbose)
    settings = GuessSettings(culture=resolve_culture(culture), compact_dates=compact_dates)
    if char_bool:
        settings.char_can_be_boolean = True

    frame = pd.read_csv(path, sep=separator, dtype=str, keep_default_na=False)
    logger.info("file_loaded", path=str(path), rows=len(frame), columns=len(frame.columns))

    try:
        results = guess_frame(frame, settings)
    except TypeGuessError as e:
        console.print(f"[red]Could not guess column types: {e}[/red]")
        raise typer.Exit(1) from None

    if json_output:
        _infer_json(results)
    else:
        _infer_rich(path, results, settings)


def _infer_json(results: dict[str, DatabaseTypeRequest]) -> None:
    """Output guesses as JSON."""
    output: dict[str, dict[str, Any]] = {}
    for column, request in results.items():
        output[column] = {
            "type": request.type.value,
            "integer_digits": request.size.integer_digits,
            "fractional_digits": request.size.fractional_digits,
            "string_length": request.size.string_length,
            "unicode": request.unicode,
        }
    typer.echo(json.dumps(output, indent=2))


def _infer_rich(
    path: Path, results: dict[str, DatabaseTypeRequest], settings: GuessSettings
) -> None:
    """Print guesses as a table."""
    table = RichTable(title=f"{path.name} ({settings.culture.name})")
    table.add_column("Column", style="cyan")
    table.add_column("Type", style="green")
    table.add_column("Digits", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Unicode")

    for column, request in results.items():
        size = request.size
        digits = f"{size.precision},{size.scale}" if not size.is_empty else "-"
        table.add_row(
            column,
            str(request),
            digits,
            str(size.string_length),
            "yes" if request.unicode else "",
        )

    console.print(table)
