"""Shared CLI utilities and constants."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console

from typeguess.core.config import get_settings
from typeguess.core.logging import configure_logging
from typeguess.culture import CultureConfig, get_culture

# Shared console instance
console = Console()

# Common type aliases for typer options
JsonFlag = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output as JSON for scripting",
    ),
]

CultureOption = Annotated[
    str | None,
    typer.Option(
        "--culture",
        "-c",
        help="Culture preset for numbers, dates and booleans (see 'typeguess cultures')",
    ),
]

VerboseOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase logging verbosity (-v=INFO, -vv=DEBUG)",
    ),
]


def setup_logging(verbosity: int = 0, log_format: str | None = None) -> None:
    """Configure structured logging based on verbosity level.

    Args:
        verbosity: 0=configured level, 1=INFO, 2+=DEBUG
        log_format: "console" for development, "json" for production/cloud
    """
    settings = get_settings()
    if verbosity >= 2:
        level = "DEBUG"
    elif verbosity >= 1:
        level = "INFO"
    else:
        level = settings.log_level

    log_format = log_format or settings.log_format
    configure_logging(
        log_level=level,
        log_format=log_format,
        show_timestamps=verbosity >= 1,
        color=log_format == "console",
    )


def resolve_culture(name: str | None) -> CultureConfig:
    """Look up a culture preset, exiting with an error for unknown names."""
    try:
        return get_culture(name)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        raise typer.Exit(1) from None
