"""Cultures command - list the culture presets."""

from __future__ import annotations

import json

import typer
from rich.table import Table as RichTable

from typeguess.cli.common import JsonFlag, console
from typeguess.culture import load_cultures


def cultures(json_output: JsonFlag = False) -> None:
    """List the culture presets available to --culture."""
    catalog = load_cultures()

    if json_output:
        typer.echo(
            json.dumps([catalog.get(name).model_dump() for name in catalog.names()], indent=2)
        )
        return

    table = RichTable(title="Cultures")
    table.add_column("Name", style="cyan")
    table.add_column("Decimal")
    table.add_column("Group")
    table.add_column("Dates")
    table.add_column("True / False")

    for name in catalog.names():
        culture = catalog.get(name)
        table.add_row(
            culture.name,
            repr(culture.decimal_separator),
            repr(culture.group_separator),
            culture.date_order,
            f"{', '.join(culture.true_literals)} / {', '.join(culture.false_literals)}",
        )

    console.print(table)
