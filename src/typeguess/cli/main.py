"""Main CLI application entry point."""

from __future__ import annotations

import typer

from typeguess.cli.commands import cultures, infer

app = typer.Typer(
    name="typeguess",
    help="typeguess - infer the narrowest storage type for each column of a file.",
    no_args_is_help=True,
)

# Register commands
app.command()(infer.infer)
app.command()(cultures.cultures)


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
