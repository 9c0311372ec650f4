"""CLI command implementations."""

from typeguess.cli.commands import cultures, infer

__all__ = ["cultures", "infer"]
