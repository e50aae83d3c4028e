"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and cleaning-run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CommandStageError
from .workflow import CleanResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_clean_summary(result: CleanResult) -> None:
    """Print record count and output location of a cleaning run."""

    typer.echo(f"Records cleaned: {result.record_count}")
    typer.echo(f"Output: {result.output_path}")
