"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and resolved configuration listings.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .config import NormalizerConfig
from .errors import RawTextStageError


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, RawTextStageError):
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


def echo_config(config: NormalizerConfig) -> None:
    """Print resolved settings as deterministic `key=value` rows."""

    for line in config.as_lines():
        typer.echo(line)
