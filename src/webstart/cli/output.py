"""Output helpers for CLI commands with clear intent."""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write a result meant for scripts to stdout."""
    click.echo(message, nl=nl)
