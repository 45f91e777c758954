"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import NoReturn, TypeVar

import click

from webstart.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            Ensure.fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        This method provides type narrowing: it takes `T | None` and returns `T`.

        Example:
            >>> value = Ensure.not_none(ctx.config_store.get_property(key), f"'{key}' is not set")
        """
        if value is None:
            Ensure.fail(error_message)
        return value

    @staticmethod
    def not_empty(values: list[T], error_message: str) -> list[T]:
        """Ensure a list has at least one element, otherwise output styled error and exit."""
        if not values:
            Ensure.fail(error_message)
        return values

    @staticmethod
    def fail(error_message: str) -> NoReturn:
        """Output styled error and exit with code 1.

        Raises:
            SystemExit: Always
        """
        user_output(click.style("Error: ", fg="red") + error_message)
        raise SystemExit(1)
