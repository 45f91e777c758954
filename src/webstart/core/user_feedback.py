"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from webstart.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing diagnostic output.

    Core code reports progress through ctx.feedback instead of printing, so
    tests can capture it and quiet modes can drop it.

    Usage:
        ctx.feedback.info("Importing initial configuration...")
        ctx.feedback.success("✓ Configuration imported")
        ctx.feedback.error("Error: Could not save configuration")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message (always shown)."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))


class SuppressedFeedback(UserFeedback):
    """Feedback for quiet mode (only errors shown).

    Used for `webstart launch --quiet`, where the launcher is typically
    started by a desktop integration with nobody watching the terminal.
    """

    def info(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
