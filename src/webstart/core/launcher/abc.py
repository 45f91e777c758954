"""Application launch abstraction."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class ApplicationLauncher(ABC):
    """Starts a described application with already-filtered arguments."""

    @abstractmethod
    def launch(self, identity: str, args: Sequence[str]) -> None:
        """Start the application.

        Args:
            identity: Application name derived from the descriptor argument
            args: Launch arguments, including the descriptor location

        Raises:
            SelectionError: If no runtime could be selected
            LaunchConfigurationError: If the launcher is not configured
        """
        ...

    @abstractmethod
    def wait_for_applications(self) -> None:
        """Block until every application started so far has exited."""
        ...


class LaunchConfigurationError(Exception):
    """The launcher lacks configuration it needs to start applications."""
