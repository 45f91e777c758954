"""Installer-provided variables abstraction.

The installer records the values an administrator chose at install time,
whether each of them should be locked, and when the installation happened.
"""

from abc import ABC, abstractmethod


class InstallerVariables(ABC):
    """Abstract read-only view of installer variables."""

    @abstractmethod
    def get_variable(self, name: str) -> str | None:
        """Get an installer variable.

        Returns:
            The variable value, or None if the installer did not define it
        """
        ...

    @abstractmethod
    def is_variable_locked(self, name: str) -> bool:
        """Check whether the installer marked a variable as locked."""
        ...

    @abstractmethod
    def get_installation_timestamp(self) -> int | None:
        """Get the installation time in milliseconds since the epoch.

        Returns:
            The timestamp, or None if unknown
        """
        ...
