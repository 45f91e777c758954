"""Operating system detection abstraction."""

from abc import ABC, abstractmethod

from webstart.core.runtimes.types import OperatingSystem


class Platform(ABC):
    """Abstract host platform queries for dependency injection."""

    @abstractmethod
    def operating_system(self) -> OperatingSystem:
        """Return the operating system of the running process."""
        ...

    def is_windows(self) -> bool:
        return self.operating_system() is OperatingSystem.WINDOWS

    def is_macos(self) -> bool:
        return self.operating_system() is OperatingSystem.MACOS

    def is_linux(self) -> bool:
        return self.operating_system() is OperatingSystem.LINUX

    def delivers_reinvocation_as_notification(self) -> bool:
        """Check whether a second invocation arrives as a notification.

        On macOS the OS hands "open this file" requests to the running
        application instead of starting a new process, so the launch
        arguments only become known once the first notification arrives.
        """
        return self.is_macos()
