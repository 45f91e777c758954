"""Clock operations abstraction for testing.

This module provides an ABC for reading the wall clock so that bootstrap
bookkeeping and runtime usage stamps can be tested deterministically.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local time."""
        ...

    @abstractmethod
    def epoch_millis(self) -> int:
        """Return milliseconds since the Unix epoch.

        Used for the persisted bootstrap timestamp, which is compared against
        the installer's millisecond installation date.
        """
        ...
