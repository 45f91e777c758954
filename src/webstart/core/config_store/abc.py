"""Persisted deployment configuration abstraction.

The configuration is a flat mapping of dotted property keys to string
values, plus a set of locked keys that users may not change.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ConfigStore(ABC):
    """Abstract interface for the persisted deployment configuration.

    Provides dependency injection for configuration access, enabling
    in-memory implementations for tests without touching the filesystem.
    Mutations are buffered until save() is called.
    """

    @abstractmethod
    def get_property(self, key: str) -> str | None:
        """Get a property value.

        Args:
            key: Dotted property key

        Returns:
            The stored value, or None if the key is not set
        """
        ...

    @abstractmethod
    def set_property(self, key: str, value: str) -> None:
        """Set a property value (not persisted until save())."""
        ...

    @abstractmethod
    def remove_property(self, key: str) -> None:
        """Unset a property (not persisted until save()). Unset keys are ignored."""
        ...

    @abstractmethod
    def lock(self, key: str) -> None:
        """Mark a property as locked against user changes."""
        ...

    @abstractmethod
    def is_locked(self, key: str) -> bool:
        """Check whether a property is locked."""
        ...

    @abstractmethod
    def save(self) -> None:
        """Persist all buffered changes.

        Raises:
            OSError: If the configuration cannot be written
            ValueError: If the persisted configuration could not be read, so
                writing would replace it with partial data
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the location of the persisted configuration (for messages)."""
        ...
