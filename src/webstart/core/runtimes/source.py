"""Runtime source abstraction.

A runtime source is anything the registry can read LocalRuntime records
from: the persisted catalog, a scan of the host, a test fixture.
"""

from abc import ABC, abstractmethod

from webstart.core.runtimes.types import LocalRuntime


class RuntimeSource(ABC):
    """Abstract source of installed runtime records."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short description used in log messages."""
        ...

    @abstractmethod
    def read_runtimes(self) -> list[LocalRuntime]:
        """Read every runtime this source knows about.

        Raises:
            OSError: If the underlying storage cannot be read
            ValueError: If the stored data is malformed
        """
        ...


class WritableRuntimeSource(RuntimeSource):
    """A runtime source that can also persist the registry's records."""

    @abstractmethod
    def write_runtimes(self, runtimes: list[LocalRuntime]) -> None:
        """Replace the stored records.

        Raises:
            OSError: If the storage cannot be written
        """
        ...
