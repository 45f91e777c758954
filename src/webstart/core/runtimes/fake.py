"""Fake runtime sources for testing."""

from webstart.core.runtimes.source import WritableRuntimeSource
from webstart.core.runtimes.types import LocalRuntime


class FakeRuntimeSource(WritableRuntimeSource):
    """In-memory runtime source.

    Constructor Injection:
    - runtimes: records returned from read_runtimes()
    - read_error: raised from read_runtimes() instead, to simulate a broken source

    Writes are captured in written_runtimes for assertions.
    """

    def __init__(
        self,
        *,
        runtimes: list[LocalRuntime] | None = None,
        read_error: Exception | None = None,
        name: str = "fake",
    ) -> None:
        self._runtimes = list(runtimes or [])
        self._read_error = read_error
        self._name = name
        self._written: list[list[LocalRuntime]] = []

    @property
    def name(self) -> str:
        return self._name

    def read_runtimes(self) -> list[LocalRuntime]:
        if self._read_error is not None:
            raise self._read_error
        return list(self._runtimes)

    def write_runtimes(self, runtimes: list[LocalRuntime]) -> None:
        self._written.append(list(runtimes))

    @property
    def written_runtimes(self) -> list[list[LocalRuntime]]:
        """Every write_runtimes() payload, in call order."""
        return self._written
