"""Fake InstallerVariables for testing."""

from webstart.core.installer.abc import InstallerVariables


class FakeInstallerVariables(InstallerVariables):
    """In-memory installer variables.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        variables: dict[str, str] | None = None,
        locked: set[str] | None = None,
        installation_timestamp: int | None = None,
    ) -> None:
        self._variables = variables or {}
        self._locked = locked or set()
        self._installation_timestamp = installation_timestamp

    def get_variable(self, name: str) -> str | None:
        return self._variables.get(name)

    def is_variable_locked(self, name: str) -> bool:
        return name in self._locked

    def get_installation_timestamp(self) -> int | None:
        return self._installation_timestamp
