"""In-memory ConfigStore for testing."""

from pathlib import Path

from webstart.core.config_store.abc import ConfigStore


class FakeConfigStore(ConfigStore):
    """In-memory fake of the deployment configuration.

    Constructor Injection:
    - Initial properties and locks are provided via constructor parameters
    - set_property()/lock() mutate in-memory state like the real store
    - save() calls are counted, optionally failing with a configured error

    Examples:
        >>> store = FakeConfigStore(properties={"ows.jvm.manager.vendor": "Eclipse"})
        >>> store.get_property("ows.jvm.manager.vendor")
        'Eclipse'
    """

    def __init__(
        self,
        *,
        properties: dict[str, str] | None = None,
        locked: set[str] | None = None,
        save_error: OSError | ValueError | None = None,
    ) -> None:
        self._properties = dict(properties or {})
        self._locked = set(locked or set())
        self._save_error = save_error
        self._save_count = 0
        self._set_calls: list[tuple[str, str]] = []

    def get_property(self, key: str) -> str | None:
        return self._properties.get(key)

    def set_property(self, key: str, value: str) -> None:
        self._set_calls.append((key, value))
        self._properties[key] = value

    def remove_property(self, key: str) -> None:
        self._properties.pop(key, None)

    def lock(self, key: str) -> None:
        self._locked.add(key)

    def is_locked(self, key: str) -> bool:
        return key in self._locked

    def save(self) -> None:
        if self._save_error is not None:
            raise self._save_error
        self._save_count += 1

    def path(self) -> Path:
        return Path("/test/webstart/deployment.toml")

    @property
    def properties(self) -> dict[str, str]:
        """Current property values, for test assertions."""
        return self._properties

    @property
    def locked_keys(self) -> set[str]:
        return self._locked

    @property
    def set_calls(self) -> list[tuple[str, str]]:
        """Every set_property() call as (key, value), in call order."""
        return self._set_calls

    @property
    def save_count(self) -> int:
        return self._save_count
