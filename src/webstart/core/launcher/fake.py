"""Fake ApplicationLauncher for testing."""

from collections.abc import Callable, Sequence

from webstart.core.launcher.abc import ApplicationLauncher


class FakeApplicationLauncher(ApplicationLauncher):
    """Records launches instead of starting processes.

    Constructor Injection:
    - on_launch: optional hook run for each launch, e.g. to raise or to
      slow a launch down in concurrency tests
    """

    def __init__(self, *, on_launch: Callable[[str, list[str]], None] | None = None) -> None:
        self._on_launch = on_launch
        self._launches: list[tuple[str, list[str]]] = []
        self._wait_count = 0

    def launch(self, identity: str, args: Sequence[str]) -> None:
        self._launches.append((identity, list(args)))
        if self._on_launch is not None:
            self._on_launch(identity, list(args))

    def wait_for_applications(self) -> None:
        self._wait_count += 1

    @property
    def launches(self) -> list[tuple[str, list[str]]]:
        """Every launch as (identity, args), in call order."""
        return self._launches

    @property
    def wait_count(self) -> int:
        return self._wait_count
