"""Fake NotificationChannel for testing."""

from collections.abc import Sequence

from webstart.core.notifications.abc import NotificationCallback, NotificationChannel


class FakeNotificationChannel(NotificationChannel):
    """In-memory channel.

    Constructor Injection:
    - primary_running: whether forward() finds a primary instance

    deliver() plays the role of another process sending a notification to
    the listening callback.
    """

    def __init__(self, *, primary_running: bool = False) -> None:
        self._primary_running = primary_running
        self._forwarded: list[list[str]] = []
        self._callback: NotificationCallback | None = None
        self._closed = False

    def forward(self, args: Sequence[str]) -> bool:
        if not self._primary_running:
            return False
        self._forwarded.append(list(args))
        return True

    def listen(self, callback: NotificationCallback) -> None:
        self._callback = callback

    def close(self) -> None:
        self._callback = None
        self._closed = True

    def deliver(self, args: list[str]) -> None:
        if self._callback is None:
            raise RuntimeError("Nothing is listening")
        self._callback(list(args))

    @property
    def forwarded(self) -> list[list[str]]:
        """Every forwarded argument list, in call order."""
        return self._forwarded

    @property
    def is_listening(self) -> bool:
        return self._callback is not None

    @property
    def closed(self) -> bool:
        return self._closed
