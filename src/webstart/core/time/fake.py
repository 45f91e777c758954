"""Fake Time implementation for testing.

FakeTime returns a fixed instant supplied at construction, so timestamps
written during a test are predictable.
"""

from datetime import datetime

from webstart.core.time.abc import Time


class FakeTime(Time):
    """In-memory fake returning a frozen clock.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, now: datetime | None = None, epoch_millis: int = 1_000) -> None:
        """Create FakeTime.

        Args:
            now: Value returned from now() (defaults to 2024-01-01 12:00)
            epoch_millis: Value returned from epoch_millis()
        """
        self._now = now if now is not None else datetime(2024, 1, 1, 12, 0)
        self._epoch_millis = epoch_millis

    def now(self) -> datetime:
        return self._now

    def epoch_millis(self) -> int:
        return self._epoch_millis
