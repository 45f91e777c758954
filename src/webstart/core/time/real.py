"""Real clock implementation."""

import time
from datetime import datetime

from webstart.core.time.abc import Time


class RealTime(Time):
    """Production implementation backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now()

    def epoch_millis(self) -> int:
        return time.time_ns() // 1_000_000
