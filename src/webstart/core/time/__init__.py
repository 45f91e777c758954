from webstart.core.time.abc import Time
from webstart.core.time.real import RealTime

__all__ = [
    "RealTime",
    "Time",
]
