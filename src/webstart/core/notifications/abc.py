"""Single-instance notification channel abstraction.

On platforms that deliver re-invocations as notifications, the first
webstart process becomes the primary instance and listens. Later
invocations forward their arguments to it instead of launching on their own.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

NotificationCallback = Callable[[list[str]], None]


class NotificationChannel(ABC):
    """Transport for startup notifications between webstart processes.

    A notification is an argument list; arguments are delivered exactly as
    forwarded, including any embedded whitespace.
    """

    @abstractmethod
    def forward(self, args: Sequence[str]) -> bool:
        """Deliver arguments to a running primary instance.

        Returns:
            True if a primary instance accepted them, False if none is running
        """
        ...

    @abstractmethod
    def listen(self, callback: NotificationCallback) -> None:
        """Become the primary instance and deliver notifications to callback.

        Returns immediately; notifications are delivered on a background
        thread, one at a time.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Stop listening. Safe to call when not listening."""
        ...
