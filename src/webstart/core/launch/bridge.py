"""Routing of re-invocation notifications into launches.

Notifications are pushed by the OS (or the single-instance channel) on
threads we do not control. Each one is merged with the arguments the
process was started with and launched while holding a per-bridge lock, so
two notifications never interleave.
"""

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from webstart.core.launch.orchestrator import LaunchOrchestrator

logger = logging.getLogger(__name__)


class StartupNotificationBridge:
    """Serialized listener for startup notifications.

    One merge and one launch per notification; rapid notifications queue on
    the lock instead of being coalesced.
    """

    def __init__(self, orchestrator: "LaunchOrchestrator", initial_args: Sequence[str]) -> None:
        self._orchestrator = orchestrator
        self._initial_args = list(initial_args)
        self._lock = threading.Lock()
        self._dispatched = threading.Event()
        self._stopped = False

    @property
    def initial_args(self) -> list[str]:
        return list(self._initial_args)

    def on_notification(self, payload: str) -> None:
        """Launch the initial arguments followed by the payload's tokens.

        The payload is split on whitespace, as delivered by OS open hooks.
        """
        self.on_arguments(payload.split())

    def on_arguments(self, supplementary: Sequence[str]) -> None:
        """Launch the initial arguments followed by already separated ones.

        Exceptions from the launch propagate to the delivering thread; the
        lock is released either way.
        """
        with self._lock:
            if self._stopped:
                logger.info("Ignoring startup notification %s after stop", list(supplementary))
                return
            merged = self._initial_args + list(supplementary)
            logger.info("Startup notification adds %s to the launch arguments", supplementary)
            try:
                self._orchestrator.launch(merged)
            finally:
                self._dispatched.set()

    def wait_for_dispatch(self, timeout: float | None = None) -> bool:
        """Block until a notification has been handled.

        Returns:
            True if a notification was handled before the timeout
        """
        return self._dispatched.wait(timeout)

    def stop(self) -> None:
        """Stop listening; waits for a notification in flight to finish."""
        with self._lock:
            self._stopped = True
        logger.debug("Startup notification bridge stopped")
