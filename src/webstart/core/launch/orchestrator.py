"""Turning an invocation into exactly one application launch."""

import logging
from collections.abc import Sequence

from webstart.core.launch.args import extract_app_identity, filter_args
from webstart.core.launch.bridge import StartupNotificationBridge
from webstart.core.launcher.abc import ApplicationLauncher
from webstart.core.platform.abc import Platform

logger = logging.getLogger(__name__)


class LaunchOrchestrator:
    """Resolves OS-specific argument handling and starts the application."""

    def __init__(self, launcher: ApplicationLauncher, platform: Platform) -> None:
        self._launcher = launcher
        self._platform = platform

    def launch(self, raw_args: Sequence[str]) -> None:
        args = filter_args(raw_args)
        identity = extract_app_identity(args)
        logger.info("Launching %s with args %s", identity, args)
        self._launcher.launch(identity, args)

    def start(self, initial_args: Sequence[str]) -> StartupNotificationBridge:
        """Handle the arguments the process was started with.

        Returns the bridge that turns later re-invocation notifications into
        launches. Where the OS delivers invocations as notifications (macOS),
        the initial arguments are only remembered: the launch happens when
        the first notification arrives, with its parameters appended.
        Elsewhere the initial arguments are launched right away.
        """
        boot_args = filter_args(initial_args)
        bridge = StartupNotificationBridge(self, boot_args)

        if self._platform.delivers_reinvocation_as_notification():
            logger.info("Deferring launch until the first startup notification arrives")
        else:
            self.launch(boot_args)
        return bridge
