"""Fake Platform for testing OS-dependent behavior on any host."""

from webstart.core.platform.abc import Platform
from webstart.core.runtimes.types import OperatingSystem


class FakePlatform(Platform):
    """Platform reporting a fixed operating system.

    Examples:
        >>> platform = FakePlatform(operating_system=OperatingSystem.MACOS)
        >>> platform.delivers_reinvocation_as_notification()
        True
    """

    def __init__(self, *, operating_system: OperatingSystem = OperatingSystem.LINUX) -> None:
        self._operating_system = operating_system

    def operating_system(self) -> OperatingSystem:
        return self._operating_system
