"""Platform detection based on sys.platform."""

import sys

from webstart.core.platform.abc import Platform
from webstart.core.runtimes.types import OperatingSystem


class RealPlatform(Platform):
    """Production implementation reading sys.platform."""

    def operating_system(self) -> OperatingSystem:
        if sys.platform.startswith("win"):
            return OperatingSystem.WINDOWS
        if sys.platform == "darwin":
            return OperatingSystem.MACOS
        return OperatingSystem.LINUX
