from webstart.core.platform.abc import Platform
from webstart.core.platform.real import RealPlatform

__all__ = ["Platform", "RealPlatform"]
