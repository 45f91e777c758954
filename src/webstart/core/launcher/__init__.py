from webstart.core.launcher.abc import ApplicationLauncher, LaunchConfigurationError
from webstart.core.launcher.real import JvmApplicationLauncher

__all__ = ["ApplicationLauncher", "JvmApplicationLauncher", "LaunchConfigurationError"]
