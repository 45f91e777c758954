from webstart.core.launch.args import (
    NO_FORK_FLAG,
    UNKNOWN_APP,
    extract_app_identity,
    filter_args,
)
from webstart.core.launch.bridge import StartupNotificationBridge
from webstart.core.launch.orchestrator import LaunchOrchestrator

__all__ = [
    "NO_FORK_FLAG",
    "UNKNOWN_APP",
    "LaunchOrchestrator",
    "StartupNotificationBridge",
    "extract_app_identity",
    "filter_args",
]
