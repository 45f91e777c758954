from webstart.core.runtimes.registry import RuntimeRegistry
from webstart.core.runtimes.selector import (
    AcquisitionFailedError,
    NoMatchError,
    RuntimeSelector,
    SelectionError,
)
from webstart.core.runtimes.types import (
    LocalRuntime,
    OperatingSystem,
    RemoteRuntime,
    RuntimeIdentity,
    RuntimeRecord,
    RuntimeRequirements,
)

__all__ = [
    "AcquisitionFailedError",
    "LocalRuntime",
    "NoMatchError",
    "OperatingSystem",
    "RemoteRuntime",
    "RuntimeIdentity",
    "RuntimeRecord",
    "RuntimeRegistry",
    "RuntimeRequirements",
    "RuntimeSelector",
    "SelectionError",
]
