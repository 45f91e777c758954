"""Choosing the runtime an application is launched with.

Selection is a single best-match lookup in the registry. When nothing
matches, or when a newer runtime is available and the user agrees to use
it, an injected acquisition strategy installs one. Downloading, progress
reporting, retries and cancellation all belong to that strategy.
"""

import logging
from collections.abc import Callable
from enum import Enum

from webstart.core.runtimes.registry import RuntimeRegistry
from webstart.core.runtimes.types import LocalRuntime, RemoteRuntime, RuntimeRequirements

logger = logging.getLogger(__name__)

AcquireRuntime = Callable[[RuntimeRequirements], LocalRuntime]
AskForUpdate = Callable[[LocalRuntime, RemoteRuntime], bool]
UpdateCheck = Callable[[LocalRuntime, RuntimeRequirements], RemoteRuntime | None]


class SelectionError(Exception):
    """No runtime could be selected for a launch."""


class NoMatchError(SelectionError):
    """No installed runtime matches and no acquisition strategy is configured."""


class AcquisitionFailedError(SelectionError):
    """The acquisition strategy failed to provide a runtime."""


class UpdateStrategy(Enum):
    """What to do when a newer runtime exists for an installed match."""

    DO_NOTHING_ON_LOCAL_MATCH = "DO_NOTHING_ON_LOCAL_MATCH"
    ASK_FOR_UPDATE_ON_LOCAL_MATCH = "ASK_FOR_UPDATE_ON_LOCAL_MATCH"
    AUTOMATICALLY_DOWNLOAD = "AUTOMATICALLY_DOWNLOAD"


def ask_for_update_from_strategy(strategy: str | None, prompt: AskForUpdate) -> AskForUpdate:
    """Build the ask-for-update decision for a configured update strategy.

    Args:
        strategy: Value of the update strategy property (None or unknown
            values fall back to asking)
        prompt: Interactive decision used when the strategy is to ask

    Returns:
        Decision function for RuntimeSelector
    """
    try:
        resolved = UpdateStrategy(strategy) if strategy else UpdateStrategy.ASK_FOR_UPDATE_ON_LOCAL_MATCH
    except ValueError:
        logger.warning("Unknown update strategy %r, asking the user instead", strategy)
        resolved = UpdateStrategy.ASK_FOR_UPDATE_ON_LOCAL_MATCH

    if resolved is UpdateStrategy.DO_NOTHING_ON_LOCAL_MATCH:
        return lambda current, candidate: False
    if resolved is UpdateStrategy.AUTOMATICALLY_DOWNLOAD:
        return lambda current, candidate: True
    return prompt


class RuntimeSelector:
    """Selects, and if needed acquires, a runtime for given requirements."""

    def __init__(
        self,
        registry: RuntimeRegistry,
        *,
        acquire: AcquireRuntime | None = None,
        ask_for_update: AskForUpdate | None = None,
        update_check: UpdateCheck | None = None,
    ) -> None:
        self._registry = registry
        self._acquire = acquire
        self._ask_for_update = ask_for_update
        self._update_check = update_check

    def select(self, requirements: RuntimeRequirements) -> LocalRuntime:
        """Return the runtime to launch with.

        Raises:
            NoMatchError: If nothing matches and no acquisition strategy is set
            AcquisitionFailedError: If the acquisition strategy failed
        """
        current = self._registry.find(requirements)

        if current is not None:
            candidate = self._newer_candidate(current, requirements)
            if candidate is None:
                logger.debug("Using local runtime %s at %s", current.version, current.install_path)
                return current
            if not self._wants_update(current, candidate):
                logger.debug("Update to %s declined, keeping %s", candidate.version, current.version)
                return current
            if self._acquire is None:
                logger.debug("Update to %s accepted but nothing can acquire it", candidate.version)
                return current

        if self._acquire is None:
            raise NoMatchError(f"No local runtime matches {_describe(requirements)}")

        logger.info("Acquiring runtime for %s", _describe(requirements))
        try:
            acquired = self._acquire(requirements)
        except Exception as e:
            raise AcquisitionFailedError(
                f"Could not acquire runtime for {_describe(requirements)}: {e}"
            ) from e

        try:
            return self._registry.register(acquired)
        except ValueError as e:
            raise AcquisitionFailedError(str(e)) from e

    def _newer_candidate(
        self, current: LocalRuntime, requirements: RuntimeRequirements
    ) -> RemoteRuntime | None:
        if self._update_check is None:
            return None
        return self._update_check(current, requirements)

    def _wants_update(self, current: LocalRuntime, candidate: RemoteRuntime) -> bool:
        if self._ask_for_update is None:
            return False
        return self._ask_for_update(current, candidate)


def _describe(requirements: RuntimeRequirements) -> str:
    version_range = requirements.version_range or "any version"
    return (
        f"{version_range} from vendor {requirements.vendor!r} "
        f"on {requirements.operating_system.value}"
    )
