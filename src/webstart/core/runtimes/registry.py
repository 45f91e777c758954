"""The set of locally installed runtimes known to this process."""

import logging
import threading
from collections.abc import Iterable, Sequence
from dataclasses import replace
from datetime import datetime

from webstart.core.runtimes.source import RuntimeSource, WritableRuntimeSource
from webstart.core.runtimes.types import LocalRuntime, RuntimeRequirements

logger = logging.getLogger(__name__)


class RuntimeRegistry:
    """Owns the canonical set of LocalRuntime records for the process lifetime.

    Records are loaded from an ordered list of sources. When two sources
    report the same runtime (same install path, version and OS), the earlier
    source wins, so list the persisted catalog before any host scan to keep
    remembered usage and activation state.

    All reads and writes of the record set happen under one lock: a query
    never observes a half-applied mutation.
    """

    def __init__(
        self,
        sources: Sequence[RuntimeSource],
        catalog: WritableRuntimeSource | None = None,
    ) -> None:
        """Create an empty registry.

        Args:
            sources: Sources read by load(), in priority order
            catalog: Where persist() writes the record set, if anywhere
        """
        self._sources = list(sources)
        self._catalog = catalog
        self._runtimes: dict[LocalRuntime, LocalRuntime] = {}
        self._catalog_readable = True
        self._lock = threading.Lock()

    def load(self) -> set[LocalRuntime]:
        """Re-read all sources, replacing the current record set.

        A failing source is logged and skipped; whatever the other sources
        returned is kept. If the catalog itself failed, persist() leaves it
        alone until a later load() reads it again.
        """
        loaded: dict[LocalRuntime, LocalRuntime] = {}
        catalog_readable = True
        for source in self._sources:
            try:
                runtimes = source.read_runtimes()
            except (OSError, ValueError) as e:
                logger.warning("Could not read runtimes from %s: %s", source.name, e)
                if source is self._catalog:
                    catalog_readable = False
                continue
            logger.debug("Read %d runtimes from %s", len(runtimes), source.name)
            for runtime in runtimes:
                loaded.setdefault(runtime, runtime)

        with self._lock:
            self._runtimes = loaded
            self._catalog_readable = catalog_readable
            return set(loaded.values())

    def runtimes(self) -> list[LocalRuntime]:
        """Snapshot of all records, most recently used first."""
        with self._lock:
            return _by_recent_use(self._runtimes.values())

    def find(self, requirements: RuntimeRequirements) -> LocalRuntime | None:
        """Find the most recently used active runtime satisfying requirements."""
        with self._lock:
            for runtime in _by_recent_use(self._runtimes.values()):
                if runtime.active and requirements.matches(runtime.identity):
                    return runtime
        return None

    def deactivate(self, runtime: LocalRuntime) -> LocalRuntime:
        """Retire a runtime from new launches.

        Raises:
            KeyError: If the runtime is not in the registry
        """
        with self._lock:
            current = self._runtimes[runtime]
            deactivated = current.deactivated_copy()
            self._runtimes[deactivated] = deactivated
        logger.info("Deactivated runtime %s at %s", runtime.version, runtime.install_path)
        return deactivated

    def register(self, runtime: LocalRuntime) -> LocalRuntime:
        """Add or replace a runtime, e.g. after a successful download.

        Raises:
            ValueError: If it would overwrite a runtime webstart does not manage
        """
        with self._lock:
            existing = self._runtimes.get(runtime)
            if existing is not None and not existing.managed:
                raise ValueError(
                    f"Refusing to replace unmanaged runtime at {existing.install_path}"
                )
            self._runtimes[runtime] = runtime
        logger.info("Registered runtime %s at %s", runtime.version, runtime.install_path)
        return runtime

    def mark_used(self, runtime: LocalRuntime, when: datetime) -> LocalRuntime:
        """Record that an application was launched with a runtime.

        Raises:
            KeyError: If the runtime is not in the registry
        """
        with self._lock:
            used = replace(self._runtimes[runtime], last_used_at=when)
            self._runtimes[used] = used
        return used

    def persist(self) -> bool:
        """Write the record set to the catalog, if one is configured.

        Nothing is written while the catalog could not be read, so an
        unreadable file is never replaced by a partial record set.

        Returns:
            False if changes were not saved because the catalog is unreadable

        Raises:
            OSError: If the catalog cannot be written
        """
        if self._catalog is None:
            return True
        if not self._catalog_readable:
            logger.warning("Not saving runtimes: %s could not be read", self._catalog.name)
            return False
        self._catalog.write_runtimes(self.runtimes())
        return True


def _by_recent_use(runtimes: Iterable[LocalRuntime]) -> list[LocalRuntime]:
    ordered = sorted(runtimes, key=lambda r: str(r.install_path))
    return sorted(ordered, key=lambda r: r.last_used_at, reverse=True)
