"""Discovery of runtimes that were installed on the host without webstart."""

import logging
from datetime import datetime
from pathlib import Path

from webstart.core.runtimes.source import RuntimeSource
from webstart.core.runtimes.types import LocalRuntime, OperatingSystem, RuntimeIdentity

logger = logging.getLogger(__name__)

RELEASE_FILE = "release"


def default_search_roots(operating_system: OperatingSystem) -> list[Path]:
    """Return the conventional JDK install locations for an OS."""
    if operating_system is OperatingSystem.WINDOWS:
        return [
            Path("C:/Program Files/Java"),
            Path("C:/Program Files/Eclipse Adoptium"),
        ]
    if operating_system is OperatingSystem.MACOS:
        return [Path("/Library/Java/JavaVirtualMachines")]
    return [Path("/usr/lib/jvm")]


def parse_release_file(content: str) -> dict[str, str]:
    """Parse a JDK 'release' file (KEY="value" lines)."""
    values: dict[str, str] = {}
    for line in content.splitlines():
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        values[key.strip()] = value.strip().strip('"')
    return values


class HostRuntimeScanner(RuntimeSource):
    """Finds Java homes one level below each search root.

    A directory is a Java home when it has a 'release' file declaring
    JAVA_VERSION. On macOS the home lives at <bundle>/Contents/Home.
    Found runtimes are unmanaged: webstart never updates or removes them.
    An unreadable root or Java home is logged and skipped.
    """

    def __init__(
        self,
        search_roots: list[Path],
        operating_system: OperatingSystem,
        discovered_at: datetime,
    ) -> None:
        self._search_roots = search_roots
        self._operating_system = operating_system
        self._discovered_at = discovered_at

    @property
    def name(self) -> str:
        return "host scan"

    def read_runtimes(self) -> list[LocalRuntime]:
        runtimes: list[LocalRuntime] = []
        for root in self._search_roots:
            try:
                candidates = sorted(root.iterdir()) if root.is_dir() else []
            except OSError as e:
                logger.warning("Cannot scan %s for Java runtimes: %s", root, e)
                continue
            for candidate in candidates:
                try:
                    java_home = self._java_home(candidate)
                    runtime = self._read_java_home(java_home) if java_home is not None else None
                except (OSError, ValueError) as e:
                    logger.warning("Skipping Java runtime at %s: %s", candidate, e)
                    continue
                if runtime is not None:
                    runtimes.append(runtime)
        return runtimes

    def _java_home(self, candidate: Path) -> Path | None:
        if not candidate.is_dir():
            return None
        if self._operating_system is OperatingSystem.MACOS:
            bundle_home = candidate / "Contents" / "Home"
            if (bundle_home / RELEASE_FILE).is_file():
                return bundle_home
        if (candidate / RELEASE_FILE).is_file():
            return candidate
        return None

    def _read_java_home(self, java_home: Path) -> LocalRuntime | None:
        release = parse_release_file((java_home / RELEASE_FILE).read_text(encoding="utf-8"))
        version = release.get("JAVA_VERSION")
        if not version:
            logger.debug("No JAVA_VERSION in %s, skipping", java_home / RELEASE_FILE)
            return None
        return LocalRuntime(
            identity=RuntimeIdentity(
                version=version,
                operating_system=self._operating_system,
                vendor=release.get("IMPLEMENTOR", "unknown"),
            ),
            install_path=java_home,
            last_used_at=self._discovered_at,
            active=True,
            managed=False,
        )
