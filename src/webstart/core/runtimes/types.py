"""Core types for Java runtime records.

A runtime record is either a LocalRuntime (installed on disk) or a
RemoteRuntime (known to exist at a download location). Both embed the same
RuntimeIdentity by value.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from pathlib import Path

from packaging.specifiers import InvalidSpecifier, SpecifierSet
from packaging.version import InvalidVersion, Version

ANY_VENDOR = "*"


class OperatingSystem(Enum):
    """Operating system a runtime was built for."""

    WINDOWS = "WINDOWS"
    MACOS = "MACOS"
    LINUX = "LINUX"


@dataclass(frozen=True)
class RuntimeIdentity:
    """Identity fields shared by every runtime record.

    Fields:
        version: Version string as reported by the runtime (e.g. "17.0.2")
        operating_system: Operating system the runtime targets
        vendor: Vendor name. Not part of equality, so re-tagging a vendor
            does not split one installation into two registry entries.
    """

    version: str
    operating_system: OperatingSystem
    vendor: str = field(compare=False)


@dataclass(frozen=True)
class LocalRuntime:
    """A runtime installation present on disk.

    Equality and hashing cover identity (version, operating system) and
    install_path only.

    Fields:
        identity: Shared runtime identity
        install_path: Java home directory of the installation
        last_used_at: Last time an application was launched with it
        active: Whether the runtime may be picked for new launches
        managed: True if webstart installed it and may update or remove it,
            False for a pre-existing host installation that is read-only to us
    """

    identity: RuntimeIdentity
    install_path: Path
    last_used_at: datetime = field(compare=False)
    active: bool = field(default=True, compare=False)
    managed: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        if str(self.install_path) in ("", "."):
            raise ValueError("install_path must not be empty")

    @property
    def version(self) -> str:
        return self.identity.version

    @property
    def operating_system(self) -> OperatingSystem:
        return self.identity.operating_system

    @property
    def vendor(self) -> str:
        return self.identity.vendor

    @property
    def java_executable(self) -> Path:
        if self.operating_system is OperatingSystem.WINDOWS:
            return self.install_path / "bin" / "java.exe"
        return self.install_path / "bin" / "java"

    def deactivated_copy(self) -> "LocalRuntime":
        """Return a copy of this record that is excluded from new launches."""
        return replace(self, active=False)


@dataclass(frozen=True)
class RemoteRuntime:
    """A runtime that can be downloaded but is not installed yet."""

    identity: RuntimeIdentity
    download_url: str

    @property
    def version(self) -> str:
        return self.identity.version


RuntimeRecord = LocalRuntime | RemoteRuntime


def parse_runtime_version(version: str) -> Version | None:
    """Parse a Java version string into a comparable Version.

    Java versions such as "1.8.0_292" or "17.0.2+8" are not PEP 440; the
    underscore and dash separators become dots and any "+build" suffix is
    dropped before parsing.

    Returns:
        Parsed Version, or None if the string still cannot be parsed
    """
    normalized = version.strip().split("+", 1)[0].replace("_", ".").replace("-", ".")
    try:
        return Version(normalized)
    except InvalidVersion:
        return None


@dataclass(frozen=True)
class RuntimeRequirements:
    """What an application needs from a runtime.

    Fields:
        operating_system: Operating system the runtime must target
        version_range: PEP 440 specifier set such as ">=11,<18".
            Empty matches every version.
        vendor: "*" for any vendor, otherwise matched case-insensitively as
            a substring of the runtime vendor
    """

    operating_system: OperatingSystem
    version_range: str = ""
    vendor: str = ANY_VENDOR

    def matches(self, identity: RuntimeIdentity) -> bool:
        if identity.operating_system is not self.operating_system:
            return False
        if not self._vendor_matches(identity.vendor):
            return False
        return self.version_matches(identity.version)

    def version_matches(self, version: str) -> bool:
        if not self.version_range.strip():
            return True
        try:
            specifier = SpecifierSet(self.version_range)
        except InvalidSpecifier:
            return False
        parsed = parse_runtime_version(version)
        if parsed is None:
            return False
        return specifier.contains(parsed, prereleases=True)

    def _vendor_matches(self, vendor: str) -> bool:
        wanted = self.vendor.strip()
        if wanted in ("", ANY_VENDOR):
            return True
        return wanted.lower() in vendor.lower()
