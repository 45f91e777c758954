"""Persisted runtime catalog (runtimes.toml)."""

import logging
import tomllib
from datetime import datetime
from pathlib import Path

import tomlkit

from webstart.core.runtimes.source import WritableRuntimeSource
from webstart.core.runtimes.types import LocalRuntime, OperatingSystem, RuntimeIdentity

logger = logging.getLogger(__name__)


class RuntimeCatalogFile(WritableRuntimeSource):
    """Runtimes remembered between runs, stored as a TOML array of tables.

    Example:

        [[runtime]]
        version = "17.0.2"
        operating_system = "LINUX"
        vendor = "Eclipse Adoptium"
        install_path = "/home/me/.webstart/jvms/17.0.2"
        last_used_at = "2024-01-01T12:00:00"
        active = true
        managed = true

    Entries whose install path no longer exists are dropped on read, and a
    malformed entry is logged and skipped without losing the others.
    """

    def __init__(self, catalog_path: Path) -> None:
        self._catalog_path = catalog_path

    @property
    def name(self) -> str:
        return f"catalog {self._catalog_path}"

    def read_runtimes(self) -> list[LocalRuntime]:
        if not self._catalog_path.exists():
            return []

        data = tomllib.loads(self._catalog_path.read_text(encoding="utf-8"))
        entries = data.get("runtime", [])
        if not isinstance(entries, list):
            raise ValueError(f"'runtime' must be an array of tables in {self._catalog_path}")

        runtimes: list[LocalRuntime] = []
        for index, entry in enumerate(entries):
            try:
                runtime = _parse_entry(entry)
            except (TypeError, ValueError) as e:
                logger.warning(
                    "Skipping runtime entry %d in %s: %s", index, self._catalog_path, e
                )
                continue
            if not runtime.install_path.exists():
                logger.debug("Dropping runtime at missing path %s", runtime.install_path)
                continue
            runtimes.append(runtime)
        return runtimes

    def write_runtimes(self, runtimes: list[LocalRuntime]) -> None:
        doc = tomlkit.document()
        entries = tomlkit.aot()
        for runtime in runtimes:
            entry = tomlkit.table()
            entry["version"] = runtime.version
            entry["operating_system"] = runtime.operating_system.value
            entry["vendor"] = runtime.vendor
            entry["install_path"] = str(runtime.install_path)
            entry["last_used_at"] = runtime.last_used_at.isoformat()
            entry["active"] = runtime.active
            entry["managed"] = runtime.managed
            entries.append(entry)
        doc["runtime"] = entries

        self._catalog_path.parent.mkdir(parents=True, exist_ok=True)
        self._catalog_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        logger.debug("Wrote %d runtimes to %s", len(runtimes), self._catalog_path)


def _parse_entry(entry: object) -> LocalRuntime:
    if not isinstance(entry, dict):
        raise ValueError(f"Runtime entry must be a table, got {entry!r}")
    try:
        return LocalRuntime(
            identity=RuntimeIdentity(
                version=str(entry["version"]),
                operating_system=OperatingSystem(entry["operating_system"]),
                vendor=str(entry.get("vendor", "")),
            ),
            install_path=Path(entry["install_path"]),
            last_used_at=_parse_timestamp(entry["last_used_at"]),
            active=bool(entry.get("active", True)),
            managed=bool(entry.get("managed", True)),
        )
    except KeyError as e:
        raise ValueError(f"Runtime entry is missing {e}") from e


def _parse_timestamp(value: object) -> datetime:
    parsed = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    # Stored and compared as naive local time
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
