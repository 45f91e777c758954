"""TOML-backed deployment configuration."""

import logging
import tomllib
from pathlib import Path

import tomlkit

from webstart.core.config_store.abc import ConfigStore

logger = logging.getLogger(__name__)


class TomlConfigStore(ConfigStore):
    """Production implementation that reads/writes deployment.toml.

    File layout:

        locked = ["deployment.proxy.type"]

        [properties]
        "deployment.proxy.type" = "1"

    The file is read lazily on first access. A missing file is an empty
    configuration. An unreadable file is logged once and also treated as
    empty, but save() refuses to overwrite it.
    """

    def __init__(self, config_path: Path) -> None:
        self._config_path = config_path
        self._properties: dict[str, str] | None = None
        self._locked: set[str] = set()
        self._load_error: str | None = None

    def get_property(self, key: str) -> str | None:
        return self._loaded().get(key)

    def set_property(self, key: str, value: str) -> None:
        self._loaded()[key] = value

    def remove_property(self, key: str) -> None:
        self._loaded().pop(key, None)

    def lock(self, key: str) -> None:
        self._loaded()
        self._locked.add(key)

    def is_locked(self, key: str) -> bool:
        self._loaded()
        return key in self._locked

    def save(self) -> None:
        properties = self._loaded()
        if self._load_error is not None:
            raise ValueError(
                f"Not overwriting unreadable {self._config_path}: {self._load_error}"
            )

        doc = tomlkit.document()
        doc.add(tomlkit.comment("webstart deployment configuration"))
        doc["locked"] = sorted(self._locked)
        table = tomlkit.table()
        for key in sorted(properties):
            table[key] = properties[key]
        doc["properties"] = table

        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
        logger.debug("Saved %d properties to %s", len(properties), self._config_path)

    def path(self) -> Path:
        return self._config_path

    def _loaded(self) -> dict[str, str]:
        if self._properties is not None:
            return self._properties

        self._properties = {}
        if not self._config_path.exists():
            return self._properties

        try:
            data = tomllib.loads(self._config_path.read_text(encoding="utf-8"))
            raw_properties = data.get("properties", {})
            if not isinstance(raw_properties, dict):
                raise ValueError("'properties' must be a table")
            raw_locked = data.get("locked", [])
            if not isinstance(raw_locked, list):
                raise ValueError("'locked' must be an array")
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable configuration %s: %s", self._config_path, e)
            self._load_error = str(e)
            return self._properties

        self._properties.update({str(k): str(v) for k, v in raw_properties.items()})
        self._locked = {str(k) for k in raw_locked}
        return self._properties
