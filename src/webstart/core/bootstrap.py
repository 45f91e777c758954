"""One-time import of installer defaults into the deployment configuration.

On the first start after an installation (or re-installation) the values an
administrator chose in the installer are copied into the persisted
configuration, together with their lock flags. The import is recorded with
a timestamp so later starts skip it; an import that failed part way leaves
no timestamp behind and is redone on the next start.
"""

import logging
import sys
import threading

from webstart.core.config_keys import IMPORTED_KEYS, LAST_BOOTSTRAP_TIMESTAMP
from webstart.core.config_store.abc import ConfigStore
from webstart.core.installer.abc import InstallerVariables
from webstart.core.time.abc import Time

logger = logging.getLogger(__name__)


class ConfigImportError(Exception):
    """Importing installer defaults into the configuration failed."""


class ConfigBootstrap:
    """Decides once per installation whether to import installer defaults.

    Safe to call check() repeatedly and from several threads: the
    read-decide-write sequence runs under one reentrant lock, so two callers
    can never both see a first start and import twice.
    """

    def __init__(
        self,
        installer: InstallerVariables,
        config_store: ConfigStore,
        time: Time,
    ) -> None:
        self._installer = installer
        self._config_store = config_store
        self._time = time
        self._lock = threading.RLock()

    def check(self) -> bool:
        """Import installer defaults if this is the first start.

        Returns:
            True if the defaults were imported, False if nothing was done

        Raises:
            ConfigImportError: If reading installer variables or writing the
                configuration failed. The bootstrap timestamp is not
                written, so the next call retries.
        """
        with self._lock:
            try:
                if not self.is_first_start():
                    logger.debug("Initial configuration already imported")
                    return False
                previous = self._config_store.get_property(LAST_BOOTSTRAP_TIMESTAMP)
            except (OSError, ValueError) as e:
                raise ConfigImportError(f"Failed to import initial configuration: {e}") from e

            logger.debug("First start after installation, importing initial configuration")
            try:
                for key in IMPORTED_KEYS:
                    self._import_property(key)
                self.set_last_bootstrap_property()
                self._config_store.save()
            except (OSError, ValueError) as e:
                self._restore_last_bootstrap_property(previous)
                raise ConfigImportError(f"Failed to import initial configuration: {e}") from e

            logger.debug("Import of initial configuration done")
            return True

    def is_first_start(self) -> bool:
        with self._lock:
            installation_date = self._installer.get_installation_timestamp()
            if installation_date is None:
                installation_date = sys.maxsize

            raw = self._config_store.get_property(LAST_BOOTSTRAP_TIMESTAMP)
            if raw is None:
                logger.debug("No '%s' property, treating as first start", LAST_BOOTSTRAP_TIMESTAMP)
                return True
            try:
                last_bootstrap = int(raw)
            except ValueError:
                logger.debug(
                    "Unparsable '%s' property %r, treating as first start",
                    LAST_BOOTSTRAP_TIMESTAMP,
                    raw,
                )
                return True

            logger.debug(
                "Installation time %d, last initial configuration time %d",
                installation_date,
                last_bootstrap,
            )
            return installation_date > last_bootstrap

    def set_last_bootstrap_property(self) -> None:
        with self._lock:
            self._config_store.set_property(
                LAST_BOOTSTRAP_TIMESTAMP, str(self._time.epoch_millis())
            )

    def _restore_last_bootstrap_property(self, previous: str | None) -> None:
        if previous is None:
            self._config_store.remove_property(LAST_BOOTSTRAP_TIMESTAMP)
        else:
            self._config_store.set_property(LAST_BOOTSTRAP_TIMESTAMP, previous)

    def _import_property(self, key: str) -> None:
        value = self._installer.get_variable(key)
        if value is not None:
            logger.debug("Importing property '%s' with value '%s'", key, value)
            self._config_store.set_property(key, value)

        if self._installer.is_variable_locked(key):
            logger.debug("Locking property '%s'", key)
            self._config_store.lock(key)
