"""Launching applications on a selected Java runtime."""

import logging
import os
import subprocess
import threading
from collections.abc import Sequence

from webstart.core.config_keys import JVM_SUPPORTED_VERSION_RANGE, JVM_VENDOR, RUNNER_JAR
from webstart.core.config_store.abc import ConfigStore
from webstart.core.launcher.abc import ApplicationLauncher, LaunchConfigurationError
from webstart.core.platform.abc import Platform
from webstart.core.runtimes.registry import RuntimeRegistry
from webstart.core.runtimes.selector import RuntimeSelector
from webstart.core.runtimes.types import ANY_VENDOR, RuntimeRequirements
from webstart.core.time.abc import Time

logger = logging.getLogger(__name__)

RUNNER_JAR_ENV = "WEBSTART_RUNNER_JAR"
APPLICATION_PROPERTY = "webstart.application"


class JvmApplicationLauncher(ApplicationLauncher):
    """Starts each application in its own JVM process.

    The runtime is chosen by the selector using the vendor and version range
    from the deployment configuration. The JVM runs the descriptor runner jar
    with the launch arguments.
    """

    def __init__(
        self,
        selector: RuntimeSelector,
        registry: RuntimeRegistry,
        config_store: ConfigStore,
        platform: Platform,
        time: Time,
    ) -> None:
        self._selector = selector
        self._registry = registry
        self._config_store = config_store
        self._platform = platform
        self._time = time
        self._processes: list[subprocess.Popen[bytes]] = []
        self._processes_lock = threading.Lock()

    def requirements(self) -> RuntimeRequirements:
        return RuntimeRequirements(
            operating_system=self._platform.operating_system(),
            version_range=self._config_store.get_property(JVM_SUPPORTED_VERSION_RANGE) or "",
            vendor=self._config_store.get_property(JVM_VENDOR) or ANY_VENDOR,
        )

    def build_command(self, java: str, identity: str, args: Sequence[str]) -> list[str]:
        runner_jar = self._config_store.get_property(RUNNER_JAR) or os.environ.get(RUNNER_JAR_ENV)
        if not runner_jar:
            raise LaunchConfigurationError(
                f"No runner jar configured. Set '{RUNNER_JAR}' or {RUNNER_JAR_ENV}."
            )
        return [java, f"-D{APPLICATION_PROPERTY}={identity}", "-jar", runner_jar, *args]

    def launch(self, identity: str, args: Sequence[str]) -> None:
        runtime = self._selector.select(self.requirements())
        cmd = self.build_command(str(runtime.java_executable), identity, args)

        used = self._registry.mark_used(runtime, self._time.now())
        try:
            self._registry.persist()
        except OSError as e:
            logger.warning("Could not save runtime usage: %s", e)

        logger.debug("Starting %s: %s", identity, cmd)
        process = subprocess.Popen(cmd)
        with self._processes_lock:
            self._processes.append(process)
        logger.info("Started %s (pid %d) on runtime %s", identity, process.pid, used.version)

    def wait_for_applications(self) -> None:
        while True:
            with self._processes_lock:
                running = [p for p in self._processes if p.poll() is None]
                self._processes = running
            if not running:
                return
            for process in running:
                process.wait()
