"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from webstart.core.bootstrap import ConfigBootstrap
from webstart.core.config_store.abc import ConfigStore
from webstart.core.config_store.real import TomlConfigStore
from webstart.core.installer.abc import InstallerVariables
from webstart.core.installer.real import VarfileInstallerVariables
from webstart.core.launcher.abc import ApplicationLauncher
from webstart.core.launcher.real import JvmApplicationLauncher
from webstart.core.notifications.abc import NotificationChannel
from webstart.core.notifications.real import SocketNotificationChannel
from webstart.core.platform.abc import Platform
from webstart.core.platform.real import RealPlatform
from webstart.core.runtimes.catalog import RuntimeCatalogFile
from webstart.core.runtimes.host_scan import HostRuntimeScanner, default_search_roots
from webstart.core.runtimes.registry import RuntimeRegistry
from webstart.core.runtimes.selector import RuntimeSelector
from webstart.core.time.abc import Time
from webstart.core.time.real import RealTime
from webstart.core.user_feedback import InteractiveFeedback, UserFeedback

HOME_ENV = "WEBSTART_HOME"
VARFILE_ENV = "WEBSTART_INSTALLER_VARFILE"

CONFIG_FILE_NAME = "deployment.toml"
CATALOG_FILE_NAME = "runtimes.toml"
PORT_FILE_NAME = "instance.port"
VARFILE_NAME = "response.varfile"


@dataclass(frozen=True)
class WebstartContext:
    """Immutable context holding all dependencies for webstart operations.

    Created once at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime; the registry and
    stores it references own their mutable state.
    """

    time: Time
    platform: Platform
    config_store: ConfigStore
    installer: InstallerVariables
    bootstrap: ConfigBootstrap
    registry: RuntimeRegistry
    launcher: ApplicationLauncher
    notifications: NotificationChannel
    feedback: UserFeedback
    home: Path

    @staticmethod
    def for_test(
        time: Time | None = None,
        platform: Platform | None = None,
        config_store: ConfigStore | None = None,
        installer: InstallerVariables | None = None,
        registry: RuntimeRegistry | None = None,
        launcher: ApplicationLauncher | None = None,
        notifications: NotificationChannel | None = None,
        feedback: UserFeedback | None = None,
        home: Path | None = None,
    ) -> "WebstartContext":
        """Create test context with optional pre-configured collaborators.

        Any collaborator left as None is replaced by its in-memory fake, so
        tests only spell out what they care about.

        Args:
            time: Optional Time. If None, uses FakeTime.
            platform: Optional Platform. If None, uses FakePlatform (Linux).
            config_store: Optional ConfigStore. If None, uses empty FakeConfigStore.
            installer: Optional InstallerVariables. If None, uses empty
                FakeInstallerVariables.
            registry: Optional RuntimeRegistry. If None, uses a registry with no sources.
            launcher: Optional ApplicationLauncher. If None, uses FakeApplicationLauncher.
            notifications: Optional NotificationChannel. If None, uses
                FakeNotificationChannel with no primary running.
            feedback: Optional UserFeedback. If None, uses InteractiveFeedback.
            home: Optional home directory. If None, uses Path("/test/webstart").

        Returns:
            WebstartContext wired with fakes

        Example:
            >>> launcher = FakeApplicationLauncher()
            >>> ctx = WebstartContext.for_test(launcher=launcher)
        """
        from webstart.core.config_store.fake import FakeConfigStore
        from webstart.core.installer.fake import FakeInstallerVariables
        from webstart.core.launcher.fake import FakeApplicationLauncher
        from webstart.core.notifications.fake import FakeNotificationChannel
        from webstart.core.platform.fake import FakePlatform
        from webstart.core.time.fake import FakeTime

        time = time if time is not None else FakeTime()
        config_store = config_store if config_store is not None else FakeConfigStore()
        installer = installer if installer is not None else FakeInstallerVariables()

        return WebstartContext(
            time=time,
            platform=platform if platform is not None else FakePlatform(),
            config_store=config_store,
            installer=installer,
            bootstrap=ConfigBootstrap(installer, config_store, time),
            registry=registry if registry is not None else RuntimeRegistry([]),
            launcher=launcher if launcher is not None else FakeApplicationLauncher(),
            notifications=notifications if notifications is not None else FakeNotificationChannel(),
            feedback=feedback if feedback is not None else InteractiveFeedback(),
            home=home if home is not None else Path("/test/webstart"),
        )


def resolve_home() -> Path:
    """Return the webstart state directory (WEBSTART_HOME or ~/.webstart)."""
    configured = os.environ.get(HOME_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".webstart"


def create_context() -> WebstartContext:
    """Create production context with real implementations.

    This is the main entry point for creating a WebstartContext. All paths
    are resolved here, once; commands only read from the context.
    """
    home = resolve_home()
    varfile = Path(os.environ.get(VARFILE_ENV) or home / VARFILE_NAME)

    time = RealTime()
    platform = RealPlatform()
    config_store = TomlConfigStore(home / CONFIG_FILE_NAME)
    installer = VarfileInstallerVariables(varfile)

    operating_system = platform.operating_system()
    catalog = RuntimeCatalogFile(home / CATALOG_FILE_NAME)
    scanner = HostRuntimeScanner(default_search_roots(operating_system), operating_system, time.now())
    registry = RuntimeRegistry([catalog, scanner], catalog=catalog)

    # Runtime download is not built in: only installed runtimes are selected
    selector = RuntimeSelector(registry)
    launcher = JvmApplicationLauncher(selector, registry, config_store, platform, time)

    return WebstartContext(
        time=time,
        platform=platform,
        config_store=config_store,
        installer=installer,
        bootstrap=ConfigBootstrap(installer, config_store, time),
        registry=registry,
        launcher=launcher,
        notifications=SocketNotificationChannel(home / PORT_FILE_NAME),
        feedback=InteractiveFeedback(),
        home=home,
    )
