"""Tests for the launch command."""

from click.testing import CliRunner

from webstart.cli.cli import cli
from webstart.core.context import WebstartContext
from webstart.core.launcher.abc import LaunchConfigurationError
from webstart.core.launcher.fake import FakeApplicationLauncher
from webstart.core.notifications.abc import NotificationCallback
from webstart.core.notifications.fake import FakeNotificationChannel
from webstart.core.platform.fake import FakePlatform
from webstart.core.runtimes.selector import NoMatchError
from webstart.core.runtimes.types import OperatingSystem


class ImmediateNotificationChannel(FakeNotificationChannel):
    """Delivers an open request as soon as the command starts listening."""

    def __init__(self, args: list[str]) -> None:
        super().__init__()
        self._pending = args

    def listen(self, callback: NotificationCallback) -> None:
        super().listen(callback)
        self.deliver(self._pending)


def _macos() -> FakePlatform:
    return FakePlatform(operating_system=OperatingSystem.MACOS)


def test_launch_starts_application_as_primary() -> None:
    """Test that launch starts the application and waits for it on Linux."""
    launcher = FakeApplicationLauncher()
    notifications = FakeNotificationChannel()
    ctx = WebstartContext.for_test(launcher=launcher, notifications=notifications)

    result = CliRunner().invoke(
        cli, ["launch", "--no-fork", "https://host/apps/App.jnlp", "-verbose"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert launcher.launches == [("App", ["https://host/apps/App.jnlp", "-verbose"])]
    assert launcher.wait_count == 1
    assert notifications.forwarded == []
    assert not notifications.is_listening


def test_second_launch_on_linux_starts_its_own_application() -> None:
    """Test that a re-invocation off macOS is not merged into a running instance."""
    launcher = FakeApplicationLauncher()
    notifications = FakeNotificationChannel(primary_running=True)
    ctx = WebstartContext.for_test(launcher=launcher, notifications=notifications)

    result = CliRunner().invoke(cli, ["launch", "--no-fork", "B.jnlp", "-b"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert launcher.launches == [("B", ["B.jnlp", "-b"])]
    assert notifications.forwarded == []
    assert "running webstart instance" not in result.output


def test_launch_on_macos_forwards_to_running_instance() -> None:
    """Test that launch hands its arguments to an already running instance."""
    launcher = FakeApplicationLauncher()
    notifications = FakeNotificationChannel(primary_running=True)
    ctx = WebstartContext.for_test(
        launcher=launcher, notifications=notifications, platform=_macos()
    )

    result = CliRunner().invoke(cli, ["launch", "--no-fork", "App.jnlp", "-x"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert notifications.forwarded == [["App.jnlp", "-x"]]
    assert launcher.launches == []
    assert "running webstart instance" in result.output


def test_launch_quiet_hides_info_messages() -> None:
    """Test that --quiet suppresses the hand-off message."""
    notifications = FakeNotificationChannel(primary_running=True)
    ctx = WebstartContext.for_test(notifications=notifications, platform=_macos())

    result = CliRunner().invoke(cli, ["launch", "--quiet", "App.jnlp"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert notifications.forwarded == [["App.jnlp"]]
    assert "running webstart instance" not in result.output


def test_launch_on_macos_launches_open_request_with_spaces_intact() -> None:
    """Test that the open request arguments reach the launcher unsplit."""
    launcher = FakeApplicationLauncher()
    notifications = ImmediateNotificationChannel(["/Users/me/My Apps/App.jnlp"])
    ctx = WebstartContext.for_test(
        launcher=launcher, notifications=notifications, platform=_macos()
    )

    result = CliRunner().invoke(cli, ["launch", "-verbose"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert launcher.launches == [("App", ["-verbose", "/Users/me/My Apps/App.jnlp"])]
    assert notifications.closed is True


def test_launch_reports_missing_runtime() -> None:
    """Test that a selection failure exits with a styled error."""

    def no_runtime(identity: str, args: list[str]) -> None:
        raise NoMatchError("No local runtime matches >=17")

    ctx = WebstartContext.for_test(launcher=FakeApplicationLauncher(on_launch=no_runtime))

    result = CliRunner().invoke(cli, ["launch", "App.jnlp"], obj=ctx)

    assert result.exit_code == 1
    assert "Error: No local runtime matches >=17" in result.output


def test_launch_reports_missing_runner_configuration() -> None:
    """Test that a launcher configuration error exits with a styled error."""

    def unconfigured(identity: str, args: list[str]) -> None:
        raise LaunchConfigurationError("No runner jar configured")

    ctx = WebstartContext.for_test(launcher=FakeApplicationLauncher(on_launch=unconfigured))

    result = CliRunner().invoke(cli, ["launch", "App.jnlp"], obj=ctx)

    assert result.exit_code == 1
    assert "No runner jar configured" in result.output


def test_launch_on_macos_waits_for_open_request() -> None:
    """Test that on macOS nothing is launched until a notification arrives."""
    launcher = FakeApplicationLauncher()
    ctx = WebstartContext.for_test(
        launcher=launcher,
        platform=FakePlatform(operating_system=OperatingSystem.MACOS),
    )

    result = CliRunner().invoke(
        cli, ["launch", "--notification-timeout", "0", "-verbose"], obj=ctx
    )

    assert result.exit_code == 0, result.output
    assert launcher.launches == []
    assert "No launch request received" in result.output
