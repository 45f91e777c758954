"""Tests for serialized handling of startup notifications."""

import threading
import time

import pytest

from webstart.core.launch.bridge import StartupNotificationBridge
from webstart.core.launch.orchestrator import LaunchOrchestrator
from webstart.core.launcher.fake import FakeApplicationLauncher
from webstart.core.platform.fake import FakePlatform


def _bridge(launcher: FakeApplicationLauncher, initial_args: list[str]) -> StartupNotificationBridge:
    return StartupNotificationBridge(LaunchOrchestrator(launcher, FakePlatform()), initial_args)


def test_notification_appends_payload_tokens_to_initial_args() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, ["-verbose"])

    bridge.on_notification("  https://host/App.jnlp   -offline ")

    assert launcher.launches == [("App", ["-verbose", "https://host/App.jnlp", "-offline"])]


def test_empty_notification_launches_initial_args() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, ["App.jnlp"])

    bridge.on_notification("")

    assert launcher.launches == [("App", ["App.jnlp"])]


def test_separated_arguments_keep_their_spaces() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, ["-verbose"])

    bridge.on_arguments(["/home/me/My Apps/App.jnlp"])

    assert launcher.launches == [("App", ["-verbose", "/home/me/My Apps/App.jnlp"])]


def test_each_notification_launches_once() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, [])

    bridge.on_notification("a.jnlp")
    bridge.on_notification("b.jnlp")

    assert [identity for identity, _ in launcher.launches] == ["a", "b"]


def test_initial_args_are_not_mutated_by_notifications() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, ["-verbose"])

    bridge.on_notification("a.jnlp")
    bridge.on_notification("b.jnlp")

    assert bridge.initial_args == ["-verbose"]
    assert launcher.launches[1] == ("b", ["-verbose", "b.jnlp"])


def test_notifications_after_stop_are_ignored() -> None:
    launcher = FakeApplicationLauncher()
    bridge = _bridge(launcher, [])
    bridge.stop()

    bridge.on_notification("a.jnlp")

    assert launcher.launches == []
    assert bridge.wait_for_dispatch(timeout=0) is False


def test_wait_for_dispatch_after_notification() -> None:
    bridge = _bridge(FakeApplicationLauncher(), [])

    bridge.on_notification("a.jnlp")

    assert bridge.wait_for_dispatch(timeout=0) is True


def test_failed_launch_propagates_and_releases_lock() -> None:
    def fail_first(identity: str, args: list[str]) -> None:
        if identity == "bad":
            raise RuntimeError("no runtime")

    launcher = FakeApplicationLauncher(on_launch=fail_first)
    bridge = _bridge(launcher, [])

    with pytest.raises(RuntimeError, match="no runtime"):
        bridge.on_notification("bad.jnlp")
    bridge.on_notification("good.jnlp")

    assert [identity for identity, _ in launcher.launches] == ["bad", "good"]
    assert bridge.wait_for_dispatch(timeout=0) is True


def test_concurrent_notifications_do_not_interleave() -> None:
    events: list[str] = []

    def slow_launch(identity: str, args: list[str]) -> None:
        events.append(f"start {identity}")
        time.sleep(0.01)
        events.append(f"end {identity}")

    launcher = FakeApplicationLauncher(on_launch=slow_launch)
    bridge = _bridge(launcher, [])
    names = [f"app{i}" for i in range(6)]
    threads = [
        threading.Thread(target=bridge.on_notification, args=(f"{name}.jnlp",)) for name in names
    ]

    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(events) == 2 * len(names)
    for i in range(0, len(events), 2):
        started = events[i].removeprefix("start ")
        assert events[i + 1] == f"end {started}"
    assert sorted(identity for identity, _ in launcher.launches) == names


def test_stop_waits_for_notification_in_flight() -> None:
    entered = threading.Event()
    release = threading.Event()

    def blocking_launch(identity: str, args: list[str]) -> None:
        entered.set()
        release.wait(timeout=5)

    bridge = _bridge(FakeApplicationLauncher(on_launch=blocking_launch), [])
    worker = threading.Thread(target=bridge.on_notification, args=("a.jnlp",))
    worker.start()
    assert entered.wait(timeout=5)

    stopper = threading.Thread(target=bridge.stop)
    stopper.start()
    stopper.join(timeout=0.05)
    assert stopper.is_alive()

    release.set()
    stopper.join(timeout=5)
    worker.join(timeout=5)
    assert not stopper.is_alive()
