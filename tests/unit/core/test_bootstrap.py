"""Tests for the first-start import of installer defaults."""

import threading

import pytest

from webstart.core.bootstrap import ConfigBootstrap, ConfigImportError
from webstart.core.config_keys import (
    IMPORTED_KEYS,
    JVM_UPDATE_STRATEGY,
    JVM_VENDOR,
    LAST_BOOTSTRAP_TIMESTAMP,
    PROXY_HTTP_HOST,
)
from webstart.core.config_store.fake import FakeConfigStore
from webstart.core.installer.fake import FakeInstallerVariables
from webstart.core.time.fake import FakeTime


def _bootstrap(
    installer: FakeInstallerVariables,
    store: FakeConfigStore,
    epoch_millis: int = 1_000,
) -> ConfigBootstrap:
    return ConfigBootstrap(installer, store, FakeTime(epoch_millis=epoch_millis))


def test_first_start_when_property_missing() -> None:
    bootstrap = _bootstrap(FakeInstallerVariables(installation_timestamp=100), FakeConfigStore())

    assert bootstrap.is_first_start() is True


def test_first_start_when_property_unparsable() -> None:
    store = FakeConfigStore(properties={LAST_BOOTSTRAP_TIMESTAMP: "yesterday"})
    bootstrap = _bootstrap(FakeInstallerVariables(installation_timestamp=100), store)

    assert bootstrap.is_first_start() is True


@pytest.mark.parametrize(
    ("installed_at", "last_bootstrap", "expected"),
    [
        (200, "100", True),
        (100, "100", False),
        (100, "200", False),
    ],
)
def test_first_start_compares_installation_with_last_import(
    installed_at: int, last_bootstrap: str, expected: bool
) -> None:
    store = FakeConfigStore(properties={LAST_BOOTSTRAP_TIMESTAMP: last_bootstrap})
    bootstrap = _bootstrap(FakeInstallerVariables(installation_timestamp=installed_at), store)

    assert bootstrap.is_first_start() is expected


def test_unknown_installation_time_counts_as_newer() -> None:
    store = FakeConfigStore(properties={LAST_BOOTSTRAP_TIMESTAMP: "5000"})
    bootstrap = _bootstrap(FakeInstallerVariables(), store)

    assert bootstrap.is_first_start() is True


def test_check_imports_values_and_records_timestamp() -> None:
    installer = FakeInstallerVariables(
        variables={JVM_VENDOR: "Eclipse Adoptium", PROXY_HTTP_HOST: "proxy.local"},
        installation_timestamp=100,
    )
    store = FakeConfigStore()
    bootstrap = _bootstrap(installer, store, epoch_millis=150)

    assert bootstrap.check() is True

    assert store.properties == {
        JVM_VENDOR: "Eclipse Adoptium",
        PROXY_HTTP_HOST: "proxy.local",
        LAST_BOOTSTRAP_TIMESTAMP: "150",
    }
    assert store.save_count == 1


def test_second_check_imports_nothing() -> None:
    installer = FakeInstallerVariables(
        variables={JVM_VENDOR: "Eclipse Adoptium"}, installation_timestamp=100
    )
    store = FakeConfigStore()
    bootstrap = _bootstrap(installer, store, epoch_millis=150)
    bootstrap.check()
    calls_after_first = list(store.set_calls)

    assert bootstrap.check() is False

    assert store.set_calls == calls_after_first
    assert store.save_count == 1


def test_check_ignores_variables_outside_imported_keys() -> None:
    installer = FakeInstallerVariables(
        variables={"some.other.key": "x"}, installation_timestamp=100
    )
    store = FakeConfigStore()

    _bootstrap(installer, store).check()

    assert "some.other.key" not in store.properties


def test_check_applies_lock_without_value() -> None:
    installer = FakeInstallerVariables(locked={JVM_UPDATE_STRATEGY}, installation_timestamp=100)
    store = FakeConfigStore()

    _bootstrap(installer, store).check()

    assert store.locked_keys == {JVM_UPDATE_STRATEGY}
    assert JVM_UPDATE_STRATEGY not in store.properties


def test_check_imports_keys_in_fixed_order() -> None:
    installer = FakeInstallerVariables(
        variables={key: "v" for key in IMPORTED_KEYS}, installation_timestamp=100
    )
    store = FakeConfigStore()

    _bootstrap(installer, store).check()

    imported = [key for key, _ in store.set_calls]
    assert imported == [*IMPORTED_KEYS, LAST_BOOTSTRAP_TIMESTAMP]


def test_save_failure_raises_import_error() -> None:
    store = FakeConfigStore(save_error=OSError("read-only file system"))
    bootstrap = _bootstrap(FakeInstallerVariables(installation_timestamp=100), store)

    with pytest.raises(ConfigImportError, match="read-only"):
        bootstrap.check()

    assert store.save_count == 0
    assert LAST_BOOTSTRAP_TIMESTAMP not in store.properties
    assert bootstrap.is_first_start() is True


def test_save_failure_restores_previous_timestamp() -> None:
    store = FakeConfigStore(
        properties={LAST_BOOTSTRAP_TIMESTAMP: "50"}, save_error=OSError("disk full")
    )
    bootstrap = _bootstrap(FakeInstallerVariables(installation_timestamp=100), store, 150)

    with pytest.raises(ConfigImportError):
        bootstrap.check()

    assert store.properties[LAST_BOOTSTRAP_TIMESTAMP] == "50"
    assert bootstrap.is_first_start() is True


def test_check_after_failed_save_imports_again() -> None:
    installer = FakeInstallerVariables(
        variables={JVM_VENDOR: "Eclipse Adoptium"}, installation_timestamp=100
    )
    store = FakeConfigStore(save_error=ValueError("unreadable"))
    bootstrap = _bootstrap(installer, store)

    for _ in range(2):
        with pytest.raises(ConfigImportError):
            bootstrap.check()

    vendor_sets = [key for key, _ in store.set_calls if key == JVM_VENDOR]
    assert len(vendor_sets) == 2


def test_concurrent_checks_import_once() -> None:
    installer = FakeInstallerVariables(
        variables={JVM_VENDOR: "Eclipse Adoptium"}, installation_timestamp=100
    )
    store = FakeConfigStore()
    bootstrap = _bootstrap(installer, store, epoch_millis=150)
    results: list[bool] = []
    barrier = threading.Barrier(8)

    def run() -> None:
        barrier.wait()
        results.append(bootstrap.check())

    threads = [threading.Thread(target=run) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results.count(True) == 1
    assert store.save_count == 1


def test_set_last_bootstrap_property_uses_clock() -> None:
    store = FakeConfigStore()
    bootstrap = _bootstrap(FakeInstallerVariables(), store, epoch_millis=42)

    bootstrap.set_last_bootstrap_property()

    assert store.properties[LAST_BOOTSTRAP_TIMESTAMP] == "42"
