"""Tests for CLI Ensure utility class."""

import pytest

from webstart.cli.ensure import Ensure


class TestEnsureInvariant:
    """Tests for Ensure.invariant method."""

    def test_passes_when_true(self) -> None:
        """Ensure.invariant returns quietly when the condition holds."""
        Ensure.invariant(True, "Should not fail")

    def test_exits_when_false(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.invariant exits with code 1 and a red Error prefix on stderr."""
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "No running webstart instance to notify")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "No running webstart instance to notify" in captured.err
        assert captured.out == ""


class TestEnsureNotNone:
    """Tests for Ensure.not_none method."""

    def test_returns_value_when_not_none(self) -> None:
        """Ensure.not_none returns the value unchanged when not None."""
        assert Ensure.not_none("17.0.2", "Value is None") == "17.0.2"

    def test_empty_string_is_not_none(self) -> None:
        """Ensure.not_none returns an empty property value since it is not None."""
        assert Ensure.not_none("", "Value is None") == ""

    def test_exits_when_none(self) -> None:
        """Ensure.not_none raises SystemExit when value is None."""
        with pytest.raises(SystemExit) as exc_info:
            Ensure.not_none(None, "'deployment.proxy.type' is not set")
        assert exc_info.value.code == 1


class TestEnsureNotEmpty:
    """Tests for Ensure.not_empty method."""

    def test_returns_list_when_not_empty(self) -> None:
        """Ensure.not_empty returns the same list."""
        values = ["/jvms/17"]
        assert Ensure.not_empty(values, "Nothing found") is values

    def test_exits_when_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Ensure.not_empty exits with the given message."""
        with pytest.raises(SystemExit):
            Ensure.not_empty([], "No runtime known at /jvms/8")

        assert "No runtime known at /jvms/8" in capsys.readouterr().err
