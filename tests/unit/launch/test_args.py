"""Tests for launch argument filtering and application naming."""

import pytest

from webstart.core.launch.args import UNKNOWN_APP, extract_app_identity, filter_args


def test_filter_args_removes_every_no_fork_flag() -> None:
    assert filter_args(["--no-fork", "a.jnlp", "--no-fork", "-x"]) == ["a.jnlp", "-x"]


def test_filter_args_keeps_similar_arguments() -> None:
    assert filter_args(["--no-fork=1", "--NO-FORK"]) == ["--no-fork=1", "--NO-FORK"]


def test_filter_args_empty() -> None:
    assert filter_args([]) == []


@pytest.mark.parametrize(
    ("args", "expected"),
    [
        (["-verbose", "https://host/apps/App.jnlp"], "App"),
        (["App.JNLP"], "App"),
        (["a.jnlp", "b.jnlp"], "a"),
        (["dir/.jnlp"], UNKNOWN_APP),
        (["/abs/path/editor.jnlp"], "editor"),
        (["-verbose"], UNKNOWN_APP),
        ([], UNKNOWN_APP),
    ],
)
def test_extract_app_identity(args: list[str], expected: str) -> None:
    assert extract_app_identity(args) == expected
