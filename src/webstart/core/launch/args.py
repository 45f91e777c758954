"""Parsing of raw launcher invocation arguments."""

import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

NO_FORK_FLAG = "--no-fork"
DESCRIPTOR_SUFFIX = ".jnlp"
UNKNOWN_APP = "unknown-app"


def filter_args(raw_args: Sequence[str]) -> list[str]:
    """Drop every no-fork flag, keeping the other arguments in order.

    The launcher always starts the application in its own process, so a
    no-fork request from the OS integration is meaningless here.
    """
    relevant = [arg for arg in raw_args if arg != NO_FORK_FLAG]
    logger.debug("Relevant launch args: %s", relevant)
    return relevant


def extract_app_identity(args: Sequence[str]) -> str:
    """Derive an application name from the first descriptor argument.

    The first argument ending in ".jnlp" (case-insensitive) is used, with the
    suffix removed and only the last '/'-separated segment kept:

        >>> extract_app_identity(["-verbose", "https://host/apps/App.jnlp"])
        'App'

    Returns UNKNOWN_APP if no argument qualifies or the segment is empty.
    """
    for arg in args:
        if not arg.lower().endswith(DESCRIPTOR_SUFFIX):
            continue
        stem = arg[: -len(DESCRIPTOR_SUFFIX)]
        name = stem.split("/")[-1]
        return name if name else UNKNOWN_APP
    return UNKNOWN_APP
