"""Installer variables read from a response varfile."""

import logging
from pathlib import Path

from webstart.core.installer.abc import InstallerVariables

logger = logging.getLogger(__name__)

INSTALLATION_DATE_VARIABLE = "installationDate"
LOCKED_SUFFIX = ".locked"


def parse_varfile(content: str) -> dict[str, str]:
    """Parse a key=value response varfile.

    Blank lines and lines starting with '#' are ignored. The first '='
    separates key from value; surrounding whitespace is stripped. Lines
    without '=' are skipped.
    """
    variables: dict[str, str] = {}
    for line in content.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if "=" not in stripped:
            logger.debug("Skipping malformed varfile line: %r", stripped)
            continue
        key, value = stripped.split("=", 1)
        variables[key.strip()] = value.strip()
    return variables


class VarfileInstallerVariables(InstallerVariables):
    """Production implementation reading the installer's response varfile.

    A variable NAME is locked when the file also contains NAME.locked=true.
    A missing varfile behaves like an installer that defined nothing.
    """

    def __init__(self, varfile_path: Path) -> None:
        self._varfile_path = varfile_path
        self._variables: dict[str, str] | None = None

    def get_variable(self, name: str) -> str | None:
        return self._loaded().get(name)

    def is_variable_locked(self, name: str) -> bool:
        flag = self._loaded().get(name + LOCKED_SUFFIX)
        return flag is not None and flag.lower() == "true"

    def get_installation_timestamp(self) -> int | None:
        raw = self._loaded().get(INSTALLATION_DATE_VARIABLE)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric %s value %r", INSTALLATION_DATE_VARIABLE, raw)
            return None

    def _loaded(self) -> dict[str, str]:
        if self._variables is None:
            if self._varfile_path.exists():
                content = self._varfile_path.read_text(encoding="utf-8")
                self._variables = parse_varfile(content)
            else:
                logger.debug("No installer varfile at %s", self._varfile_path)
                self._variables = {}
        return self._variables
