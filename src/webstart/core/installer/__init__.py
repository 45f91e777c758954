from webstart.core.installer.abc import InstallerVariables
from webstart.core.installer.real import VarfileInstallerVariables

__all__ = ["InstallerVariables", "VarfileInstallerVariables"]
