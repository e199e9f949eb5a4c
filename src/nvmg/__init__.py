"""nvmg-py: Node.js version manager core for Python."""

__version__ = "0.1.0"

from nvmg.domain.exceptions import NvmgError
from nvmg.domain.settings import NvmgSettings
from nvmg.domain.target import HostTarget
from nvmg.domain.version import CanonicalVersion
from nvmg.usecases.installer import InstallResult, Installer
from nvmg.usecases.version_resolver import VersionResolver

__all__ = [
    "NvmgError",
    "NvmgSettings",
    "HostTarget",
    "CanonicalVersion",
    "InstallResult",
    "Installer",
    "VersionResolver",
]
