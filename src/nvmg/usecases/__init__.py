"""Use cases: Application logic layer."""

from nvmg.usecases.archive_extractor import ArchiveExtractor, detect_format
from nvmg.usecases.archive_namer import ArchiveNamer
from nvmg.usecases.config_parser import ConfigParser
from nvmg.usecases.installer import InstallResult, Installer
from nvmg.usecases.version_parser import parse_version
from nvmg.usecases.version_resolver import VersionResolver
from nvmg.usecases.version_store import VersionStore

__all__ = [
    "ArchiveExtractor",
    "detect_format",
    "ArchiveNamer",
    "ConfigParser",
    "InstallResult",
    "Installer",
    "parse_version",
    "VersionResolver",
    "VersionStore",
]
