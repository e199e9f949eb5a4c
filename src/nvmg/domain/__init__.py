"""Domain layer: Entities with zero external dependencies."""

from nvmg.domain.archive import ArchiveDescriptor, ArchiveFormat, StagingArea
from nvmg.domain.exceptions import (
    DownloadError,
    ExtractError,
    NvmgConfigError,
    NvmgError,
    PlacementError,
    ReleaseIndexError,
    ResolutionError,
    UnsupportedAliasError,
    UnsupportedFormatError,
    VersionNotFoundError,
)
from nvmg.domain.release import ReleaseInfo
from nvmg.domain.settings import NvmgSettings
from nvmg.domain.stages import InstallStage
from nvmg.domain.target import HostTarget
from nvmg.domain.version import (
    CanonicalVersion,
    ExplicitVersion,
    NamedAlias,
    VersionSpecifier,
    parse_specifier,
)

__all__ = [
    "ArchiveDescriptor",
    "ArchiveFormat",
    "StagingArea",
    "DownloadError",
    "ExtractError",
    "NvmgConfigError",
    "NvmgError",
    "PlacementError",
    "ReleaseIndexError",
    "ResolutionError",
    "UnsupportedAliasError",
    "UnsupportedFormatError",
    "VersionNotFoundError",
    "ReleaseInfo",
    "NvmgSettings",
    "InstallStage",
    "HostTarget",
    "CanonicalVersion",
    "ExplicitVersion",
    "NamedAlias",
    "VersionSpecifier",
    "parse_specifier",
]
