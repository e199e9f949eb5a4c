"""Domain exceptions.

Exception hierarchy:
- NvmgError: Base exception for every failure raised by nvmg.
  - NvmgConfigError: Invalid settings or configuration file.
  - ResolutionError: A specifier could not be turned into a version.
    - VersionNotFoundError: Malformed or unknown version.
    - UnsupportedAliasError: Alias recognized but not resolvable.
  - DownloadError: Network, transport or write failure while fetching.
  - ExtractError: Archive could not be expanded.
    - UnsupportedFormatError: Archive suffix not recognized.
  - PlacementError: Directory creation, move or removal failed.
  - ReleaseIndexError: Distribution index could not be fetched or parsed.

Pipeline errors carry the install stage they terminate, so callers can
report where an install stopped without inspecting the message.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from nvmg.domain.stages import InstallStage


class NvmgError(Exception):
    """Base exception for all nvmg errors.

    Attributes:
        message: Human-readable error description.
        original_error: The underlying exception, if any.
    """

    stage: ClassVar[InstallStage | None] = None

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class NvmgConfigError(NvmgError):
    """Raised when nvmg settings or configuration are invalid."""


class ResolutionError(NvmgError):
    """Raised when a version specifier cannot be resolved.

    Attributes:
        specifier: The offending specifier as supplied by the user.
    """

    stage = InstallStage.RESOLVING

    def __init__(
        self,
        message: str,
        specifier: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.specifier = specifier


class VersionNotFoundError(ResolutionError):
    """Raised when a specifier is malformed or names no known release."""


class UnsupportedAliasError(ResolutionError):
    """Raised when a named alias is recognized but cannot be resolved."""


class DownloadError(NvmgError):
    """Raised when an archive download fails.

    Attributes:
        url: The URL that was requested.
        filename: The archive filename that was being written.
    """

    stage = InstallStage.DOWNLOADING

    def __init__(
        self,
        message: str,
        url: str,
        filename: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.url = url
        self.filename = filename


class ExtractError(NvmgError):
    """Raised when an archive cannot be expanded.

    Attributes:
        path: Path of the archive being extracted.
    """

    stage = InstallStage.EXTRACTING

    def __init__(
        self,
        message: str,
        path: Path,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.path = path


class UnsupportedFormatError(ExtractError):
    """Raised when no extractor matches the archive filename suffix."""


class PlacementError(NvmgError):
    """Raised when moving files into the version store fails.

    A failure partway through a move leaves the destination partially
    populated; nothing is rolled back.

    Attributes:
        path: The path that could not be created, moved or removed.
    """

    stage = InstallStage.PLACING

    def __init__(
        self,
        message: str,
        path: Path,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.path = path


class ReleaseIndexError(NvmgError):
    """Raised when the distribution release index is unavailable or malformed.

    Attributes:
        url: The index URL that was requested.
    """

    stage = InstallStage.RESOLVING

    def __init__(
        self,
        message: str,
        url: str,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.url = url
