"""Port interfaces for the nvmg core package.

Ports define the contracts that adapters must implement.
These are Protocol classes (structural subtyping) for flexible testing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from nvmg.domain.release import ReleaseInfo
    from nvmg.domain.target import HostTarget


@runtime_checkable
class PlatformDetectorPort(Protocol):
    """Port interface for detecting the host operating system and architecture.

    Contract:
        - detect() returns a HostTarget with Go-style os/arch tokens
        - detect() never raises for unknown platforms; unknown tokens
          are passed through lower-cased
        - Repeated calls return equal values
    """

    def detect(self) -> HostTarget:
        """Detect the current host target.

        Returns:
            HostTarget describing the running host.
        """
        ...


@runtime_checkable
class ArchiveDownloaderPort(Protocol):
    """Port interface for fetching a distribution archive.

    Contract:
        - fetch(url) issues a single GET and writes the body to a new file
          in the system temporary directory named after the URL's last
          path segment
        - Returns the path of that file; the caller owns and removes it
        - Raises DownloadError on any transport, HTTP status or write failure
        - Leaves no partially written file behind on failure
    """

    def fetch(self, url: str) -> Path:
        """Download url to a local temporary file.

        Args:
            url: Absolute URL of the archive.

        Returns:
            Path of the downloaded file.

        Raises:
            DownloadError: If the download cannot be completed.
        """
        ...


@runtime_checkable
class ReleaseIndexPort(Protocol):
    """Port interface for the distribution's list of published releases.

    Contract:
        - releases() returns every release the index lists, in any order
        - Raises ReleaseIndexError if the index is unreachable or malformed
    """

    def releases(self) -> list[ReleaseInfo]:
        """Return all published releases.

        Raises:
            ReleaseIndexError: If the index cannot be fetched or parsed.
        """
        ...


@runtime_checkable
class LoggingPort(Protocol):
    """Port interface for structured logging.

    Implementations handle log message delivery to configured logging backends.
    Abstracts the logging mechanism from use cases that report progress
    (install stage transitions, failures, skipped entries).

    Contract:
        - info(message) logs an info-level message
        - warning(message) logs a warning-level message
        - Both are fire-and-forget (no return value, no exceptions propagated)
    """

    def info(self, message: str) -> None:
        """Log an info message.

        Args:
            message: The message to log.
        """
        ...

    def warning(self, message: str) -> None:
        """Log a warning message.

        Args:
            message: The warning message to log.
        """
        ...


class StdlibLoggingAdapter:
    """Default implementation: forwards messages to the standard logging module.

    Uses the 'nvmg' logger unless another name is given, so applications
    embedding nvmg can route its output with ordinary logging configuration.
    """

    def __init__(self, name: str = "nvmg") -> None:
        self._logger = logging.getLogger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)
