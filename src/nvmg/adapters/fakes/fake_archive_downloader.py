"""Fake archive downloader for testing.

Provides a test double for ArchiveDownloaderPort that writes
preconfigured bytes instead of making network calls.
"""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse


class FakeArchiveDownloader:
    """Fake implementation of ArchiveDownloaderPort for testing.

    Writes either a fixture file or raw bytes to the temporary directory
    under the URL's filename, exactly where the real adapter would. Supports
    configuring exceptions for error path testing and records all calls.

    Example:
        >>> fake = FakeArchiveDownloader(payload=b"not really a tarball")
        >>> path = fake.fetch("https://nodejs.org/dist/v1.2.3/node.tar.gz")
        >>> path.name
        'node.tar.gz'
    """

    def __init__(
        self,
        payload: bytes | None = None,
        source: Path | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        """Initialize with the content to serve.

        Args:
            payload: Bytes written for every fetch, if no source is set.
            source: File copied for every fetch; takes precedence over payload.
            temp_dir: Directory to write into. Defaults to the system
                temporary directory at call time.
        """
        self._payload = payload
        self._source = source
        self._temp_dir = temp_dir
        self._exception: BaseException | None = None
        self._calls: list[str] = []
        self._fetched: list[Path] = []

    @property
    def calls(self) -> list[str]:
        """Return the URLs passed to fetch()."""
        return self._calls

    @property
    def fetched(self) -> list[Path]:
        """Return the paths written by fetch()."""
        return self._fetched

    def set_source(self, source: Path) -> None:
        """Serve the given file on subsequent fetch() calls."""
        self._source = source

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from fetch(), or None to clear."""
        self._exception = exception

    def fetch(self, url: str) -> Path:
        """Write the configured content and return its path.

        Raises:
            Any exception configured via set_exception().
        """
        self._calls.append(url)

        if self._exception is not None:
            raise self._exception

        filename = PurePosixPath(urlparse(url).path).name
        temp_dir = self._temp_dir or Path(tempfile.gettempdir())
        destination = temp_dir / filename

        if self._source is not None:
            shutil.copyfile(self._source, destination)
        else:
            destination.write_bytes(self._payload or b"")

        self._fetched.append(destination)
        return destination
