"""HTTPX-based implementation of the ArchiveDownloaderPort.

This adapter uses httpx to stream Node.js distribution archives to disk.
"""

from __future__ import annotations

import tempfile
from pathlib import Path, PurePosixPath
from urllib.parse import urlparse

import httpx

from nvmg.domain.exceptions import DownloadError
from nvmg.domain.settings import DEFAULT_TIMEOUT_SECONDS


class HttpxArchiveDownloader:
    """HTTPX-based adapter for downloading distribution archives.

    Streams the response body straight into a file in the temporary
    directory, so archives are never held in memory as a whole. Redirects
    are followed up to httpx's default limit. No checksum is verified.

    This adapter implements ArchiveDownloaderPort for use by the Installer.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        temp_dir: Path | None = None,
    ) -> None:
        """Initialize the HTTPX archive downloader.

        Args:
            client: Optional httpx.Client for dependency injection (testing).
                   If not provided, a new client is created per request.
            timeout_seconds: Timeout for the request when no client is injected.
            temp_dir: Directory to write into. Defaults to the system
                temporary directory at call time.
        """
        self._client = client
        self._timeout_seconds = timeout_seconds
        self._temp_dir = temp_dir

    def fetch(self, url: str) -> Path:
        """Download an archive to a temporary file.

        Args:
            url: Remote URL of the archive.

        Returns:
            Path to the downloaded file, named after the URL's last segment.

        Raises:
            DownloadError: For HTTP errors (4xx, 5xx), network failures and
                filesystem errors. The error names the attempted filename.
        """
        filename = PurePosixPath(urlparse(url).path).name
        if not filename:
            raise DownloadError(
                f"URL does not name a file: {url}", url=url, filename=filename
            )

        temp_dir = self._temp_dir or Path(tempfile.gettempdir())
        destination = temp_dir / filename

        try:
            if self._client is not None:
                self._stream_to(self._client, url, destination)
            else:
                with httpx.Client(timeout=self._timeout_seconds) as client:
                    self._stream_to(client, url, destination)
        except httpx.HTTPStatusError as e:
            destination.unlink(missing_ok=True)
            raise DownloadError(
                f"Failed to download {filename}: HTTP {e.response.status_code}",
                url=url,
                filename=filename,
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            destination.unlink(missing_ok=True)
            raise DownloadError(
                f"Failed to download {filename}: {e}",
                url=url,
                filename=filename,
                original_error=e,
            ) from e
        except OSError as e:
            destination.unlink(missing_ok=True)
            raise DownloadError(
                f"Failed to write {filename}: {e}",
                url=url,
                filename=filename,
                original_error=e,
            ) from e

        return destination

    def _stream_to(self, client: httpx.Client, url: str, destination: Path) -> None:
        with client.stream("GET", url, follow_redirects=True) as response:
            response.raise_for_status()
            with destination.open("wb") as f:
                for chunk in response.iter_bytes():
                    f.write(chunk)
