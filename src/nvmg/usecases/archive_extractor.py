"""Archive extractor use case for expanding distribution archives into staging."""

from __future__ import annotations

import lzma
import tarfile
import tempfile
import zipfile
import zlib
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from nvmg.domain.archive import ARCHIVE_SUFFIXES, ArchiveFormat, StagingArea
from nvmg.domain.exceptions import ExtractError, UnsupportedFormatError

# Errors the archive modules raise for corrupt, truncated or unreadable input.
# zipfile raises RuntimeError for encrypted members and NotImplementedError
# for compression methods it cannot decode.
_ARCHIVE_ERRORS = (
    tarfile.TarError,
    zipfile.BadZipFile,
    EOFError,
    OSError,
    zlib.error,
    lzma.LZMAError,
    RuntimeError,
    NotImplementedError,
)


def detect_format(filename: str) -> ArchiveFormat | None:
    """Return the archive format implied by a filename suffix.

    Suffixes are checked in the order of ARCHIVE_SUFFIXES; matching is
    case-insensitive.

    Args:
        filename: Archive filename or path string.

    Returns:
        The matching ArchiveFormat, or None if no suffix matches.
    """
    lowered = filename.lower()
    for suffix, archive_format in ARCHIVE_SUFFIXES:
        if lowered.endswith(suffix):
            return archive_format
    return None


class ArchiveExtractor:
    """Expands an archive into a temporary staging directory.

    extract() is a context manager: the staging directory exists for the
    duration of the with-block and is removed when it exits, whether the
    block succeeds or raises.

    Archives that wrap everything in a single top-level directory (as the
    Node.js distribution archives do) are collapsed, so
    StagingArea.content_root always lists the package's real contents.
    """

    def __init__(self, temp_dir: Path | None = None) -> None:
        """Initialize the extractor.

        Args:
            temp_dir: Parent for staging directories. Defaults to the
                system temporary directory.
        """
        self._temp_dir = temp_dir

    @contextmanager
    def extract(self, archive_path: Path) -> Iterator[StagingArea]:
        """Expand archive_path and yield its staging area.

        Args:
            archive_path: Path of the archive; its suffix selects the format.

        Yields:
            StagingArea whose root is removed when the context exits.

        Raises:
            UnsupportedFormatError: If the filename suffix is not recognized.
            ExtractError: If the archive is corrupt or unreadable.
        """
        archive_format = detect_format(archive_path.name)
        if archive_format is None:
            raise UnsupportedFormatError(
                f"Unsupported archive format: {archive_path.name}", path=archive_path
            )

        with tempfile.TemporaryDirectory(prefix="nvmg-", dir=self._temp_dir) as tmp:
            root = Path(tmp)
            self._expand(archive_path, archive_format, root)
            yield StagingArea(root=root, content_root=self._content_root(root))

    def _expand(
        self, archive_path: Path, archive_format: ArchiveFormat, root: Path
    ) -> None:
        try:
            if archive_format.is_tar:
                with tarfile.open(archive_path, archive_format.value) as archive:
                    archive.extractall(root, filter="data")
            else:
                with zipfile.ZipFile(archive_path) as archive:
                    archive.extractall(root)
        except _ARCHIVE_ERRORS as e:
            raise ExtractError(
                f"Could not extract {archive_path.name}: {e}",
                path=archive_path,
                original_error=e,
            ) from e

    def _content_root(self, root: Path) -> Path:
        """Skip a single top-level wrapper directory, if there is one."""
        entries = list(root.iterdir())
        if len(entries) == 1 and entries[0].is_dir() and not entries[0].is_symlink():
            return entries[0]
        return root
