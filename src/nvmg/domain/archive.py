"""Archive-related domain value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class ArchiveFormat(Enum):
    """Compressed archive formats nvmg knows how to expand.

    The value is the mode string handed to tarfile.open(), or 'zip'.
    """

    GZIP_TAR = "r:gz"
    XZ_TAR = "r:xz"
    BZIP2_TAR = "r:bz2"
    ZIP = "zip"

    @property
    def is_tar(self) -> bool:
        return self is not ArchiveFormat.ZIP


# Checked in order; the first matching suffix wins.
ARCHIVE_SUFFIXES: tuple[tuple[str, ArchiveFormat], ...] = (
    (".tar.gz", ArchiveFormat.GZIP_TAR),
    (".tgz", ArchiveFormat.GZIP_TAR),
    (".tar.xz", ArchiveFormat.XZ_TAR),
    (".txz", ArchiveFormat.XZ_TAR),
    (".tar.bz2", ArchiveFormat.BZIP2_TAR),
    (".tbz", ArchiveFormat.BZIP2_TAR),
    (".zip", ArchiveFormat.ZIP),
)


@dataclass(frozen=True)
class ArchiveDescriptor:
    """Distribution archive for one (version, os, arch) combination.

    Attributes:
        filename: Archive filename, e.g. 'node-v18.17.1-linux-x64.tar.gz'.
        url: Absolute URL the archive is served from.
    """

    filename: str
    url: str


@dataclass(frozen=True)
class StagingArea:
    """Temporary directory holding an extracted archive.

    Attributes:
        root: The temporary directory itself; removed when extraction scope ends.
        content_root: Directory whose entries are the package's top-level
            contents. Equal to root, or root's only subdirectory when the
            archive wraps everything in a single directory.
    """

    root: Path
    content_root: Path

    @property
    def is_collapsed(self) -> bool:
        """True when a single wrapper directory was skipped."""
        return self.content_root != self.root
