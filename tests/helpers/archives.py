"""Builders for small distribution-style archives used as test fixtures."""

from __future__ import annotations

import io
import struct
import tarfile
import zipfile
from pathlib import Path

from nvmg.domain.archive import ArchiveFormat
from nvmg.usecases.archive_extractor import detect_format


def build_archive(
    path: Path,
    files: dict[str, bytes],
    wrapper: str | None = None,
) -> Path:
    """Write an archive at path holding files, optionally under one wrapper dir.

    The format is chosen from the suffix of path, the same way the
    extractor chooses it.

    Args:
        path: Archive path, e.g. tmp_path / "node-v10.0.0-linux-x64.tar.gz".
        files: Mapping of relative member name to content.
        wrapper: Name of a single top-level directory to nest files in.

    Returns:
        path, for chaining.
    """
    archive_format = detect_format(path.name)
    if archive_format is None:
        raise ValueError(f"Cannot build archive with unknown suffix: {path.name}")

    members = {
        (f"{wrapper}/{name}" if wrapper else name): data for name, data in files.items()
    }

    if archive_format is ArchiveFormat.ZIP:
        with zipfile.ZipFile(path, "w") as archive:
            for name, data in members.items():
                archive.writestr(name, data)
        return path

    write_mode = "w" + archive_format.value[1:]
    with tarfile.open(path, write_mode) as archive:
        for name, data in members.items():
            info = tarfile.TarInfo(name)
            info.size = len(data)
            info.mode = 0o755 if "/bin/" in f"/{name}" else 0o644
            archive.addfile(info, io.BytesIO(data))
    return path


def node_archive(directory: Path, version: str = "v10.0.0") -> Path:
    """Build a two-entry tar.gz laid out like an official Node.js archive.

    The archive wraps 'bin/node' and 'README.md' in a single
    'node-<version>-linux-x64' directory.
    """
    stem = f"node-{version}-linux-x64"
    return build_archive(
        directory / f"{stem}.tar.gz",
        {"bin/node": b"#!/bin/sh\necho node\n", "README.md": b"# Node.js\n"},
        wrapper=stem,
    )


# Offsets of the flag and compression fields from each header signature
_LOCAL_HEADER = (b"PK\x03\x04", 6, 8)
_CENTRAL_HEADER = (b"PK\x01\x02", 8, 10)


def patch_zip_member(
    path: Path, flag_bits: int | None = None, compress_type: int | None = None
) -> Path:
    """Rewrite the flags or compression method of a one-member zip in place.

    Both the local and the central directory header are patched, the way
    an archive written by another tool would carry them.
    """
    data = bytearray(path.read_bytes())
    for signature, flag_offset, method_offset in (_LOCAL_HEADER, _CENTRAL_HEADER):
        start = data.find(signature)
        if start < 0:
            raise ValueError(f"{path.name} has no {signature!r} header")
        if flag_bits is not None:
            struct.pack_into("<H", data, start + flag_offset, flag_bits)
        if compress_type is not None:
            struct.pack_into("<H", data, start + method_offset, compress_type)
    path.write_bytes(bytes(data))
    return path
