"""Pytest configuration for nvmg core unit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from nvmg.adapters.fakes import (
    FakeArchiveDownloader,
    FakeLoggingAdapter,
    FakeReleaseIndex,
)
from nvmg.domain.target import HostTarget
from nvmg.usecases.archive_extractor import ArchiveExtractor
from nvmg.usecases.archive_namer import ArchiveNamer
from nvmg.usecases.installer import Installer
from nvmg.usecases.version_resolver import VersionResolver


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Directory standing in for the system temporary directory."""
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Directory holding archives built for a test."""
    path = tmp_path / "fixtures"
    path.mkdir()
    return path


@pytest.fixture
def managed_root(tmp_path: Path) -> Path:
    """Fresh, empty managed root."""
    path = tmp_path / "nvmg"
    path.mkdir()
    return path


@pytest.fixture
def fake_logger() -> FakeLoggingAdapter:
    return FakeLoggingAdapter()


@pytest.fixture
def release_index() -> FakeReleaseIndex:
    """Small release index with current and LTS lines."""
    return FakeReleaseIndex.from_pairs(
        [
            ("v20.5.0", None),
            ("v20.4.0", None),
            ("v18.17.0", "Hydrogen"),
            ("v18.16.1", "Hydrogen"),
            ("v16.20.1", "Gallium"),
            ("v16.20.0", "Gallium"),
        ]
    )


@pytest.fixture
def build_installer(scratch_dir: Path, fake_logger: FakeLoggingAdapter):
    """Return a function building an Installer around a fake downloader."""

    def _build(
        downloader: FakeArchiveDownloader,
        target: HostTarget = HostTarget(os="linux", arch="amd64"),
        resolver: VersionResolver | None = None,
    ) -> Installer:
        return Installer(
            resolver=resolver or VersionResolver(),
            namer=ArchiveNamer(),
            downloader=downloader,
            extractor=ArchiveExtractor(temp_dir=scratch_dir),
            target=target,
            logger=fake_logger,
        )

    return _build
