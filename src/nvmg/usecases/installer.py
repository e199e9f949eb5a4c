"""Installer use case orchestrating resolve, name, download, extract and place."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from nvmg.domain.archive import ArchiveDescriptor
from nvmg.domain.exceptions import NvmgError, PlacementError
from nvmg.domain.stages import InstallStage
from nvmg.domain.target import HostTarget
from nvmg.domain.version import CanonicalVersion
from nvmg.usecases.archive_extractor import ArchiveExtractor
from nvmg.usecases.archive_namer import ArchiveNamer
from nvmg.usecases.version_resolver import VersionResolver

if TYPE_CHECKING:
    from nvmg.adapters.ports import ArchiveDownloaderPort, LoggingPort

# Permission mode for version directories created under the managed root
DIRECTORY_MODE = 0o755


@dataclass(frozen=True)
class InstallResult:
    """Result of a successful install.

    Attributes:
        version: The canonical version that was installed.
        destination: The per-version directory, '<managed_root>/<version>'.
        descriptor: The archive the install was made from.
    """

    version: CanonicalVersion
    destination: Path
    descriptor: ArchiveDescriptor


class Installer:
    """Installs a Node.js release into a managed root.

    Runs the stages RESOLVING, NAMING, DOWNLOADING, EXTRACTING and PLACING
    strictly in sequence. Any error ends the install immediately; nothing
    is retried and nothing already placed is rolled back.

    Temporary resources are scoped to the call: the downloaded archive is
    removed once extraction is over and the staging directory once
    placement is over, on success and failure alike.

    Re-installing a version replaces entries that the archive provides and
    leaves any other entries in the version directory untouched.
    """

    def __init__(
        self,
        resolver: VersionResolver,
        namer: ArchiveNamer,
        downloader: ArchiveDownloaderPort,
        extractor: ArchiveExtractor,
        target: HostTarget,
        logger: LoggingPort | None = None,
    ) -> None:
        """Initialize the installer.

        Args:
            resolver: Resolves specifiers to canonical versions.
            namer: Maps versions to distribution archives.
            downloader: Port fetching archives to temporary files.
            extractor: Expands archives into staging directories.
            target: Host target archives are selected for.
            logger: Port receiving progress messages. Defaults to the
                'nvmg' standard library logger.
        """
        if logger is None:
            from nvmg.adapters.ports import StdlibLoggingAdapter

            logger = StdlibLoggingAdapter()

        self._resolver = resolver
        self._namer = namer
        self._downloader = downloader
        self._extractor = extractor
        self._target = target
        self._logger = logger

    @property
    def target(self) -> HostTarget:
        return self._target

    def install(self, specifier: str, managed_root: Path) -> InstallResult:
        """Install the release named by specifier under managed_root.

        Args:
            specifier: Version specifier, e.g. 'v18.17.1' or 'lts'.
            managed_root: Directory holding one subdirectory per version.

        Returns:
            InstallResult with the canonical version and its directory.

        Raises:
            ResolutionError: If the specifier cannot be resolved.
            DownloadError: If the archive cannot be fetched.
            ExtractError: If the archive cannot be expanded (including
                UnsupportedFormatError).
            PlacementError: If the version directory cannot be populated.
                The directory may be left partially populated.
        """
        stage = InstallStage.RESOLVING
        try:
            self._enter(stage, specifier)
            version = self._resolver.resolve(specifier)

            stage = InstallStage.NAMING
            self._enter(stage, str(version))
            descriptor = self._namer.name(version, self._target)

            stage = InstallStage.DOWNLOADING
            self._enter(stage, descriptor.url)
            archive_path = self._downloader.fetch(descriptor.url)

            try:
                stage = InstallStage.EXTRACTING
                self._enter(stage, str(archive_path))
                with self._extractor.extract(archive_path) as staging:
                    stage = InstallStage.PLACING
                    destination = managed_root / str(version)
                    self._enter(stage, str(destination))
                    self._place(staging.content_root, destination)
            finally:
                archive_path.unlink(missing_ok=True)
        except NvmgError as e:
            self._logger.warning(
                f"Install of {specifier!r} failed while {stage.value}: {e}"
            )
            raise

        self._enter(InstallStage.DONE, f"{version} installed at {destination}")
        return InstallResult(
            version=version, destination=destination, descriptor=descriptor
        )

    def _enter(self, stage: InstallStage, detail: str) -> None:
        self._logger.info(f"{stage.value}: {detail}")

    def _place(self, content_root: Path, destination: Path) -> None:
        """Move every top-level entry of content_root into destination."""
        try:
            destination.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise PlacementError(
                f"Could not create version directory {destination}: {e}",
                path=destination,
                original_error=e,
            ) from e

        for entry in sorted(content_root.iterdir()):
            target = destination / entry.name
            try:
                self._remove_existing(target)
                entry.replace(target)
            except OSError as e:
                raise PlacementError(
                    f"Could not move {entry.name} into {destination}: {e}",
                    path=target,
                    original_error=e,
                ) from e

    def _remove_existing(self, target: Path) -> None:
        if target.is_symlink() or target.is_file():
            target.unlink()
        elif target.is_dir():
            shutil.rmtree(target)
        else:
            return
        self._logger.info(f"replaced existing {target}")
