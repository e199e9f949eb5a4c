"""Version store use case for querying and removing installed versions."""

from __future__ import annotations

import shutil
from pathlib import Path

from nvmg.domain.exceptions import PlacementError
from nvmg.domain.version import CanonicalVersion
from nvmg.usecases.version_parser import parse_version, to_semver


class VersionStore:
    """Read and remove per-version directories under a managed root.

    Only directories whose name is a canonical version tag ('v18.17.1')
    count as installs; anything else under the root is ignored.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, version: CanonicalVersion) -> Path:
        """Return the directory a version is (or would be) installed in."""
        return self._root / str(version)

    def installed(self) -> list[CanonicalVersion]:
        """List installed versions, oldest first.

        Returns:
            Versions with a directory under the root. Empty if the root
            does not exist.
        """
        if not self._root.is_dir():
            return []

        versions: list[CanonicalVersion] = []
        for entry in self._root.iterdir():
            if not entry.is_dir() or not entry.name.startswith("v"):
                continue
            try:
                version = parse_version(entry.name[1:])
            except ValueError:
                continue
            # Skip non-canonical spellings such as 'v01.2.3'
            if str(version) == entry.name:
                versions.append(version)
        return sorted(versions, key=to_semver)

    def is_installed(self, version: CanonicalVersion) -> bool:
        return self.path_for(version).is_dir()

    def uninstall(self, version: CanonicalVersion) -> Path:
        """Remove an installed version's directory.

        Returns:
            The removed directory.

        Raises:
            PlacementError: If the version is not installed or removal fails.
        """
        path = self.path_for(version)
        if not self.is_installed(version):
            raise PlacementError(f"{version} is not installed", path=path)
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise PlacementError(
                f"Could not remove {path}: {e}", path=path, original_error=e
            ) from e
        return path
