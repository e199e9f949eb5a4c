"""Archive namer use case mapping a version and host to a distribution archive."""

from __future__ import annotations

from urllib.parse import urljoin

from nvmg.domain.archive import ArchiveDescriptor
from nvmg.domain.settings import NODE_DISTRIBUTION_URL
from nvmg.domain.target import HostTarget
from nvmg.domain.version import CanonicalVersion

# GOOS token -> (platform token in archive names, archive extension)
PLATFORMS: dict[str, tuple[str, str]] = {
    "linux": ("linux", "tar.gz"),
    "darwin": ("darwin", "tar.gz"),
    "windows": ("win", "zip"),
    "solaris": ("sunos", "tar.gz"),
}
DEFAULT_PLATFORM = PLATFORMS["linux"]

# GOARCH token -> architecture token in archive names
ARCHITECTURES: dict[str, str] = {
    "386": "x86",
    "amd64": "x64",
    "arm64": "arm64",
    "ppc64": "ppc64",
    "ppc64le": "ppc64le",
    "s390x": "s390x",
}
DEFAULT_ARCHITECTURE = "x64"


class ArchiveNamer:
    """Computes the archive filename and URL for a release on a host target.

    A pure function of its inputs: no I/O and no failure modes. Unknown
    operating systems fall back to linux/tar.gz and unknown architectures
    to x64.
    """

    def __init__(self, dist_url: str = NODE_DISTRIBUTION_URL) -> None:
        """Initialize the namer.

        Args:
            dist_url: Base URL of the distribution server. A trailing slash
                is added when missing.
        """
        self._dist_url = dist_url.rstrip("/") + "/"

    def name(self, version: CanonicalVersion, target: HostTarget) -> ArchiveDescriptor:
        """Describe the archive for version on target.

        v1.2.3 on windows/amd64 yields 'node-v1.2.3-win-x64.zip' served
        from '<dist_url>v1.2.3/node-v1.2.3-win-x64.zip'.
        """
        platform, extension = PLATFORMS.get(target.os, DEFAULT_PLATFORM)
        arch = ARCHITECTURES.get(target.arch, DEFAULT_ARCHITECTURE)

        filename = f"node-{version}-{platform}-{arch}.{extension}"
        url = urljoin(self._dist_url, f"{version}/{filename}")
        return ArchiveDescriptor(filename=filename, url=url)
