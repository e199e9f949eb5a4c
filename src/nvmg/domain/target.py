"""Host target value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HostTarget:
    """Operating system and CPU architecture an install is made for.

    Tokens follow Go's GOOS/GOARCH naming ('linux', 'darwin', 'windows',
    'solaris'; '386', 'amd64', 'arm64', 'ppc64', 'ppc64le', 's390x').
    Values outside those sets are legal and map to documented defaults
    when an archive name is computed.

    Detected once per process by OsPlatformDetector and passed down
    explicitly, so naming stays pure.

    Attributes:
        os: Operating system token.
        arch: Architecture token.
    """

    os: str
    arch: str

    def __str__(self) -> str:
        return f"{self.os}/{self.arch}"
