"""Platform detector adapter for detecting current OS and architecture.

This module provides an adapter that implements PlatformDetectorPort
by using Python's standard library platform module.
"""

from __future__ import annotations

import platform

from nvmg.domain.target import HostTarget


class OsPlatformDetector:
    """Adapter that detects the current platform using platform module.

    Implements PlatformDetectorPort by querying platform.system() and
    platform.machine() and translating the results into Go-style tokens,
    which is what the archive naming tables are keyed on.

    Values with no known translation are passed through lower-cased rather
    than rejected; archive naming falls back to its defaults for them.
    """

    # Mapping from platform.system() values to GOOS tokens
    _OS_MAP: dict[str, str] = {
        "linux": "linux",
        "darwin": "darwin",
        "windows": "windows",
        "sunos": "solaris",
        "solaris": "solaris",
    }

    # Mapping from platform.machine() values to GOARCH tokens
    _ARCH_MAP: dict[str, str] = {
        "x86_64": "amd64",
        "amd64": "amd64",
        "aarch64": "arm64",
        "arm64": "arm64",
        "i386": "386",
        "i486": "386",
        "i586": "386",
        "i686": "386",
        "x86": "386",
        "ppc64": "ppc64",
        "ppc64le": "ppc64le",
        "s390x": "s390x",
    }

    def detect(self) -> HostTarget:
        """Detect the current host target.

        Returns:
            HostTarget value object with os and arch tokens.
        """
        return HostTarget(os=self._detect_os(), arch=self._detect_arch())

    def _detect_os(self) -> str:
        system = platform.system().lower()
        return self._OS_MAP.get(system, system)

    def _detect_arch(self) -> str:
        machine = platform.machine().lower()
        return self._ARCH_MAP.get(machine, machine)
