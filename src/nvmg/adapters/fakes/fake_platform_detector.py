"""Fake platform detector for testing.

This module provides a fake implementation of PlatformDetectorPort
that allows tests to control platform detection without relying on
actual OS/architecture detection.
"""

from __future__ import annotations

from nvmg.domain.target import HostTarget


class FakePlatformDetector:
    """Fake implementation of PlatformDetectorPort for testing.

    Example:
        >>> fake = FakePlatformDetector(HostTarget(os="linux", arch="amd64"))
        >>> fake.detect()
        HostTarget(os='linux', arch='amd64')

        >>> FakePlatformDetector.from_tuple("windows", "386").detect()
        HostTarget(os='windows', arch='386')
    """

    def __init__(self, target: HostTarget) -> None:
        self._target = target

    @classmethod
    def from_tuple(cls, os: str, arch: str) -> FakePlatformDetector:
        """Create a FakePlatformDetector from OS and architecture tokens."""
        return cls(HostTarget(os=os, arch=arch))

    def detect(self) -> HostTarget:
        """Return the configured host target."""
        return self._target
