"""nvmg settings domain entity."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from nvmg.domain.exceptions import NvmgConfigError

NODE_DISTRIBUTION_URL = "https://nodejs.org/dist/"
NODE_INDEX_URL = "https://nodejs.org/dist/index.json"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class NvmgSettings:
    """nvmg configuration settings.

    Domain entity with zero external dependencies. Built by the CLI layer
    from defaults, an optional YAML file and the environment; the install
    pipeline itself only ever sees the resolved values.

    Attributes:
        home: Managed root holding one directory per installed version.
            Must be absolute.
        dist_url: Base URL of the Node.js distribution server.
        index_url: URL of the distribution's index.json.
        timeout_seconds: Network timeout for a single request.
    """

    home: Path
    dist_url: str = NODE_DISTRIBUTION_URL
    index_url: str = NODE_INDEX_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        self._validate_home()
        self._validate_url("dist_url", self.dist_url)
        self._validate_url("index_url", self.index_url)
        self._validate_timeout()

    def _validate_home(self) -> None:
        """Validate that home is absolute and has no traversal."""
        home_str = str(self.home)
        if "\x00" in home_str:
            raise NvmgConfigError(f"home contains null byte, got: {home_str!r}")
        if ".." in self.home.parts:
            raise NvmgConfigError(f"home contains path traversal, got: {home_str}")
        if not self.home.is_absolute():
            raise NvmgConfigError(f"home must be an absolute path, got: {home_str}")

    def _validate_url(self, name: str, value: str) -> None:
        """Validate that a URL is an http(s) URL with a host."""
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise NvmgConfigError(
                f"{name} must be an http or https URL, got: {value!r}"
            )

    def _validate_timeout(self) -> None:
        if self.timeout_seconds <= 0:
            raise NvmgConfigError(
                f"timeout_seconds must be positive, got: {self.timeout_seconds}"
            )
