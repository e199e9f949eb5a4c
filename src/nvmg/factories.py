"""Factory functions for building settings and wiring the install pipeline.

Settings are layered, lowest precedence first:

1. Built-in defaults (~/.nvmg, nodejs.org)
2. YAML config file (explicit path, or NVMG_CONFIG)
3. Environment (NVMG_DIR, NVMG_NODEJS_ORG_MIRROR)
4. Explicit home override (the CLI's --home)
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx

from nvmg.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from nvmg.adapters.httpx_release_index import HttpxReleaseIndex
from nvmg.adapters.platform_detector import OsPlatformDetector
from nvmg.adapters.ports import LoggingPort, PlatformDetectorPort
from nvmg.domain.exceptions import NvmgConfigError
from nvmg.domain.settings import NvmgSettings
from nvmg.usecases.archive_extractor import ArchiveExtractor
from nvmg.usecases.archive_namer import ArchiveNamer
from nvmg.usecases.config_parser import ConfigParser
from nvmg.usecases.installer import Installer
from nvmg.usecases.version_resolver import VersionResolver

HOME_ENV = "NVMG_DIR"
CONFIG_ENV = "NVMG_CONFIG"
MIRROR_ENV = "NVMG_NODEJS_ORG_MIRROR"
DEFAULT_HOME_DIRNAME = ".nvmg"


def default_home(environ: Mapping[str, str]) -> Path:
    """Return ~/.nvmg, honouring HOME from environ when set."""
    home = environ.get("HOME")
    base = Path(home) if home else Path.home()
    return base / DEFAULT_HOME_DIRNAME


def load_settings(
    environ: Mapping[str, str],
    config_path: Path | None = None,
    home_override: Path | None = None,
) -> NvmgSettings:
    """Build NvmgSettings from defaults, config file, environment and overrides.

    Args:
        environ: Environment mapping, usually os.environ.
        config_path: YAML config file. Falls back to NVMG_CONFIG; no file
            is read when neither is set.
        home_override: Managed root taking precedence over everything else.

    Returns:
        Validated settings.

    Raises:
        NvmgConfigError: If the config file is unreadable or any value is invalid.
    """
    values: dict[str, Any] = {"home": default_home(environ)}

    if config_path is None and environ.get(CONFIG_ENV):
        config_path = Path(environ[CONFIG_ENV])
    if config_path is not None:
        try:
            yaml_str = config_path.expanduser().read_text(encoding="utf-8")
        except OSError as e:
            raise NvmgConfigError(
                f"Could not read config file {config_path}: {e}", original_error=e
            ) from e
        values.update(ConfigParser().parse(yaml_str))

    if environ.get(HOME_ENV):
        values["home"] = Path(environ[HOME_ENV]).expanduser()
    if environ.get(MIRROR_ENV):
        values["dist_url"] = environ[MIRROR_ENV]
    if home_override is not None:
        values["home"] = home_override.expanduser()

    values["home"] = values["home"].absolute()
    return NvmgSettings(**values)


def create_resolver(
    settings: NvmgSettings, client: httpx.Client | None = None
) -> VersionResolver:
    """Create a VersionResolver backed by the distribution's release index."""
    index = HttpxReleaseIndex(
        url=settings.index_url, client=client, timeout_seconds=settings.timeout_seconds
    )
    return VersionResolver(release_index=index)


def create_installer(
    settings: NvmgSettings,
    client: httpx.Client | None = None,
    platform_detector: PlatformDetectorPort | None = None,
    logger: LoggingPort | None = None,
) -> Installer:
    """Create an Installer wired with the production adapters.

    The host target is detected here, once, and fixed for the installer's
    lifetime.

    Args:
        settings: Resolved nvmg settings.
        client: Optional shared httpx.Client for downloads and the index.
        platform_detector: Detector override, e.g. to install for another host.
        logger: Logging port override.

    Returns:
        A ready-to-use Installer.
    """
    detector = platform_detector or OsPlatformDetector()
    return Installer(
        resolver=create_resolver(settings, client=client),
        namer=ArchiveNamer(dist_url=settings.dist_url),
        downloader=HttpxArchiveDownloader(
            client=client, timeout_seconds=settings.timeout_seconds
        ),
        extractor=ArchiveExtractor(),
        target=detector.detect(),
        logger=logger,
    )
