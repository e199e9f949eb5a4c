"""Interface adapters: platform detection, HTTP download and logging."""

from nvmg.adapters.httpx_archive_downloader import HttpxArchiveDownloader
from nvmg.adapters.httpx_release_index import HttpxReleaseIndex
from nvmg.adapters.platform_detector import OsPlatformDetector
from nvmg.adapters.ports import (
    ArchiveDownloaderPort,
    LoggingPort,
    PlatformDetectorPort,
    ReleaseIndexPort,
    StdlibLoggingAdapter,
)

__all__ = [
    "ArchiveDownloaderPort",
    "LoggingPort",
    "PlatformDetectorPort",
    "ReleaseIndexPort",
    "StdlibLoggingAdapter",
    "HttpxArchiveDownloader",
    "HttpxReleaseIndex",
    "OsPlatformDetector",
]
