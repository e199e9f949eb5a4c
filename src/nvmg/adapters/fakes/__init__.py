"""Fake adapters for testing.

This module provides test doubles for port interfaces, enabling
deterministic testing without real I/O operations.
"""

from nvmg.adapters.fakes.fake_archive_downloader import FakeArchiveDownloader
from nvmg.adapters.fakes.fake_logging_adapter import FakeLoggingAdapter
from nvmg.adapters.fakes.fake_platform_detector import FakePlatformDetector
from nvmg.adapters.fakes.fake_release_index import FakeReleaseIndex

__all__ = [
    "FakeArchiveDownloader",
    "FakeLoggingAdapter",
    "FakePlatformDetector",
    "FakeReleaseIndex",
]
