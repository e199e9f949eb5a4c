"""Fake logging adapter for testing."""

from __future__ import annotations


class FakeLoggingAdapter:
    """Fake logging adapter that captures log messages for assertion.

    Implements LoggingPort protocol by storing messages in lists
    for later retrieval and assertion in tests.

    Example:
        logger = FakeLoggingAdapter()
        installer = Installer(..., logger=logger)
        installer.install("18.17.1", root)
        assert any("placing" in m for m in logger.infos)
    """

    def __init__(self) -> None:
        self._infos: list[str] = []
        self._warnings: list[str] = []

    def info(self, message: str) -> None:
        self._infos.append(message)

    def warning(self, message: str) -> None:
        self._warnings.append(message)

    @property
    def infos(self) -> list[str]:
        """Get a copy of captured info messages."""
        return list(self._infos)

    @property
    def warnings(self) -> list[str]:
        """Get a copy of captured warning messages."""
        return list(self._warnings)

    def clear(self) -> None:
        """Clear all captured messages."""
        self._infos.clear()
        self._warnings.clear()
