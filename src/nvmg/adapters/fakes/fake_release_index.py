"""Fake release index for testing."""

from __future__ import annotations

from nvmg.domain.release import ReleaseInfo
from nvmg.usecases.version_parser import parse_version


class FakeReleaseIndex:
    """Fake implementation of ReleaseIndexPort for testing.

    Returns a preconfigured list of releases and counts how often it was
    queried.

    Example:
        >>> index = FakeReleaseIndex.from_pairs([("v20.5.0", None), ("v18.17.0", "Hydrogen")])
        >>> [str(r.version) for r in index.releases()]
        ['v20.5.0', 'v18.17.0']
    """

    def __init__(self, releases: list[ReleaseInfo] | None = None) -> None:
        self._releases = list(releases or [])
        self._exception: BaseException | None = None
        self.call_count = 0

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str | None]]) -> FakeReleaseIndex:
        """Build an index from (version tag, LTS codename) pairs."""
        return cls(
            [
                ReleaseInfo(version=parse_version(tag.removeprefix("v")), lts=lts)
                for tag, lts in pairs
            ]
        )

    def set_exception(self, exception: BaseException | None) -> None:
        """Configure an exception to raise from releases(), or None to clear."""
        self._exception = exception

    def releases(self) -> list[ReleaseInfo]:
        self.call_count += 1
        if self._exception is not None:
            raise self._exception
        return list(self._releases)
