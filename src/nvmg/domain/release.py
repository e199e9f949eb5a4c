"""Release index value objects."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from nvmg.domain.version import CanonicalVersion


@dataclass(frozen=True)
class ReleaseInfo:
    """One published Node.js release as listed by the distribution index.

    Attributes:
        version: The release version.
        lts: LTS codename (e.g. 'Hydrogen'), or None for non-LTS releases.
        released_on: Publication date, if the index provides one.
    """

    version: CanonicalVersion
    lts: str | None = None
    released_on: date | None = None

    @property
    def is_lts(self) -> bool:
        return self.lts is not None
