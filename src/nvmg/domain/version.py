"""Version-related domain value objects.

A user-supplied specifier is classified into one of two variants before
resolution: an explicit version number or a named alias. Resolution turns
either into a CanonicalVersion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# Alias names recognized ahead of numeric parsing. "lts/<codename>" is
# matched by prefix.
ALIAS_NAMES = frozenset(["stable", "latest", "node", "current", "lts", "system"])
LTS_PREFIX = "lts/"


@dataclass(frozen=True)
class ExplicitVersion:
    """A specifier naming a version number, with any leading 'v' removed.

    Attributes:
        text: The version text to parse, e.g. '18.17.1' or '20.0.0-rc.1'.
    """

    text: str


@dataclass(frozen=True)
class NamedAlias:
    """A specifier naming an alias such as 'lts' or 'lts/hydrogen'.

    Attributes:
        name: Lower-cased alias name.
    """

    name: str

    @property
    def is_lts(self) -> bool:
        """True for 'lts' and every 'lts/...' form."""
        return self.name == "lts" or self.name.startswith(LTS_PREFIX)

    @property
    def lts_codename(self) -> str | None:
        """Codename of an 'lts/<codename>' alias, None for 'lts' and 'lts/*'."""
        if not self.name.startswith(LTS_PREFIX):
            return None
        codename = self.name[len(LTS_PREFIX) :]
        if codename in ("", "*"):
            return None
        return codename


VersionSpecifier = Union[ExplicitVersion, NamedAlias]


def parse_specifier(raw: str) -> VersionSpecifier:
    """Classify a raw user string as an explicit version or a named alias.

    Surrounding whitespace is ignored. Alias names are matched
    case-insensitively; anything else becomes an ExplicitVersion with a
    single leading 'v' stripped.

    Args:
        raw: Specifier as typed by the user.

    Returns:
        ExplicitVersion or NamedAlias.
    """
    text = raw.strip()
    lowered = text.lower()
    if lowered in ALIAS_NAMES or lowered.startswith(LTS_PREFIX):
        return NamedAlias(name=lowered)
    if text.startswith("v"):
        text = text[1:]
    return ExplicitVersion(text=text)


@dataclass(frozen=True)
class CanonicalVersion:
    """Validated, normalized Node.js release version.

    Renders as 'v<major>.<minor>.<patch>' with an optional '-<prerelease>'
    suffix. Build metadata is never part of the canonical form.

    Attributes:
        major: Major version number (non-negative).
        minor: Minor version number (non-negative).
        patch: Patch version number (non-negative).
        prerelease: Dot-separated pre-release identifiers, empty for releases.
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate version components."""
        self._validate_components()
        self._validate_prerelease()

    def _validate_components(self) -> None:
        """Validate all numeric components are non-negative."""
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise ValueError(
                f"Version components must be non-negative, got: {self.major}.{self.minor}.{self.patch}"
            )

    def _validate_prerelease(self) -> None:
        """Validate pre-release identifiers are non-empty."""
        if any(not part for part in self.prerelease):
            raise ValueError(
                f"Pre-release identifiers cannot be empty, got: {self.prerelease!r}"
            )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        """Return the canonical tag, e.g. 'v18.17.1'."""
        tag = f"v{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            tag += "-" + ".".join(self.prerelease)
        return tag
