"""Semantic version parsing for Node.js release numbers."""

from __future__ import annotations

import re

import semantic_version

from nvmg.domain.version import CanonicalVersion

# Numeric components are matched loosely (leading zeros allowed) and
# re-serialized; identifier rules are left to semantic_version.
_VERSION_RE = re.compile(
    r"([0-9]+)\.([0-9]+)\.([0-9]+)(?:-([0-9A-Za-z.-]+))?(?:\+([0-9A-Za-z.-]+))?"
)


def parse_version(text: str) -> CanonicalVersion:
    """Parse 'major.minor.patch[-prerelease][+build]' into a CanonicalVersion.

    Accepts no leading 'v'; callers strip it. Build metadata is validated
    and then dropped.

    Args:
        text: Version text such as '18.17.1' or '20.0.0-rc.1'.

    Returns:
        The canonical version.

    Raises:
        ValueError: If text is not a three-component semantic version.
    """
    match = _VERSION_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"Expected 'major.minor.patch', got: {text!r}")

    major, minor, patch, prerelease, build = match.groups()
    version = semantic_version.Version(
        major=int(major),
        minor=int(minor),
        patch=int(patch),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
    )
    return CanonicalVersion(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=tuple(version.prerelease),
    )


def to_semver(version: CanonicalVersion) -> semantic_version.Version:
    """Convert a CanonicalVersion for precedence comparisons."""
    return semantic_version.Version(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        prerelease=version.prerelease,
        build=(),
    )


def newest(versions: list[CanonicalVersion]) -> CanonicalVersion | None:
    """Return the highest-precedence version, or None for an empty list."""
    if not versions:
        return None
    return max(versions, key=to_semver)
