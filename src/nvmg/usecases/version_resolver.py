"""Version resolver use case for turning user specifiers into release versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nvmg.domain.exceptions import UnsupportedAliasError, VersionNotFoundError
from nvmg.domain.version import (
    CanonicalVersion,
    ExplicitVersion,
    NamedAlias,
    parse_specifier,
)
from nvmg.usecases.version_parser import newest, parse_version, to_semver

if TYPE_CHECKING:
    from nvmg.adapters.ports import ReleaseIndexPort

# Aliases that always mean the newest published release.
NEWEST_ALIASES = frozenset(["node", "latest", "current", "stable"])


class VersionResolver:
    """Resolves a version specifier to a CanonicalVersion.

    Explicit versions are parsed and re-rendered without any I/O. Named
    aliases need a release index:

    - 'node', 'latest', 'current', 'stable': newest release
    - 'lts', 'lts/*': newest release with an LTS codename
    - 'lts/<codename>': newest release of that LTS line
    - 'system': never resolvable, nvmg does not manage a system Node.js

    Without a release index every alias is reported as not yet supported
    instead of falling through to numeric parsing.
    """

    def __init__(self, release_index: ReleaseIndexPort | None = None) -> None:
        """Initialize the resolver.

        Args:
            release_index: Port listing published releases, used for
                aliases and remote listings. None disables both.
        """
        self._release_index = release_index

    def resolve(self, specifier: str) -> CanonicalVersion:
        """Resolve a specifier such as 'v18.17.1', '18.17.1' or 'lts'.

        Args:
            specifier: Raw specifier as supplied by the user.

        Returns:
            The canonical version, e.g. CanonicalVersion rendering 'v18.17.1'.

        Raises:
            VersionNotFoundError: If the specifier is empty, malformed, or an
                alias matches no published release.
            UnsupportedAliasError: If an alias cannot be resolved.
            ReleaseIndexError: If the release index cannot be read.
        """
        parsed = parse_specifier(specifier)

        if isinstance(parsed, NamedAlias):
            return self._resolve_alias(parsed, specifier)

        return self._resolve_explicit(parsed, specifier)

    def remote_versions(self) -> list[CanonicalVersion]:
        """List every published version, oldest first.

        Raises:
            UnsupportedAliasError: If no release index is configured.
            ReleaseIndexError: If the release index cannot be read.
        """
        if self._release_index is None:
            raise UnsupportedAliasError(
                "Remote version listing is not yet supported without a release index",
                specifier="",
            )
        versions = {release.version for release in self._release_index.releases()}
        return sorted(versions, key=to_semver)

    def _resolve_explicit(
        self, parsed: ExplicitVersion, specifier: str
    ) -> CanonicalVersion:
        if not parsed.text:
            raise VersionNotFoundError("Version cannot be empty", specifier=specifier)
        try:
            return parse_version(parsed.text)
        except ValueError as e:
            raise VersionNotFoundError(
                f"Invalid version number: {specifier!r}",
                specifier=specifier,
                original_error=e,
            ) from e

    def _resolve_alias(self, alias: NamedAlias, specifier: str) -> CanonicalVersion:
        if alias.name == "system":
            raise UnsupportedAliasError(
                "Alias 'system' is not supported: nvmg only manages its own installs",
                specifier=specifier,
            )
        if self._release_index is None:
            raise UnsupportedAliasError(
                f"Alias {alias.name!r} is not yet supported", specifier=specifier
            )

        releases = self._release_index.releases()

        if alias.name in NEWEST_ALIASES:
            candidates = [release.version for release in releases]
        elif alias.is_lts and alias.lts_codename is None:
            candidates = [release.version for release in releases if release.is_lts]
        else:
            codename = alias.lts_codename or ""
            candidates = [
                release.version
                for release in releases
                if release.lts is not None and release.lts.lower() == codename
            ]

        resolved = newest(candidates)
        if resolved is None:
            raise VersionNotFoundError(
                f"No release matches alias {alias.name!r}", specifier=specifier
            )
        return resolved
