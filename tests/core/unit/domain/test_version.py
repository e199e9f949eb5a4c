"""Unit tests for version-related domain value objects."""

import pytest

from nvmg.domain.exceptions import NvmgError
from nvmg.domain.version import (
    CanonicalVersion,
    ExplicitVersion,
    NamedAlias,
    parse_specifier,
)


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.CanonicalVersion")
class TestCanonicalVersion:
    """Test CanonicalVersion value object."""

    def test_renders_with_leading_v(self):
        """Test canonical tag always starts with 'v'."""
        assert str(CanonicalVersion(1, 2, 3)) == "v1.2.3"

    def test_renders_prerelease(self):
        """Test pre-release identifiers are joined with dots."""
        version = CanonicalVersion(20, 0, 0, prerelease=("rc", "1"))
        assert str(version) == "v20.0.0-rc.1"
        assert version.is_prerelease

    def test_release_is_not_prerelease(self):
        assert not CanonicalVersion(18, 17, 1).is_prerelease

    def test_reject_negative_component(self):
        """Test negative components are rejected."""
        with pytest.raises(ValueError, match="non-negative") as exc_info:
            CanonicalVersion(1, -2, 3)
        assert not isinstance(exc_info.value, NvmgError)

    def test_reject_empty_prerelease_identifier(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            CanonicalVersion(1, 2, 3, prerelease=("rc", ""))

    def test_frozen_dataclass(self):
        """Test that CanonicalVersion is immutable."""
        version = CanonicalVersion(1, 2, 3)
        with pytest.raises(AttributeError):
            version.major = 2  # type: ignore

    def test_equality_and_hash(self):
        """Test equal versions hash equally and dedupe in sets."""
        assert CanonicalVersion(1, 2, 3) == CanonicalVersion(1, 2, 3)
        assert len({CanonicalVersion(1, 2, 3), CanonicalVersion(1, 2, 3)}) == 1


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Policy.VersionSpecifier")
class TestParseSpecifier:
    """Test classification of raw specifiers."""

    def test_strips_single_leading_v(self):
        assert parse_specifier("v1.2.3") == ExplicitVersion(text="1.2.3")

    def test_only_one_v_is_stripped(self):
        """Test 'vv1.2.3' keeps its second 'v' and will fail to parse."""
        assert parse_specifier("vv1.2.3") == ExplicitVersion(text="v1.2.3")

    def test_plain_version_unchanged(self):
        assert parse_specifier("1.2.3") == ExplicitVersion(text="1.2.3")

    def test_surrounding_whitespace_ignored(self):
        assert parse_specifier("  v1.2.3\n") == ExplicitVersion(text="1.2.3")

    @pytest.mark.parametrize(
        "raw", ["stable", "latest", "node", "current", "lts", "system", "LTS"]
    )
    def test_known_aliases(self, raw):
        """Test alias names are recognized case-insensitively."""
        assert parse_specifier(raw) == NamedAlias(name=raw.lower())

    def test_lts_codename_alias(self):
        alias = parse_specifier("lts/Hydrogen")
        assert isinstance(alias, NamedAlias)
        assert alias.is_lts
        assert alias.lts_codename == "hydrogen"

    @pytest.mark.parametrize("raw", ["lts", "lts/*", "lts/"])
    def test_lts_without_codename(self, raw):
        alias = parse_specifier(raw)
        assert isinstance(alias, NamedAlias)
        assert alias.is_lts
        assert alias.lts_codename is None

    def test_unknown_word_is_explicit(self):
        """Test unknown words are parsed as versions, not aliases."""
        assert parse_specifier("abc") == ExplicitVersion(text="abc")

    def test_v_alone_becomes_empty(self):
        assert parse_specifier("v") == ExplicitVersion(text="")
