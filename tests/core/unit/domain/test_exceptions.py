"""Unit tests for the nvmg exception hierarchy."""

from pathlib import Path

import pytest

from nvmg.domain.exceptions import (
    DownloadError,
    ExtractError,
    NvmgConfigError,
    NvmgError,
    PlacementError,
    ReleaseIndexError,
    ResolutionError,
    UnsupportedAliasError,
    UnsupportedFormatError,
    VersionNotFoundError,
)
from nvmg.domain.stages import InstallStage


@pytest.mark.tier(1)
@pytest.mark.tra("Domain.Invariant.ErrorTaxonomy")
class TestExceptionHierarchy:
    """Test exception classes, their context and their stages."""

    @pytest.mark.parametrize(
        "error_type",
        [
            NvmgConfigError,
            ResolutionError,
            DownloadError,
            ExtractError,
            PlacementError,
            ReleaseIndexError,
        ],
    )
    def test_all_errors_share_base(self, error_type):
        assert issubclass(error_type, NvmgError)

    def test_resolution_subtypes(self):
        assert issubclass(VersionNotFoundError, ResolutionError)
        assert issubclass(UnsupportedAliasError, ResolutionError)

    def test_unsupported_format_is_extract_error(self):
        assert issubclass(UnsupportedFormatError, ExtractError)

    @pytest.mark.parametrize(
        ("error", "stage"),
        [
            (VersionNotFoundError("bad", specifier="abc"), InstallStage.RESOLVING),
            (
                DownloadError("bad", url="https://x/y.tar.gz", filename="y.tar.gz"),
                InstallStage.DOWNLOADING,
            ),
            (UnsupportedFormatError("bad", path=Path("a.rar")), InstallStage.EXTRACTING),
            (PlacementError("bad", path=Path("/x")), InstallStage.PLACING),
        ],
    )
    def test_stage_of_error(self, error, stage):
        assert error.stage is stage

    def test_config_error_has_no_stage(self):
        assert NvmgConfigError("bad").stage is None

    def test_resolution_error_carries_specifier(self):
        error = VersionNotFoundError("Invalid version number: 'abc'", specifier="abc")
        assert error.specifier == "abc"
        assert "abc" in str(error)

    def test_download_error_carries_context(self):
        cause = OSError("disk full")
        error = DownloadError(
            "Failed to write node.tar.gz",
            url="https://nodejs.org/dist/v1.2.3/node.tar.gz",
            filename="node.tar.gz",
            original_error=cause,
        )
        assert error.url.endswith("node.tar.gz")
        assert error.filename == "node.tar.gz"
        assert error.original_error is cause
        assert error.message == "Failed to write node.tar.gz"
