"""Shared fixtures for BDD tests."""

import pytest
from pathlib import Path


@pytest.fixture
def managed_root(tmp_path: Path) -> Path:
    """Create an empty managed root.

    Returns:
        Path to a temporary directory standing in for ~/.nvmg.
    """
    root = tmp_path / "nvmg"
    root.mkdir()
    return root


@pytest.fixture
def scratch_dir(tmp_path: Path) -> Path:
    """Create a directory standing in for the system temporary directory.

    Returns:
        Path that downloads and staging directories are written under.
    """
    path = tmp_path / "tmp"
    path.mkdir()
    return path


@pytest.fixture
def fixtures_dir(tmp_path: Path) -> Path:
    """Create a directory for archives built by a scenario."""
    path = tmp_path / "fixtures"
    path.mkdir()
    return path
