"""
Root conftest.py for the nvmg test suite.

Pytest plugin that checks every test declares what it protects and how fast
it is expected to be:

    @pytest.mark.tier(1)
    @pytest.mark.tra("UseCase.Installer")
    def test_something():
        ...

Missing or malformed markers are reported as warnings by default.

Configuration:
    Set TRA_ENFORCE=1 to fail collection on marker errors
    Set TRA_ENFORCE=0 to skip the check entirely
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


# Valid TRA (Test Responsibility Anchor) namespace prefixes
VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
        "Interface.",
        "Factory.",
    ]
)

# 1=fast (unit, filesystem in tmp_path), 2=standard (end-to-end with fakes)
VALID_TIERS = frozenset([1, 2, 3])


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and tier checks."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor - the single responsibility this test protects. "
        "Must start with one of: Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, "
        "Contract, Interface, Factory",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (1=fast, 2=standard, 3=slow).",
    )
    config.addinivalue_line(
        "markers", "property: Property-based tests using Hypothesis"
    )


def _marker_errors(item: Item) -> list[str]:
    errors: list[str] = []
    test_id = item.nodeid

    tra_markers = list(item.iter_markers(name="tra"))
    if not tra_markers:
        errors.append(f"{test_id}: Missing @pytest.mark.tra('...')")
    else:
        anchor = tra_markers[0].args[0] if tra_markers[0].args else None
        if not isinstance(anchor, str) or not any(
            anchor == prefix.rstrip(".") or anchor.startswith(prefix)
            for prefix in VALID_TRA_PREFIXES
        ):
            errors.append(f"{test_id}: Invalid TRA anchor {anchor!r}")

    tier_markers = list(item.iter_markers(name="tier"))
    if not tier_markers:
        errors.append(f"{test_id}: Missing @pytest.mark.tier()")
    elif not tier_markers[0].args or tier_markers[0].args[0] not in VALID_TIERS:
        errors.append(f"{test_id}: Invalid tier marker")

    return errors


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and tier markers at collection time."""
    enforce_mode = os.environ.get("TRA_ENFORCE", "warn")
    if enforce_mode == "0":
        return

    errors = [error for item in items for error in _marker_errors(item)]
    if not errors:
        return

    if enforce_mode == "1":
        pytest.fail(
            "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
            pytrace=False,
        )
    print("\nTRA/Tier Enforcement Warnings:")
    for error in errors:
        print(f"  {error}")


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    return f"TRA enforcement: {os.environ.get('TRA_ENFORCE', 'warn')}"
