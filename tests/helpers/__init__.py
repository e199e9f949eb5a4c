"""Shared helpers for the nvmg test suite."""
