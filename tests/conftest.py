"""Shared fixtures and markers for basen tests."""

import pytest

from basen import create


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: exhaustive round-trip runs")


@pytest.fixture
def b64():
    """Default alphabet, variable width."""
    return create()


@pytest.fixture
def base128():
    """128 two-character hex tokens, one byte per symbol."""
    return create(characters=[f"{k:02x}" for k in range(128)])
