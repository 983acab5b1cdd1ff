"""Shared fixtures for integration tests."""

import os
from pathlib import Path

import pytest

_HERE = Path(__file__).resolve().parent


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless RUN_LAUNCHPAD_NETWORK_TESTS=1."""
    if os.environ.get("RUN_LAUNCHPAD_NETWORK_TESTS") == "1":
        return
    skip = pytest.mark.skip(
        reason="Requires network access. Set RUN_LAUNCHPAD_NETWORK_TESTS=1 to run"
    )
    for item in items:
        if _HERE in item.path.resolve().parents:
            item.add_marker(skip)
