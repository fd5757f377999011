"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from lookslike import Outcome, is_def  # noqa: E402


@pytest.fixture
def positive():
    """IsDef passing for present numbers greater than zero."""

    def check(path, value, exists):
        if not exists:
            return Outcome.key_missing(path)
        if isinstance(value, (int, float)) and value > 0:
            return Outcome.passed(path)
        return Outcome.failed(path, f"expected a positive number, got {value!r}")

    return is_def("positive", check)


@pytest.fixture
def sample_document():
    """Provide a nested actual value resembling a decoded API response."""
    return {
        "id": 42,
        "name": "widget",
        "tags": ["blue", "small"],
        "owner": {"login": "octo", "roles": []},
        "attributes": {},
    }


@pytest.fixture
def sample_schema():
    """Provide a lax schema matching ``sample_document``."""
    return {
        "id": 42,
        "name": "widget",
        "tags": ["blue", "small"],
        "owner": {"login": "octo"},
    }
