"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import math_utilities...' works,
and clears the cached settings around every test.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from math_utilities.config.settings import reset_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start each test from default settings, unaffected by the caller's env."""
    for name in (
        "MATH_UTILITIES_SORT_IN_PLACE",
        "MATH_UTILITIES_EMPTY_RANGE",
        "MATH_UTILITIES_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
