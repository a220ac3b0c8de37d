"""Pytest configuration and fixtures for typeone tests."""

import os

# Set a fixed terminal width to prevent line wrapping issues in CI
# This must be set before any Rich imports
os.environ.setdefault("COLUMNS", "200")
os.environ.setdefault("LINES", "50")
# Disable Rich's terminal detection to ensure consistent output
os.environ.setdefault("TERM", "dumb")

from collections.abc import Generator  # noqa: E402

import pytest  # noqa: E402

TYPEONE_ENV_VARS = ("TYPEONE_COERCE", "TYPEONE_JSON", "TYPEONE_SCOPE_FILE")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Remove TYPEONE_* variables for the duration of a test.

    Variables the test sets itself are removed again afterwards.
    """
    for var in TYPEONE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield
    for var in TYPEONE_ENV_VARS:
        os.environ.pop(var, None)
