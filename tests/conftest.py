"""
Shared test fixtures for timew-line tests.

The fixed clock is used wherever an open interval is parsed so that
``end`` is deterministic.
"""

from datetime import datetime, timezone

import pytest

# ---------------------------------------------------------------------------
# Sample lines -- edit here if the canonical examples change
# ---------------------------------------------------------------------------
OPEN_NO_TAGS = "inc 20001011T133055Z"
OPEN_ONE_TAG = "inc 20001011T133055Z # Walala"
CLOSED_NO_TAGS = "inc 20001011T133055Z - 20001112T144054Z"
CLOSED_ONE_TAG = "inc 20001011T133055Z - 20001112T144054Z # Buvere"
CLOSED_QUOTED_TAGS = 'inc 20001011T133055Z - 20001112T144054Z # "ABC CDE" EFG HIJ'
TEN_MINUTES = "inc 20001011T133055Z - 20001011T134055Z"

FIXED_NOW = datetime(2001, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def fixed_clock():
    """A clock that always reads FIXED_NOW."""
    return lambda: FIXED_NOW


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (parses a multi-line data excerpt)",
    )
