"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import date

import pytest

# A Monday, so weekday expectations are easy to check by hand
NOW = date(2020, 6, 15)

# A Friday, used as the date the parsed text was written
REFERENCE = date(2016, 7, 15)


@pytest.fixture
def now() -> date:
    """Fixed stand-in for the current date."""
    return NOW


@pytest.fixture
def reference_date() -> date:
    """Date the parsed text was written."""
    return REFERENCE
