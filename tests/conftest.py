"""
Pytest configuration and shared fixtures for sweid tests.
"""

from datetime import date

import pytest


@pytest.fixture
def today() -> date:
    """Fixed 'current date' for century resolution."""
    return date(2024, 6, 1)


@pytest.fixture
def valid_personnummer() -> str:
    """Skatteverket's example personnummer (male, born 1981-12-18)."""
    return "811218-9876"


@pytest.fixture
def valid_samordningsnummer() -> str:
    """Samordningsnummer for 1981-12-18 (day 18 + 60 = 78)."""
    return "811278-9873"


@pytest.fixture
def valid_organisationsnummer() -> str:
    """Organisationsnummer with serial 748 (ekonomisk förening)."""
    return "556703-7485"
