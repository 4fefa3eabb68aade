"""
Calendar validation of the date part of an identity number.
"""

from datetime import date
from typing import Optional

# Samordningsnummer add this to the day of month
COORDINATION_DAY_OFFSET = 60


def to_date(century: Optional[str], year: str, month: str, day: str) -> Optional[date]:
    """
    Build the Gregorian date the components denote.

    Returns None if any component is not a number or the
    combination does not exist (e.g. 30 February, 29 February 1900).
    """
    try:
        return date(int(f"{century or ''}{year}"), int(month), int(day))
    except ValueError:
        return None


def is_valid_date(century: Optional[str], year: str, month: str, day: str) -> bool:
    """Check that the components denote a real calendar date."""
    return to_date(century, year, month, day) is not None


def coordination_date(
    century: Optional[str], year: str, month: str, day: str
) -> Optional[date]:
    """Date of a samordningsnummer, whose day of month is offset by 60."""
    try:
        actual_day = int(day) - COORDINATION_DAY_OFFSET
    except ValueError:
        return None
    return to_date(century, year, month, str(actual_day))
