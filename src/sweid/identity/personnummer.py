"""
Swedish personnummer (personal identity number) and samordningsnummer
(coordination number) rules.

Format: YYMMDD-NNNC or YYYYMMDD-NNNC
- First 6/8 digits: birth date
- NNN: birth number (odd for male, even for female)
- C: Luhn checksum

Coordination numbers (samordningsnummer) add 60 to the day.
"""

from datetime import date
from enum import Enum
from typing import Optional

from sweid.identity.dates import (
    COORDINATION_DAY_OFFSET,
    coordination_date,
    is_valid_date,
    to_date,
)
from sweid.identity.luhn import is_luhn_valid, luhn_checksum
from sweid.identity.parsing import RawComponents, resolve_components


class Gender(str, Enum):
    """Legal gender encoded in the birth number."""

    MALE = "M"
    FEMALE = "F"


def gender_from_serial(serial: str) -> Optional[Gender]:
    """
    Derive gender from the birth number.

    Odd is male, even is female. Returns None if the serial is not a number.
    """
    try:
        number = int(serial)
    except ValueError:
        return None
    return Gender.FEMALE if number % 2 == 0 else Gender.MALE


def is_personnummer_date(components: RawComponents) -> bool:
    """Check that the date part is a real date."""
    c = components
    return is_valid_date(c.century, c.year, c.month, c.day)


def is_samordningsnummer_date(components: RawComponents) -> bool:
    """Check that the date part, day minus 60, is a real date."""
    c = components
    return coordination_date(c.century, c.year, c.month, c.day) is not None


def birth_date(pnr: str, today: date) -> Optional[date]:
    """
    Get the birth date of a personnummer or samordningsnummer.

    Args:
        pnr: The number to read
        today: Current date, used to resolve a missing century

    Returns:
        Birth date, or None if pnr is neither kind of number
    """
    components = resolve_components(pnr, today)
    if components is None or not is_luhn_valid(components.luhn_digits):
        return None

    c = components
    born = to_date(c.century, c.year, c.month, c.day)
    if born is None:
        born = coordination_date(c.century, c.year, c.month, c.day)
    return born


def format_personnummer(pnr: str, today: date, separator: str = "-") -> Optional[str]:
    """
    Format personnummer or samordningsnummer as YYYYMMDD-NNNC.

    Args:
        pnr: The number to format
        today: Current date, used to resolve a missing century
        separator: The separator to use (default: '-')

    Returns:
        Formatted number or None if invalid
    """
    if birth_date(pnr, today) is None:
        return None
    c = resolve_components(pnr, today)
    return f"{c.century}{c.year}{c.month}{c.day}{separator}{c.serial}{c.checksum}"


def generate_personnummer(
    birth: date,
    gender: Gender = Gender.MALE,
    birth_number: int = 1,
    coordination: bool = False,
) -> str:
    """
    Generate a valid personnummer for testing purposes.

    Args:
        birth: Date of birth
        gender: Gender to encode in the birth number
        birth_number: Birth number (1-999)
        coordination: Generate a samordningsnummer (day + 60) instead

    Returns:
        A valid number in YYYYMMDDNNNC format
    """
    if not 1 <= birth_number <= 999:
        raise ValueError("Birth number must be between 1 and 999")

    # Adjust birth number for gender (odd for male, even for female)
    if gender == Gender.MALE and birth_number % 2 == 0:
        birth_number += 1
    elif gender == Gender.FEMALE and birth_number % 2 == 1:
        birth_number += 1
    if birth_number > 999:
        birth_number -= 2

    day = birth.day + COORDINATION_DAY_OFFSET if coordination else birth.day
    date_part = f"{birth.year:04d}{birth.month:02d}{day:02d}"
    birth_str = f"{birth_number:03d}"

    # Checksum on 10-digit format
    checksum = luhn_checksum(date_part[2:] + birth_str)

    return f"{date_part}{birth_str}{checksum}"
