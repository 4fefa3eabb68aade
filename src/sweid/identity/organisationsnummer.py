"""
Swedish organisationsnummer (organization number) rules.

Format: NNNNNN-NNNN (10 digits, optionally with a 2-digit prefix)
- Digits 3-4: >= 20 (to distinguish from personnummer)
- First serial digit (7th digit): organization type
  - 1: Estates of deceased persons
  - 2: State, county, municipality, parish
  - 3: Foreign companies
  - 5: Limited companies
  - 6: Simple partnerships
  - 7: Economic associations, housing cooperatives
  - 8: Non-profit associations, foundations
  - 9: Trading and limited partnerships
- Last digit: Luhn checksum

Digit 4 is not in use and maps to CompanyType.INVALID.
"""

import random
from datetime import date
from enum import Enum
from typing import Optional

from sweid.identity.luhn import is_luhn_valid, luhn_checksum
from sweid.identity.parsing import RawComponents, resolve_components

# Organisationsnummer add this to the month
ORGANISATION_MONTH_OFFSET = 20


class CompanyType(str, Enum):
    """Organization type encoded in the first serial digit."""

    DODSBO = "dodsbo"
    OFFENTLIG = "offentlig"
    UTLANDSKT_FORETAG = "utlandskt_foretag"
    AKTIEBOLAG = "aktiebolag"
    ENKELT_BOLAG = "enkelt_bolag"
    EKONOMISK_FORENING = "ekonomisk_forening"
    IDEELL_FORENING = "ideell_forening"
    HANDELS_KOMMANDITBOLAG = "handels_kommanditbolag"
    INVALID = "invalid"

    @property
    def description(self) -> str:
        return COMPANY_TYPE_DESCRIPTIONS[self]


COMPANY_TYPES = {
    "1": CompanyType.DODSBO,
    "2": CompanyType.OFFENTLIG,
    "3": CompanyType.UTLANDSKT_FORETAG,
    "5": CompanyType.AKTIEBOLAG,
    "6": CompanyType.ENKELT_BOLAG,
    "7": CompanyType.EKONOMISK_FORENING,
    "8": CompanyType.IDEELL_FORENING,
    "9": CompanyType.HANDELS_KOMMANDITBOLAG,
}

COMPANY_TYPE_DESCRIPTIONS = {
    CompanyType.DODSBO: "Dödsbo (Estate of deceased)",
    CompanyType.OFFENTLIG: "Stat, landsting, kommun, församling (Public body)",
    CompanyType.UTLANDSKT_FORETAG: "Utländskt företag (Foreign company)",
    CompanyType.AKTIEBOLAG: "Aktiebolag (Limited company)",
    CompanyType.ENKELT_BOLAG: "Enkelt bolag (Simple partnership)",
    CompanyType.EKONOMISK_FORENING: "Ekonomisk förening, bostadsrättsförening (Economic association)",
    CompanyType.IDEELL_FORENING: "Ideell förening, stiftelse (Non-profit/Foundation)",
    CompanyType.HANDELS_KOMMANDITBOLAG: "Handelsbolag, kommanditbolag (Partnership)",
    CompanyType.INVALID: "Ogiltig (Invalid)",
}


def company_type_for(serial: str) -> CompanyType:
    """Map the first digit of the serial to a company type."""
    return COMPANY_TYPES.get(serial[:1], CompanyType.INVALID)


def is_organisationsnummer_month(components: RawComponents) -> bool:
    """Check that the month field carries the organisationsnummer offset."""
    try:
        return int(components.month) >= ORGANISATION_MONTH_OFFSET
    except ValueError:
        return False


def format_organisationsnummer(
    orgnr: str, today: date, separator: str = "-"
) -> Optional[str]:
    """
    Format organisationsnummer as NNNNNN-NNNN.

    A 2-digit prefix (e.g. 16NNNNNN-NNNN) is dropped.

    Args:
        orgnr: The organisationsnummer to format
        today: Current date, used to normalize the number
        separator: The separator to use (default: '-')

    Returns:
        Formatted organisationsnummer or None if invalid
    """
    components = resolve_components(orgnr, today)
    if components is None:
        return None
    if not is_luhn_valid(components.luhn_digits):
        return None
    if not is_organisationsnummer_month(components):
        return None
    c = components
    return f"{c.year}{c.month}{c.day}{separator}{c.serial}{c.checksum}"


def generate_organisationsnummer(
    company_digit: str = "5",
    group_number: int = 56,
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a valid organisationsnummer for testing purposes.

    Args:
        company_digit: First serial digit (default: '5' for aktiebolag)
        group_number: Month field (20-99, default: 56)
        rng: Random source, for reproducible numbers

    Returns:
        A valid organisationsnummer in NNNNNNNNNN format
    """
    if not 20 <= group_number <= 99:
        raise ValueError("Group number must be between 20 and 99")
    if len(company_digit) != 1 or company_digit not in "0123456789":
        raise ValueError("Company digit must be a single digit")

    rng = rng or random.Random()

    # Build first 9 digits
    first_nine = (
        f"{rng.randint(0, 99):02d}{group_number:02d}{rng.randint(0, 99):02d}"
        f"{company_digit}{rng.randint(0, 99):02d}"
    )

    return f"{first_nine}{luhn_checksum(first_nine)}"
