"""
Parsing of Swedish identity numbers into their components.

Format: [CC]YYMMDD[-+ ]NNNC
- CC: optional century
- YYMMDD: date part (month + 20 for organisationsnummer,
  day + 60 for samordningsnummer)
- Separator: '+' once the holder has turned 100, '-' otherwise
- NNN: serial (birth number)
- C: Luhn check digit

Numbers written without century or separator are normalized against
the current date: the separator is inferred from the century, and the
century from the separator.
"""

import logging
import re
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


# Digits are ASCII only; the separator may be any Unicode whitespace
IDENTITY_NUMBER_PATTERN = re.compile(
    r"([0-9]{2})?([0-9]{2})([0-9]{2})([0-9]{2})([+\-\s]?)([0-9]{3})([0-9])"
)


class Separator(str, Enum):
    """Separators between date part and serial."""

    PLUS = "+"  # Holder is 100 years or older
    MINUS = "-"  # Everyone else


@dataclass(frozen=True)
class RawComponents:
    """Components of an identity number as written."""

    century: Optional[str]
    year: str
    month: str
    day: str
    separator: Optional[str]
    serial: str
    checksum: str

    @property
    def luhn_digits(self) -> str:
        """The ten digits covered by the checksum (century excluded)."""
        return f"{self.year}{self.month}{self.day}{self.serial}{self.checksum}"


def parse_components(value: str) -> Optional[RawComponents]:
    """
    Split an identity number into its components.

    The whole string must match; no surrounding whitespace or other
    characters are accepted. Returns None on mismatch.
    """
    match = IDENTITY_NUMBER_PATTERN.fullmatch(value)
    if match is None:
        return None

    century, year, month, day, separator, serial, checksum = match.groups()
    return RawComponents(
        century=century,
        year=year,
        month=month,
        day=day,
        separator=separator or None,
        serial=serial,
        checksum=checksum,
    )


def resolve_separator(
    separator: Optional[str], century: Optional[str], year: str, today: date
) -> Optional[str]:
    """
    Infer the separator when it is missing or not '+'/'-'.

    Without a century the separator defaults to '-'. With a century,
    '+' is used if the holder turns 100 this year or has already.
    """
    if separator in (Separator.PLUS.value, Separator.MINUS.value):
        return separator

    if not century:
        return Separator.MINUS.value

    try:
        full_year = int(century) * 100 + int(year)
    except ValueError:
        return separator

    if today.year - full_year < 100:
        return Separator.MINUS.value
    return Separator.PLUS.value


def resolve_century(
    century: Optional[str], separator: Optional[str], year: str, today: date
) -> Optional[str]:
    """
    Infer the century when it is missing.

    The year is placed in the 100-year window ending with the current
    year, or the window a century earlier when the separator is '+'.
    """
    if century:
        return century

    base_year = today.year - 100
    if separator == Separator.PLUS.value:
        base_year = today.year - 200

    try:
        short_year = int(year)
    except ValueError:
        return century

    full_year = base_year + 100 - ((base_year - short_year) % 100)
    return str(full_year // 100)


def normalize_components(components: RawComponents, today: date) -> RawComponents:
    """
    Fill in separator and century.

    The separator is resolved first since century resolution depends on it.
    """
    separator = resolve_separator(
        components.separator, components.century, components.year, today
    )
    century = resolve_century(components.century, separator, components.year, today)
    return replace(components, century=century, separator=separator)


def resolve_components(value: str, today: date) -> Optional[RawComponents]:
    """Parse and normalize an identity number, or return None if it does not match."""
    components = parse_components(value)
    if components is None:
        return None
    normalized = normalize_components(components, today)
    logger.debug(
        f"Resolved century {normalized.century} and separator {normalized.separator!r}"
    )
    return normalized
