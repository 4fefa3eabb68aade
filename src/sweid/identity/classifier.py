"""
Classification of Swedish identity numbers.

A string is checked, in order, as:
1. Personnummer (valid birth date)
2. Samordningsnummer (valid birth date after subtracting 60 from the day)
3. Organisationsnummer (month field >= 20)

Every candidate must pass the Luhn checksum first. Anything else is
Invalid; classification never raises.
"""

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Optional, Union

from sweid.identity.luhn import is_luhn_valid
from sweid.identity.organisationsnummer import (
    CompanyType,
    company_type_for,
    is_organisationsnummer_month,
)
from sweid.identity.parsing import resolve_components
from sweid.identity.personnummer import (
    Gender,
    gender_from_serial,
    is_personnummer_date,
    is_samordningsnummer_date,
)

logger = logging.getLogger(__name__)


class IdentityKind(str, Enum):
    """Kinds of identity number."""

    PERSONNUMMER = "personnummer"
    SAMORDNINGSNUMMER = "samordningsnummer"
    ORGANISATIONSNUMMER = "organisationsnummer"
    INVALID = "invalid"


@dataclass(frozen=True)
class PersonalNumber:
    """A valid personnummer."""

    kind: ClassVar[IdentityKind] = IdentityKind.PERSONNUMMER

    gender: Optional[Gender]


@dataclass(frozen=True)
class CoordinationNumber:
    """A valid samordningsnummer."""

    kind: ClassVar[IdentityKind] = IdentityKind.SAMORDNINGSNUMMER

    gender: Optional[Gender]


@dataclass(frozen=True)
class OrganizationNumber:
    """A valid organisationsnummer. company_type may itself be INVALID (digit 4)."""

    kind: ClassVar[IdentityKind] = IdentityKind.ORGANISATIONSNUMMER

    company_type: CompanyType


@dataclass(frozen=True)
class Invalid:
    """Not a personnummer, samordningsnummer or organisationsnummer."""

    kind: ClassVar[IdentityKind] = IdentityKind.INVALID


INVALID = Invalid()

ClassificationResult = Union[PersonalNumber, CoordinationNumber, OrganizationNumber, Invalid]


def mask_identifier(value: str) -> str:
    """Show only the last four characters of an identifier for logging."""
    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def classify(value: str, today: date) -> ClassificationResult:
    """
    Classify a string as a Swedish identity number.

    Args:
        value: The string to classify, e.g. '811218-9876' or '198112189876'
        today: Current date, used to resolve a missing century or separator

    Returns:
        PersonalNumber, CoordinationNumber, OrganizationNumber or INVALID
    """
    components = resolve_components(value, today)
    if components is None:
        logger.debug(f"Rejected {mask_identifier(value)}: format mismatch")
        return INVALID

    if not is_luhn_valid(components.luhn_digits):
        logger.debug(f"Rejected {mask_identifier(value)}: checksum mismatch")
        return INVALID

    if is_personnummer_date(components):
        return PersonalNumber(gender=gender_from_serial(components.serial))

    if is_samordningsnummer_date(components):
        return CoordinationNumber(gender=gender_from_serial(components.serial))

    if is_organisationsnummer_month(components):
        return OrganizationNumber(company_type=company_type_for(components.serial))

    logger.debug(f"Rejected {mask_identifier(value)}: no valid date or organisation month")
    return INVALID
