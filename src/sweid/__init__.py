"""
sweid - Swedish identity number classification

Classifies and validates Swedish identity numbers:
- Personnummer (personal identity numbers)
- Samordningsnummer (coordination numbers)
- Organisationsnummer (organization numbers)
"""

from sweid.identity import (
    ClassificationResult,
    CompanyType,
    CoordinationNumber,
    Gender,
    IdentityKind,
    INVALID,
    Invalid,
    OrganizationNumber,
    PersonalNumber,
    classify,
)

__version__ = "0.1.0"

__all__ = [
    "ClassificationResult",
    "CompanyType",
    "CoordinationNumber",
    "Gender",
    "IdentityKind",
    "INVALID",
    "Invalid",
    "OrganizationNumber",
    "PersonalNumber",
    "classify",
]
