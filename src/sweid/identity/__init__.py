"""Swedish identity numbers: personnummer, samordningsnummer and organisationsnummer."""

from sweid.identity.classifier import (
    ClassificationResult,
    CoordinationNumber,
    IdentityKind,
    INVALID,
    Invalid,
    OrganizationNumber,
    PersonalNumber,
    classify,
    mask_identifier,
)
from sweid.identity.luhn import is_luhn_valid, luhn_checksum
from sweid.identity.organisationsnummer import (
    COMPANY_TYPES,
    CompanyType,
    company_type_for,
    format_organisationsnummer,
    generate_organisationsnummer,
)
from sweid.identity.parsing import (
    RawComponents,
    Separator,
    normalize_components,
    parse_components,
    resolve_components,
)
from sweid.identity.personnummer import (
    Gender,
    birth_date,
    format_personnummer,
    gender_from_serial,
    generate_personnummer,
)

__all__ = [
    # Classification
    "ClassificationResult",
    "CoordinationNumber",
    "IdentityKind",
    "INVALID",
    "Invalid",
    "OrganizationNumber",
    "PersonalNumber",
    "classify",
    "mask_identifier",
    # Checksum
    "is_luhn_valid",
    "luhn_checksum",
    # Parsing
    "RawComponents",
    "Separator",
    "normalize_components",
    "parse_components",
    "resolve_components",
    # Personnummer
    "Gender",
    "birth_date",
    "format_personnummer",
    "gender_from_serial",
    "generate_personnummer",
    # Organisationsnummer
    "COMPANY_TYPES",
    "CompanyType",
    "company_type_for",
    "format_organisationsnummer",
    "generate_organisationsnummer",
]
