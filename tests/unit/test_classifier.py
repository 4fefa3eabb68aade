"""
Unit tests for identity number classification.
"""

import dataclasses
import random
from datetime import date

import pytest

from sweid.identity import (
    CompanyType,
    CoordinationNumber,
    Gender,
    IdentityKind,
    INVALID,
    Invalid,
    OrganizationNumber,
    PersonalNumber,
    classify,
    generate_organisationsnummer,
    mask_identifier,
)


class TestPersonnummer:
    """Tests for personnummer classification."""

    def test_male(self, today, valid_personnummer):
        assert classify(valid_personnummer, today) == PersonalNumber(gender=Gender.MALE)

    def test_female(self, today):
        assert classify("811218-9884", today) == PersonalNumber(gender=Gender.FEMALE)

    def test_without_separator(self, today):
        assert classify("8112189876", today) == PersonalNumber(gender=Gender.MALE)

    def test_whitespace_separator(self, today):
        assert classify("811218 9876", today) == PersonalNumber(gender=Gender.MALE)
        assert classify("811218\u20039876", today) == PersonalNumber(gender=Gender.MALE)

    def test_12_digits(self, today):
        assert classify("198112189876", today) == PersonalNumber(gender=Gender.MALE)
        assert classify("19811218-9876", today) == PersonalNumber(gender=Gender.MALE)

    def test_centenarian(self, today):
        assert classify("121218+9870", today) == PersonalNumber(gender=Gender.MALE)

    def test_kind(self, today, valid_personnummer):
        assert classify(valid_personnummer, today).kind == IdentityKind.PERSONNUMMER


class TestSamordningsnummer:
    """Tests for samordningsnummer classification."""

    def test_day_plus_60(self, today, valid_samordningsnummer):
        """Day 78 is the 18th + 60."""
        result = classify(valid_samordningsnummer, today)
        assert result == CoordinationNumber(gender=Gender.MALE)
        assert result.kind == IdentityKind.SAMORDNINGSNUMMER

    def test_leap_day(self, today):
        """Day 89 in February 2000 is the 29th."""
        assert classify("000289-1232", today) == CoordinationNumber(gender=Gender.MALE)


class TestOrganisationsnummer:
    """Tests for organisationsnummer classification."""

    @pytest.mark.parametrize(
        "orgnr,company_type",
        [
            ("556036-1007", CompanyType.DODSBO),
            ("556036-2005", CompanyType.OFFENTLIG),
            ("556036-3003", CompanyType.UTLANDSKT_FORETAG),
            ("556036-4001", CompanyType.INVALID),
            ("556036-5008", CompanyType.AKTIEBOLAG),
            ("556036-6006", CompanyType.ENKELT_BOLAG),
            ("556036-7004", CompanyType.EKONOMISK_FORENING),
            ("556036-8002", CompanyType.IDEELL_FORENING),
            ("556036-9000", CompanyType.HANDELS_KOMMANDITBOLAG),
            ("556036-0009", CompanyType.INVALID),
        ],
    )
    def test_company_type_from_first_serial_digit(self, today, orgnr, company_type):
        assert classify(orgnr, today) == OrganizationNumber(company_type=company_type)

    def test_leading_zero_serial(self, today):
        """Serial 079 has no company type but is still an organisationsnummer."""
        result = classify("556036-0793", today)
        assert result == OrganizationNumber(company_type=CompanyType.INVALID)
        assert result.kind == IdentityKind.ORGANISATIONSNUMMER

    def test_known_company(self, today, valid_organisationsnummer):
        assert classify(valid_organisationsnummer, today) == OrganizationNumber(
            company_type=CompanyType.EKONOMISK_FORENING
        )

    def test_day_is_not_checked(self, today):
        """Day 99 does not matter once month >= 20."""
        assert classify("552099-1000", today) == OrganizationNumber(
            company_type=CompanyType.DODSBO
        )

    def test_with_prefix(self, today):
        assert classify("165560360793", today) == OrganizationNumber(
            company_type=CompanyType.INVALID
        )

    def test_month_20_or_above_with_valid_checksum(self, today):
        rng = random.Random(2024)
        for group_number in range(20, 100):
            orgnr = generate_organisationsnummer(group_number=group_number, rng=rng)
            assert isinstance(classify(orgnr, today), OrganizationNumber), orgnr


class TestInvalid:
    """Tests for input that is not an identity number."""

    def test_all_zeros(self, today):
        """Checksum passes but month 00 matches no rule."""
        assert classify("000000-0000", today) == INVALID

    def test_wrong_checksum(self, today):
        assert classify("811218-9870", today) == INVALID

    def test_impossible_date(self, today):
        """April has 30 days and month 04 is below 20."""
        assert classify("810431-1231", today) == INVALID

    def test_not_a_leap_year(self, today):
        assert classify("230229-1238", today) == INVALID

    @pytest.mark.parametrize(
        "value",
        ["", "abcdefghij", "8112-189876", "811218--9876", " 811218-9876", "811218-9876\n", "😀"],
    )
    def test_malformed_input(self, today, value):
        """Malformed input is Invalid, never an exception."""
        assert classify(value, today) == INVALID

    def test_kind(self, today):
        result = classify("", today)
        assert isinstance(result, Invalid)
        assert result.kind == IdentityKind.INVALID


class TestCenturyResolution:
    """Tests for the dependency on the current date."""

    def test_leap_day_in_2000(self, today):
        assert classify("000229-1235", today) == PersonalNumber(gender=Gender.MALE)

    def test_plus_moves_leap_day_to_1900(self, today):
        """1900 was not a leap year."""
        assert classify("000229+1235", today) == INVALID

    def test_explicit_century(self, today):
        assert classify("20000229-1235", today) == PersonalNumber(gender=Gender.MALE)
        assert classify("19000229-1235", today) == INVALID

    def test_different_current_date(self):
        """In 2100 a 00 year means 2100, which is not a leap year."""
        assert classify("000229-1235", date(2100, 1, 1)) == INVALID

    @pytest.mark.parametrize(
        "short,long",
        [
            ("8112189876", "198112189876"),
            ("811218-9884", "19811218-9884"),
            ("811278-9873", "19811278-9873"),
            ("121218+9870", "191212189870"),
            ("000229-1235", "20000229-1235"),
        ],
    )
    def test_10_and_12_digit_forms_agree(self, today, short, long):
        assert classify(short, today) == classify(long, today)


class TestClassificationProperties:
    """General properties of classify."""

    def test_deterministic(self, today, valid_personnummer):
        assert classify(valid_personnummer, today) == classify(valid_personnummer, today)

    def test_single_digit_substitution_is_invalid(self, today, valid_personnummer):
        """The checksum catches every single-digit error."""
        for position, char in enumerate(valid_personnummer):
            if not char.isdigit():
                continue
            for replacement in "0123456789":
                if replacement == char:
                    continue
                mutated = (
                    valid_personnummer[:position] + replacement + valid_personnummer[position + 1:]
                )
                assert classify(mutated, today) == INVALID, mutated

    def test_result_is_immutable(self, today, valid_personnummer):
        result = classify(valid_personnummer, today)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.gender = Gender.FEMALE


class TestMaskIdentifier:
    """Tests for log masking."""

    def test_shows_only_last_four(self):
        assert mask_identifier("811218-9876") == "*******9876"
        assert mask_identifier("198112189876") == "********9876"

    def test_short_values_fully_masked(self):
        assert mask_identifier("123") == "***"
        assert mask_identifier("") == ""
