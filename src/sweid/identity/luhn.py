"""
Luhn checksum used by all Swedish identity numbers.

The checksum covers the ten digits YYMMDDNNNC; the century of a
12-digit number is never part of it.
"""


def luhn_checksum(digits: str) -> int:
    """
    Calculate the Luhn check digit for a 9-digit body.

    The Luhn algorithm:
    1. Double every second digit, starting with the first
    2. If doubling results in > 9, subtract 9
    3. Sum all digits
    4. Checksum is (10 - (sum % 10)) % 10
    """
    total = 0
    for i, digit in enumerate(digits):
        d = int(digit)
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (10 - (total % 10)) % 10


def is_luhn_valid(number: str) -> bool:
    """
    Check a complete number, check digit included, against the Luhn algorithm.

    Digits are walked from the right. Every digit at an odd position
    (0-indexed) is doubled and folded with mod 9, where 9 stays 9.
    Any non-digit character makes the number invalid.
    """
    total = 0
    for idx, char in enumerate(reversed(number)):
        if char not in "0123456789":
            return False
        digit = int(char)
        if idx % 2 == 1:
            total += 9 if digit == 9 else (digit * 2) % 9
        else:
            total += digit
    return total % 10 == 0
