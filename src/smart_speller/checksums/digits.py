"""Digit sequence conversions shared by the checksum functions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BASE = 10

DigitsLike = int | str | Sequence[int]


def split_digits(number: int) -> list[int]:
    """Split a non-negative number into its decimal digits, most significant first."""
    if number < 0:
        raise ValueError(f"Checksums are defined for non-negative numbers, got {number}")
    return [int(digit) for digit in str(number)]


def join_digits(digits: Iterable[int]) -> int:
    """Join decimal digits into a number using Horner's method."""
    number = 0
    for digit in digits:
        number = number * BASE + digit
    return number


def as_digits(value: DigitsLike) -> list[int]:
    """Normalize a number, a digit string or a digit sequence to a list of digits."""
    if isinstance(value, bool):
        raise TypeError("Booleans are not digit sequences")
    if isinstance(value, int):
        return split_digits(value)
    if isinstance(value, str):
        if not value.isdigit():
            raise ValueError(f"Not a digit string: {value!r}")
        return [int(character) for character in value]

    digits = list(value)
    if any(not 0 <= digit < BASE for digit in digits):
        raise ValueError(f"Digits must be between 0 and 9: {digits}")
    return digits
