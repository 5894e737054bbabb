"""Luhn (mod 10) check digit."""

from __future__ import annotations

from smart_speller.checksums.digits import BASE, DigitsLike, as_digits


def _weighted_sum(digits: list[int], first_multiplier: int) -> int:
    total = 0
    multiplier = first_multiplier
    for digit in reversed(digits):
        product = multiplier * digit
        total += product // BASE + product % BASE
        multiplier = 3 - multiplier  # alternate 1 and 2
    return total


def generate(number: DigitsLike) -> int:
    """Check digit to append to ``number``."""
    return _weighted_sum(as_digits(number), first_multiplier=2) * (BASE - 1) % BASE


def validate(number: DigitsLike) -> bool:
    """True if ``number`` ends with a correct Luhn check digit."""
    return _weighted_sum(as_digits(number), first_multiplier=1) % BASE == 0


def validate_with_check(number: DigitsLike, check: int) -> bool:
    return validate([*as_digits(number), check])
