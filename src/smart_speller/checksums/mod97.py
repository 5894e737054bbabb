"""ISO 7064 MOD 97-10 two digit check (as used by IBAN)."""

from __future__ import annotations

from smart_speller.checksums.digits import DigitsLike, as_digits, join_digits

MODULUS = 97


def generate(number: DigitsLike) -> int:
    """Two digit check (2..98) that makes ``number * 100 + check`` congruent to 1."""
    return MODULUS + 1 - join_digits(as_digits(number)) * 100 % MODULUS


def validate(number: DigitsLike) -> bool:
    """True if the last two digits of ``number`` are its MOD 97-10 check."""
    return join_digits(as_digits(number)) % MODULUS == 1


def validate_with_check(number: DigitsLike, check: int) -> bool:
    return (join_digits(as_digits(number)) * 100 + check) % MODULUS == 1
