"""Damm check digit (totally anti-symmetric quasigroup of order 10)."""

from __future__ import annotations

from smart_speller.checksums.digits import DigitsLike, as_digits

QUASIGROUP = (
    (0, 3, 1, 7, 5, 9, 8, 6, 4, 2),
    (7, 0, 9, 2, 1, 5, 4, 8, 6, 3),
    (4, 2, 0, 6, 8, 7, 1, 3, 5, 9),
    (1, 7, 5, 0, 9, 8, 3, 4, 2, 6),
    (6, 1, 2, 3, 0, 4, 5, 9, 7, 8),
    (3, 6, 7, 4, 2, 0, 9, 5, 8, 1),
    (5, 8, 6, 9, 7, 2, 0, 1, 3, 4),
    (8, 9, 4, 5, 3, 6, 2, 0, 1, 7),
    (9, 4, 3, 8, 6, 1, 7, 2, 0, 5),
    (2, 5, 8, 1, 4, 3, 6, 7, 9, 0),
)


def _interim(digits: list[int]) -> int:
    interim = 0
    for digit in digits:
        interim = QUASIGROUP[interim][digit]
    return interim


def generate(number: DigitsLike) -> int:
    return _interim(as_digits(number))


def validate(number: DigitsLike) -> bool:
    return _interim(as_digits(number)) == 0


def validate_with_check(number: DigitsLike, check: int) -> bool:
    return validate([*as_digits(number), check])
