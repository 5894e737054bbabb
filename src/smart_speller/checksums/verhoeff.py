"""Verhoeff check digit over the dihedral group D5."""

from __future__ import annotations

from smart_speller.checksums.digits import BASE, DigitsLike, as_digits

MULTIPLICATION = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
    (1, 2, 3, 4, 0, 6, 7, 8, 9, 5),
    (2, 3, 4, 0, 1, 7, 8, 9, 5, 6),
    (3, 4, 0, 1, 2, 8, 9, 5, 6, 7),
    (4, 0, 1, 2, 3, 9, 5, 6, 7, 8),
    (5, 9, 8, 7, 6, 0, 4, 3, 2, 1),
    (6, 5, 9, 8, 7, 1, 0, 4, 3, 2),
    (7, 6, 5, 9, 8, 2, 1, 0, 4, 3),
    (8, 7, 6, 5, 9, 3, 2, 1, 0, 4),
    (9, 8, 7, 6, 5, 4, 3, 2, 1, 0),
)
INVERSE = (0, 4, 3, 2, 1, 5, 6, 7, 8, 9)
PERIOD = 8


def _permutations() -> tuple[tuple[int, ...], ...]:
    """The permutation (1 5 8 9 4 2 7 0)(3 6) applied 0..7 times."""
    table = [tuple(range(BASE)), (1, 5, 7, 6, 2, 8, 3, 0, 9, 4)]
    for _ in range(2, PERIOD):
        previous = table[-1]
        table.append(tuple(previous[table[1][j]] for j in range(BASE)))
    return tuple(table)


PERMUTATION = _permutations()


def _checksum(digits: list[int], offset: int) -> int:
    interim = 0
    for position, digit in enumerate(reversed(digits), start=offset):
        interim = MULTIPLICATION[interim][PERMUTATION[position % PERIOD][digit]]
    return interim


def generate(number: DigitsLike) -> int:
    # Positions start at 1: the check digit will occupy position 0
    return INVERSE[_checksum(as_digits(number), offset=1)]


def validate(number: DigitsLike) -> bool:
    return _checksum(as_digits(number), offset=0) == 0


def validate_with_check(number: DigitsLike, check: int) -> bool:
    return validate([*as_digits(number), check])
