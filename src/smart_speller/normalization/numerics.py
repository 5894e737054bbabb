"""
Spell out decimal, cardinal, ordinal and dollar amounts as words.

Only whole tokens are rewritten: ``$3.50`` becomes "three dollars and fifty
cents", ``21st`` becomes "twenty first" and ``1984`` is read digit by digit
("one nine eight four"). Tokens that are not numbers pass through unchanged.
"""

from __future__ import annotations

import re

HAS_DIGIT = re.compile(r"\d")
IS_DECIMAL = re.compile(r"^(\$)?(-?\d+)\.(\d+)$")
IS_CARDINAL = re.compile(r"^(\$)?(-?\d+)$")
IS_ORDINAL = re.compile(r"^(-?\d+(?:st|nd|rd|th))$")

BILLION = 1_000_000_000
PRETEENS = frozenset({11, 12, 13})

CARDINALS: dict[int, str] = {
    0: "zero", 1: "one", 2: "two", 3: "three", 4: "four", 5: "five", 6: "six", 7: "seven",
    8: "eight", 9: "nine", 10: "ten", 11: "eleven", 12: "twelve", 13: "thirteen",
    14: "fourteen", 15: "fifteen", 16: "sixteen", 17: "seventeen", 18: "eighteen",
    19: "nineteen", 20: "twenty", 30: "thirty", 40: "forty", 50: "fifty", 60: "sixty",
    70: "seventy", 80: "eighty", 90: "ninety", 100: "hundred", 1_000: "thousand",
    1_000_000: "million",
}  # fmt: skip

ORDINALS: dict[str, str] = {
    "0th": "zeroth", "1st": "first", "2nd": "second", "3rd": "third", "4th": "fourth",
    "5th": "fifth", "6th": "sixth", "7th": "seventh", "8th": "eighth", "9th": "ninth",
    "10th": "tenth", "11th": "eleventh", "12th": "twelfth", "13th": "thirteenth",
    "14th": "fourteenth", "15th": "fifteenth", "16th": "sixteenth", "17th": "seventeenth",
    "18th": "eighteenth", "19th": "nineteenth", "20th": "twentieth", "30th": "thirtieth",
    "40th": "fortieth", "50th": "fiftieth", "60th": "sixtieth", "70th": "seventieth",
    "80th": "eightieth", "90th": "ninetieth", "100th": "hundredth", "1000th": "thousandth",
    "1000000th": "millionth",
}  # fmt: skip

_SCALES = (1_000_000, 1_000, 100)


def _to_words(number: int, words: list[str]) -> None:
    if number < 0:
        words.append("negative")
        _to_words(-number, words)
    elif number <= 20:
        words.append(CARDINALS[number])
    elif number < 100:
        words.append(CARDINALS[number // 10 * 10])
        if number % 10:
            _to_words(number % 10, words)
    elif number < BILLION:
        for scale in _SCALES:
            if number >= scale:
                _to_words(number // scale, words)
                words.append(CARDINALS[scale])
                if number % scale:
                    _to_words(number % scale, words)
                return
    else:
        words.append(str(number))


def cardinal_words(number: int) -> str:
    """Spell out ``number`` in words; values of a billion or more stay numeric."""
    words: list[str] = []
    _to_words(number, words)
    return " ".join(words)


def _to_digits(number: int, words: list[str]) -> None:
    if number < 0:
        words.append("negative")
        number = -number
    words.extend(CARDINALS[int(digit)] for digit in str(number))


def ordinal_suffix(number: int) -> str:
    """English ordinal suffix: st, nd, rd or th."""
    number = abs(number)
    if number % 100 in PRETEENS:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def _decimal(money: bool, whole: int, fraction: int, words: list[str]) -> None:
    _to_words(whole, words)
    if money:
        words.extend(("dollars", "and"))
    else:
        words.append("point")
    _to_words(fraction, words)
    if money:
        words.append("cents")


def _cardinal(money: bool, number: int, words: list[str]) -> None:
    if number in CARDINALS:
        words.append(CARDINALS[number])
    elif number < 1_000 or number % 1_000 == 0:
        _to_words(number, words)
    else:
        _to_digits(number, words)
    if money:
        words.append("dollars")


def _ordinal(ordinal: str, words: list[str]) -> None:
    if ordinal in ORDINALS:
        words.append(ORDINALS[ordinal])
        return

    if ordinal.startswith("-"):
        words.append("negative")
        _ordinal(ordinal[1:], words)
        return

    number = int(ordinal[:-2])
    if number >= BILLION:
        words.append(ordinal)
        return

    remainder = number % 100
    if remainder <= 20 or remainder % 10 == 0:
        head = number // 100 * 100
    else:
        remainder = number % 10
        head = number // 10 * 10
    if head > 0:
        _to_words(head, words)
    _ordinal(f"{remainder}{ordinal_suffix(remainder)}", words)


def to_words(text: str) -> str:
    """Rewrite every numeric token of ``text`` as words, keeping other tokens."""
    words: list[str] = []
    for token in text.split():
        if not HAS_DIGIT.search(token):
            words.append(token)
        elif match := IS_DECIMAL.match(token):
            _decimal(match.group(1) is not None, int(match.group(2)), int(match.group(3)), words)
        elif match := IS_CARDINAL.match(token):
            _cardinal(match.group(1) is not None, int(match.group(2)), words)
        elif match := IS_ORDINAL.match(token):
            _ordinal(match.group(1), words)
        else:
            words.append(token)
    return " ".join(words)
