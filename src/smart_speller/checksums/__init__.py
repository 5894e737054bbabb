"""Independent check digit algorithms over decimal digit sequences."""

from . import damm, luhn, mod97, verhoeff
from .digits import as_digits, join_digits, split_digits

ALGORITHMS = {
    "damm": damm,
    "luhn": luhn,
    "mod97": mod97,
    "verhoeff": verhoeff,
}

__all__ = [
    "ALGORITHMS",
    "as_digits",
    "damm",
    "join_digits",
    "luhn",
    "mod97",
    "split_digits",
    "verhoeff",
]
