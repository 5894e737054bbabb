"""Optional text pre/post-processing helpers."""

from .normalizer import normalize
from .numerics import cardinal_words, ordinal_suffix, to_words

__all__ = ["cardinal_words", "normalize", "ordinal_suffix", "to_words"]
