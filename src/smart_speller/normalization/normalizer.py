"""
Collapse stuttered words in transcribed text.

Adjacent duplicate unigrams ("agent agent") and adjacent duplicate bigrams
("customer service customer service") are reduced to one occurrence. Cardinal
number words are never collapsed since "two two" is a legitimate reading of
"22".
"""

from __future__ import annotations

CARDINAL_WORDS = frozenset(
    {
        "oh", "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
        "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen", "seventeen",
        "eighteen", "nineteen", "twenty", "thirty", "forty", "fifty", "sixty", "seventy",
        "eighty", "ninety", "hundred", "thousand", "million", "billion", "trillion",
    }
)  # fmt: skip


def normalize(text: str) -> str:
    """Lowercase ``text`` and drop repeated adjacent non-numeric unigrams and bigrams."""
    split = text.lower().split()
    if not split:
        return ""

    tokens = [split[0]]
    for token in split[1:]:
        if token in CARDINAL_WORDS:
            tokens.append(token)
            continue

        if (
            len(tokens) > 2
            and tokens[-1] not in CARDINAL_WORDS
            and token == tokens[-2]
            and tokens[-1] == tokens[-3]
        ):
            # "a b a" + "b": the second bigram is a repeat, so drop its head too
            tokens.pop()
        elif token != tokens[-1]:
            tokens.append(token)

    return " ".join(tokens)
