"""
Damerau-Levenshtein edit distance (optimal string alignment variant).

The lattice is walked one slice at a time over the longer string, keeping
three rolling rows sized by the shorter string: the current slice, the
previous slice and the slice before that. The third row is what makes
adjacent transpositions cost a single edit.
"""

from __future__ import annotations


def distance(source: str, target: str) -> int:
    """Return the minimum number of insertions, deletions, substitutions and
    adjacent transpositions turning ``source`` into ``target``."""
    # Rows are sized by the shorter string
    if len(source) > len(target):
        source, target = target, source

    if not source:
        return len(target)
    if len(source) == 1:
        # One match plus deletes, or one substitution plus deletes
        return len(target) - 1 if source in target else len(target)

    width = len(source) + 1

    antepenultimate = [0] * width
    penultimate = list(range(width))  # first slice is just inserts
    ultimate = [0] * width

    # Second slice: no transposition possible yet
    ci = target[0]
    ultimate[0] = 1
    for j in range(1, width):
        ultimate[j] = min(
            penultimate[j - 1] + (ci != source[j - 1]),
            penultimate[j] + 1,
            ultimate[j - 1] + 1,
        )

    first = source[0]
    for i in range(2, len(target) + 1):
        previous_ci, ci = ci, target[i - 1]
        antepenultimate, penultimate, ultimate = penultimate, ultimate, antepenultimate

        ultimate[0] = i
        ultimate[1] = min(
            penultimate[0] + (ci != first),
            penultimate[1] + 1,
            ultimate[0] + 1,
        )

        cj = first
        for j in range(2, width):
            previous_cj, cj = cj, source[j - 1]
            cost = min(
                penultimate[j - 1] + (ci != cj),
                penultimate[j] + 1,
                ultimate[j - 1] + 1,
            )
            if ci == previous_cj and cj == previous_ci:
                cost = min(cost, antepenultimate[j - 2] + 1)
            ultimate[j] = cost

    return ultimate[-1]


def trimmed_distance(source: str, target: str) -> int:
    """Edit distance after stripping the common prefix and suffix.

    Shared affixes never change the Damerau-Levenshtein distance, so removing
    them first only shrinks the lattice.
    """
    limit = min(len(source), len(target))
    prefix = 0
    while prefix < limit and source[prefix] == target[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < limit - prefix
        and source[len(source) - suffix - 1] == target[len(target) - suffix - 1]
    ):
        suffix += 1

    if prefix or suffix:
        return distance(
            source[prefix : len(source) - suffix],
            target[prefix : len(target) - suffix],
        )
    return distance(source, target)
