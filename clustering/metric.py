"""
Rarity-weighted similarity between two word sets.

Larger when the sets share relatively rare words; smaller when rare words
appear in only one of them:

    score =   sum over w in A & B of 1 / freq(w) ** k_shared
            - sum over w in A ^ B of 1 / freq(w) ** k_not_shared

k ranges from 0 to inf; smaller values assign less weight to rareness.
k_shared is usually larger than k_not_shared so shared rare words dominate.
"""

import math
from typing import Iterable, Mapping


def _weight(wf: float, k: float) -> float:
    """1 / wf ** k as exp(-k * log wf); saturates to inf instead of raising."""
    if wf == 1.0:
        return 1.0
    try:
        return math.exp(-k * math.log(wf))
    except OverflowError:
        return math.inf


def _rarity_sum(words: Iterable[str], freq: Mapping[str, float], k: float) -> float:
    # Sorted so the float sum does not depend on set iteration order.
    # Words missing from freq contribute nothing.
    total = 0.0
    for w in sorted(words):
        wf = freq.get(w)
        if wf is not None:
            total += _weight(wf, k)
    return total


def metric(
    k_shared: float,
    k_not_shared: float,
    freq: Mapping[str, float],
    ws0: frozenset[str],
    ws1: frozenset[str],
) -> float:
    """
    Score ws0 against ws1. Symmetric in the two sets.
    Extreme exponents can give inf (or nan when both sums are inf); a nan
    score never qualifies in find_best_cluster.
    """
    shared = _rarity_sum(ws0 & ws1, freq, k_shared)
    not_shared = _rarity_sum(ws0 ^ ws1, freq, k_not_shared)
    return shared - not_shared
