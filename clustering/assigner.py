"""
Pick the best existing cluster for a word set, or none.

A candidate qualifies when its score is >= 0. Among qualifying candidates the
highest score wins; on equal scores the later candidate in scan order wins.
"""

import logging
from typing import Mapping, Sequence

from clustering.metric import metric

logger = logging.getLogger("name_clusters.clustering.assigner")

MIN_SCORE = 0.0


def find_best_cluster(
    word_set: frozenset[str],
    candidate_word_sets: Sequence[frozenset[str]],
    freq: Mapping[str, float],
    *,
    k_shared: float,
    k_not_shared: float,
) -> tuple[int | None, float]:
    """
    Compare word_set to each candidate. Return (best_index, score) or (None, 0.0) when
    there are no candidates or every score is negative.
    """
    best_index: int | None = None
    best_score = 0.0
    for i, candidate in enumerate(candidate_word_sets):
        score = metric(k_shared, k_not_shared, freq, candidate, word_set)
        if best_index is None:
            if score >= MIN_SCORE:
                best_index, best_score = i, score
        elif best_score <= score:
            best_index, best_score = i, score
    if best_index is None and candidate_word_sets:
        logger.debug("no cluster qualifies: %d candidates all scored < %s", len(candidate_word_sets), MIN_SCORE)
    return best_index, best_score
