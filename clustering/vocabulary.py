"""Word frequencies over a batch of names: rare words weigh more in the metric."""

import logging
from collections import Counter
from typing import Iterable

from clustering.tokenizer import tokenize

logger = logging.getLogger("name_clusters.clustering.vocabulary")


def get_word_freq(names: Iterable[str], ignore: set[str] | frozenset[str] = frozenset()) -> dict[str, float]:
    """
    Return {word: count / total} over every non-ignored token occurrence in names.
    Words never seen are simply absent. No surviving tokens -> {}.
    """
    counts: Counter[str] = Counter()
    for name in names:
        counts.update(w for w in tokenize(name) if w not in ignore)
    total = sum(counts.values())
    if total == 0:
        logger.debug("vocabulary empty: no surviving tokens")
        return {}
    logger.debug("vocabulary built: %d distinct words, %d occurrences", len(counts), total)
    return {w: n / total for w, n in counts.items()}
