"""Clustering primitives: tokens + word frequencies + rarity metric → best matching cluster."""

from clustering.tokenizer import tokenize, get_word_set
from clustering.vocabulary import get_word_freq
from clustering.metric import metric
from clustering.assigner import find_best_cluster

__all__ = [
    "tokenize",
    "get_word_set",
    "get_word_freq",
    "metric",
    "find_best_cluster",
]
