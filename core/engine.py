"""
Greedy clustering of named entries.

group: clusters emerge from the data. Each entry joins the best-scoring cluster
(score >= 0) and narrows its word set to the shared words, or starts a new one.
cluster: entries are sorted into caller-supplied clusters whose word sets never
change; entries that fit none are collected in rejected, keyed by name.

Both are single-pass and order-dependent. Entries are kept most recent first.
"""

import logging
from typing import Any, Callable, Iterable, Sequence

from clustering.assigner import find_best_cluster
from clustering.tokenizer import get_word_set
from clustering.vocabulary import get_word_freq
from core.models import Cluster, ClusterResult, SeedSpec
from extractors.names import name_of

logger = logging.getLogger("name_clusters.core.engine")


def _prepare(ignore: Iterable[str], names: list[str]) -> tuple[frozenset[str], dict[str, float]]:
    # The empty token never counts as vocabulary, so blank names only match each other.
    ignore = frozenset(ignore) | {""}
    return ignore, get_word_freq(names, ignore)


def group(
    k_shared: float,
    k_not_shared: float,
    ignore: Iterable[str],
    entries: Sequence[Any],
    get_name: Callable[[Any], str] = name_of,
) -> list[Cluster]:
    """
    Split entries into clusters of names that share relatively rare words.
    A new cluster is labelled with the name of the entry that started it.

    Note: entries whose names are blank or consist only of ignored words all
    end up in a single cluster with an empty word set.
    """
    names = [get_name(e) for e in entries]
    ignore, freq = _prepare(ignore, names)
    clusters: list[Cluster] = []
    for entry, name in zip(entries, names):
        ws = get_word_set(name, ignore)
        best, _ = find_best_cluster(
            ws,
            [c.word_set for c in clusters],
            freq,
            k_shared=k_shared,
            k_not_shared=k_not_shared,
        )
        if best is not None:
            target = clusters[best]
            target.word_set = target.word_set & ws
            target.entries.insert(0, entry)
        else:
            clusters.append(Cluster(label=name, word_set=ws, entries=[entry]))
            logger.debug("new cluster label=%r words=%s", name, sorted(ws))
    logger.info("group entries=%d clusters=%d", len(names), len(clusters))
    return clusters


def cluster(
    k_shared: float,
    k_not_shared: float,
    ignore: Iterable[str],
    clusters: Iterable[Cluster],
    entries: Sequence[Any],
    get_name: Callable[[Any], str] = name_of,
) -> ClusterResult:
    """
    Assign entries to the given clusters. Cluster word sets are left exactly as
    given; entries that score below 0 against every cluster go to rejected[name].
    The caller's clusters are not modified; the result holds copies.
    """
    names = [get_name(e) for e in entries]
    ignore, freq = _prepare(ignore, names)
    result = ClusterResult(clusters=[c.copy() for c in clusters])
    word_sets = [c.word_set for c in result.clusters]
    n_rejected = 0
    for entry, name in zip(entries, names):
        ws = get_word_set(name, ignore)
        best, _ = find_best_cluster(
            ws,
            word_sets,
            freq,
            k_shared=k_shared,
            k_not_shared=k_not_shared,
        )
        if best is not None:
            result.clusters[best].entries.insert(0, entry)
        else:
            result.rejected.setdefault(name, []).insert(0, entry)
            n_rejected += 1
    logger.info(
        "cluster entries=%d clusters=%d rejected=%d",
        len(names), len(result.clusters), n_rejected,
    )
    return result


def create_init_clusters(
    specs: Iterable[SeedSpec | tuple[str, str]],
    ignore: Iterable[str] = frozenset(),
) -> list[Cluster]:
    """
    Build empty clusters centred on the given seed phrases.

    Warning: once ignored words (and the empty token) are removed, seeds with
    the same label and word set are merged (the first one is kept).
    """
    ignore = frozenset(ignore) | {""}
    out: list[Cluster] = []
    seen: set[tuple[str, frozenset[str]]] = set()
    for spec in specs:
        if not isinstance(spec, SeedSpec):
            spec = SeedSpec(*spec)
        ws = get_word_set(spec.name, ignore)
        key = (spec.label, ws)
        if key in seen:
            continue
        seen.add(key)
        out.append(Cluster(label=spec.label, word_set=ws))
    return out
