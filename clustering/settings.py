"""
Default tuning values, read from the environment (api/main.py and run_api.py also load .env).

- CLUSTER_K_SHARED: exponent for shared words (default 2.0; higher = rare shared words count more).
- CLUSTER_K_NOT_SHARED: exponent for unshared words (default 0.4).
- CLUSTER_IGNORE: comma-separated words to ignore, e.g. "the,of,and".

Explicit arguments always win; the engines never read these directly.
"""

import logging
import os

logger = logging.getLogger("name_clusters.clustering.settings")

DEFAULT_K_SHARED = 2.0
DEFAULT_K_NOT_SHARED = 0.4


def _parse_exponent(name: str, default: float) -> float:
    v = os.environ.get(name)
    if v is None or v.strip() == "":
        return default
    try:
        k = float(v.strip())
    except ValueError:
        logger.debug("%s=%r is not a number; using %s", name, v, default)
        return default
    if k < 0:
        logger.debug("%s=%r is negative; using %s", name, v, default)
        return default
    return k


def parse_ignore(s: str | None) -> frozenset[str]:
    """Comma-separated words -> lower-cased set; blanks dropped."""
    if not s or not s.strip():
        return frozenset()
    return frozenset(p.strip().lower() for p in s.split(",") if p.strip())


def default_k_shared() -> float:
    return _parse_exponent("CLUSTER_K_SHARED", DEFAULT_K_SHARED)


def default_k_not_shared() -> float:
    return _parse_exponent("CLUSTER_K_NOT_SHARED", DEFAULT_K_NOT_SHARED)


def default_ignore() -> frozenset[str]:
    return parse_ignore(os.environ.get("CLUSTER_IGNORE"))
