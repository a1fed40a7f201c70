"""Cluster models and the two greedy clustering engines."""

from core.models import Cluster, ClusterResult, SeedSpec
from core.engine import group, cluster, create_init_clusters

__all__ = [
    "Cluster",
    "ClusterResult",
    "SeedSpec",
    "group",
    "cluster",
    "create_init_clusters",
]
