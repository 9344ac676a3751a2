"""
Distance computation and pair ranking.

Provides the distance metrics and the all-pairs ranker.
"""

from embedding_distance.similarity.distance import (
    DistanceMetric,
    available_metrics,
    compute_distance,
    cosine_distance,
    dot_distance,
    get_distance_function,
    l2_distance,
    manhattan_distance,
)
from embedding_distance.similarity.ranking import (
    RankedPair,
    enumerate_pairs,
    pair_count,
    rank_pairs,
    validate_dimensions,
)

__all__ = [
    "DistanceMetric",
    "available_metrics",
    "compute_distance",
    "cosine_distance",
    "dot_distance",
    "get_distance_function",
    "l2_distance",
    "manhattan_distance",
    "RankedPair",
    "enumerate_pairs",
    "pair_count",
    "rank_pairs",
    "validate_dimensions",
]
