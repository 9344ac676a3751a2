"""
All-pairs distance ranking.

Enumerates every unordered pair of inputs, computes its distance under the
selected metric and returns the pairs closest-first. Equal distances keep
enumeration order, so identical input always yields an identical ranking.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from embedding_distance.errors import (
    DimensionMismatchError,
    InvalidArgumentError,
    NonFiniteDistanceError,
)
from embedding_distance.similarity.distance import (
    DistanceMetric,
    VectorLike,
    as_vector,
    get_distance_function,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RankedPair:
    """One unordered combination of two inputs and their distance."""

    first: str
    second: str
    distance: float
    first_index: int
    second_index: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def enumerate_pairs(count: int) -> Iterator[Tuple[int, int]]:
    """
    Yield index pairs (i, j) with i < j in lexicographic order.

    (0, 1), (0, 2), ..., (0, count-1), (1, 2), ...
    Fewer than two items yields nothing. Each call returns a fresh iterator.
    """
    for i in range(count):
        for j in range(i + 1, count):
            yield i, j


def pair_count(count: int) -> int:
    """Number of unordered pairs for count items: n * (n - 1) / 2."""
    return count * (count - 1) // 2 if count > 1 else 0


def validate_dimensions(vectors: Sequence[NDArray[np.float64]]) -> int:
    """
    Check that all vectors share one dimension.

    Returns:
        The common dimension (0 if there are no vectors)

    Raises:
        DimensionMismatchError: On the first vector whose length differs from the first
    """
    if not vectors:
        return 0
    expected = vectors[0].shape[0]
    for index, vector in enumerate(vectors[1:], start=1):
        if vector.shape[0] != expected:
            raise DimensionMismatchError(expected=expected, actual=vector.shape[0], index=index)
    return expected


def rank_pairs(
    labels: Sequence[str],
    vectors: Sequence[VectorLike],
    metric: Union[str, DistanceMetric],
) -> List[RankedPair]:
    """
    Rank every pair of labeled vectors by ascending distance.

    Args:
        labels: Input strings, in the order they were embedded
        vectors: One embedding per label, same order
        metric: Distance metric name or DistanceMetric

    Returns:
        All n * (n - 1) / 2 pairs, closest first; ties keep enumeration order

    Raises:
        InvalidArgumentError: Unknown metric, or labels/vectors length mismatch
        DimensionMismatchError: Vectors of differing length
        DegenerateVectorError: Zero vector under cosine
        NonFiniteDistanceError: A distance evaluated to NaN
    """
    distance_fn = get_distance_function(metric)

    if len(labels) != len(vectors):
        raise InvalidArgumentError(
            f"Labels ({len(labels)}) and embeddings ({len(vectors)}) must match"
        )

    arrays = [as_vector(v) for v in vectors]
    dimension = validate_dimensions(arrays)

    pairs: List[RankedPair] = []
    for i, j in enumerate_pairs(len(arrays)):
        distance = distance_fn(arrays[i], arrays[j])
        if math.isnan(distance):
            raise NonFiniteDistanceError(
                f"Distance between inputs {i} and {j} is NaN ({labels[i]!r}, {labels[j]!r})"
            )
        pairs.append(
            RankedPair(
                first=labels[i],
                second=labels[j],
                distance=distance,
                first_index=i,
                second_index=j,
            )
        )

    # list.sort is stable: equal distances stay in enumeration order
    pairs.sort(key=lambda pair: pair.distance)

    logger.debug(f"Ranked {len(pairs)} pairs of {len(arrays)} embeddings (dimension {dimension})")
    return pairs
