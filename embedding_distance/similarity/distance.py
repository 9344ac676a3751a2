"""
Distance functions over embedding vectors.

Every metric is oriented so that a smaller value means "more similar",
which lets the ranker sort ascending regardless of the metric chosen.
Computation uses NumPy float64 arrays.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from embedding_distance.errors import (
    DegenerateVectorError,
    DimensionMismatchError,
    InvalidArgumentError,
)

logger = logging.getLogger(__name__)

VectorLike = Union[Sequence[float], NDArray[np.float64]]
DistanceFunction = Callable[[NDArray[np.float64], NDArray[np.float64]], float]


class DistanceMetric(Enum):
    """Supported distance metrics, keyed by their CLI name."""

    COSINE = "cosine"
    L2 = "l2"
    DOT = "dot"
    MANHATTAN = "manhattan"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "DistanceMetric":
        """
        Resolve a metric from its name (case-insensitive).

        Raises:
            InvalidArgumentError: If the name is not a supported metric
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        for metric in cls:
            if metric.value == normalized:
                return metric
        choices = ", ".join(m.value for m in cls)
        raise InvalidArgumentError(f"Unknown distance metric {name!r} (choose from: {choices})")


def as_vector(values: VectorLike) -> NDArray[np.float64]:
    """Convert a list of floats to a 1-D float64 array."""
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"Embedding must be one-dimensional, got shape {arr.shape}")
    return arr


def _check_dimensions(a: NDArray[np.float64], b: NDArray[np.float64]) -> None:
    if a.shape[0] != b.shape[0]:
        raise DimensionMismatchError(expected=a.shape[0], actual=b.shape[0], index=1)


def l2_distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Euclidean distance: sqrt(sum((a[i] - b[i])^2))."""
    _check_dimensions(a, b)
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def cosine_distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """
    Cosine distance: 1 - dot(a, b) / (||a|| * ||b||).

    Raises:
        DegenerateVectorError: If either vector has zero magnitude
    """
    _check_dimensions(a, b)
    norm_a = float(np.linalg.norm(a))
    norm_b = float(np.linalg.norm(b))
    if norm_a == 0.0 or norm_b == 0.0:
        raise DegenerateVectorError("Cosine distance is undefined for a zero-magnitude vector")
    return 1.0 - float(np.dot(a, b)) / (norm_a * norm_b)


def dot_distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Negated dot product, so a larger raw similarity sorts first. May be negative."""
    _check_dimensions(a, b)
    return -float(np.dot(a, b))


def manhattan_distance(a: NDArray[np.float64], b: NDArray[np.float64]) -> float:
    """Manhattan distance: sum(|a[i] - b[i]|)."""
    _check_dimensions(a, b)
    return float(np.sum(np.abs(a - b)))


_DISTANCE_FUNCTIONS: Dict[DistanceMetric, DistanceFunction] = {
    DistanceMetric.COSINE: cosine_distance,
    DistanceMetric.L2: l2_distance,
    DistanceMetric.DOT: dot_distance,
    DistanceMetric.MANHATTAN: manhattan_distance,
}


def available_metrics() -> List[str]:
    """Names of all supported metrics, in CLI order."""
    return [metric.value for metric in DistanceMetric]


def get_distance_function(metric: Union[str, DistanceMetric]) -> DistanceFunction:
    """
    Resolve a metric name to its distance function.

    Called once per run, before any provider request is made.

    Args:
        metric: Metric name ("cosine", "l2", "dot", "manhattan") or DistanceMetric

    Returns:
        Function taking two float64 arrays and returning a float

    Raises:
        InvalidArgumentError: If the metric is unknown
    """
    resolved = DistanceMetric.from_name(metric)
    logger.debug(f"Using distance metric: {resolved}")
    return _DISTANCE_FUNCTIONS[resolved]


def compute_distance(a: VectorLike, b: VectorLike, metric: Union[str, DistanceMetric]) -> float:
    """Convenience wrapper: distance between two vectors under a named metric."""
    return get_distance_function(metric)(as_vector(a), as_vector(b))
