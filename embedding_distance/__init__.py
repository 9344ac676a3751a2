"""
Embedding Distance - rank strings by the distance between their embeddings.

This package provides utilities for:
- Fetching embeddings from OpenAI or Cohere
- Computing l2, cosine, dot and manhattan distances
- Ranking every pair of inputs, most similar first
- A command-line interface (embedding-distance)
"""

__version__ = "0.1.0"

# Re-export commonly used items
from embedding_distance.errors import (
    ConfigurationError,
    DegenerateVectorError,
    DimensionMismatchError,
    EmbeddingDistanceError,
    InvalidArgumentError,
    NonFiniteDistanceError,
    ProviderError,
)
from embedding_distance.pipeline import compute_distances
from embedding_distance.similarity import (
    DistanceMetric,
    RankedPair,
    get_distance_function,
    rank_pairs,
)

__all__ = [
    "__version__",
    # Pipeline
    "compute_distances",
    # Similarity
    "DistanceMetric",
    "RankedPair",
    "get_distance_function",
    "rank_pairs",
    # Errors
    "EmbeddingDistanceError",
    "InvalidArgumentError",
    "ConfigurationError",
    "DimensionMismatchError",
    "DegenerateVectorError",
    "NonFiniteDistanceError",
    "ProviderError",
]
