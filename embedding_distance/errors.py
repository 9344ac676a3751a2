"""
Exception hierarchy for embedding_distance.

Every error is fatal for a run: nothing is ranked or printed once one is raised.
The standard-library base classes are kept so callers can also catch the
usual ValueError / ZeroDivisionError.
"""


class EmbeddingDistanceError(Exception):
    """Base class for all embedding_distance errors."""


class InvalidArgumentError(EmbeddingDistanceError, ValueError):
    """Unknown distance metric or provider name, or malformed core input."""


class ConfigurationError(EmbeddingDistanceError, ValueError):
    """Required configuration (e.g. an API key) is missing or invalid."""


class DimensionMismatchError(EmbeddingDistanceError, ValueError):
    """Embeddings within one run have differing lengths."""

    def __init__(self, expected: int, actual: int, index: int):
        self.expected = expected
        self.actual = actual
        self.index = index
        super().__init__(
            f"Embedding {index} has dimension {actual}, expected {expected}"
        )


class DegenerateVectorError(EmbeddingDistanceError, ZeroDivisionError):
    """Zero-magnitude vector where the metric needs a direction (cosine)."""


class NonFiniteDistanceError(EmbeddingDistanceError, ArithmeticError):
    """A distance computation produced NaN."""


class ProviderError(EmbeddingDistanceError):
    """An embedding provider failed; the original exception is chained."""

    def __init__(self, provider: str, message: str):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
