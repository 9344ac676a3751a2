"""
End-to-end run: embed the input strings and rank every pair.

Validation happens before any network traffic: an unknown metric or provider
fails without a single provider request being made.
"""

import logging
from typing import List, Optional, Sequence, Union

from embedding_distance.embeddings.create import embed_strings
from embedding_distance.embeddings.providers import EmbeddingProvider, get_provider
from embedding_distance.similarity.distance import DistanceMetric
from embedding_distance.similarity.ranking import RankedPair, pair_count, rank_pairs

logger = logging.getLogger(__name__)


def compute_distances(
    texts: Sequence[str],
    provider: Union[str, EmbeddingProvider],
    model: str,
    metric: Union[str, DistanceMetric] = DistanceMetric.COSINE,
    max_workers: Optional[int] = None,
    show_progress: bool = False,
) -> List[RankedPair]:
    """
    Embed texts with a provider and rank all pairs by distance.

    Args:
        texts: Input strings; duplicates are embedded independently
        provider: Provider name ("openai", "cohere") or a provider instance
        model: Embedding model name
        metric: Distance metric name or DistanceMetric
        max_workers: Concurrent embedding requests
        show_progress: Show a progress bar while embedding

    Returns:
        Ranked pairs, closest first

    Raises:
        InvalidArgumentError: Unknown metric or provider
        ConfigurationError: Missing provider credentials
        ProviderError: An embedding request failed
        DimensionMismatchError, DegenerateVectorError, NonFiniteDistanceError
    """
    resolved_metric = DistanceMetric.from_name(metric)
    if isinstance(provider, str):
        provider = get_provider(provider)

    texts = list(texts)
    if len(texts) < 2:
        logger.warning(f"Need at least two strings to compare, got {len(texts)}")
        return []

    logger.info(
        f"Comparing {len(texts)} strings ({pair_count(len(texts))} pairs) "
        f"using {resolved_metric} distance",
        extra={"metric": str(resolved_metric), "count": len(texts)},
    )

    embeddings = embed_strings(
        provider,
        model,
        texts,
        max_workers=max_workers,
        show_progress=show_progress,
    )
    return rank_pairs(texts, embeddings, resolved_metric)
