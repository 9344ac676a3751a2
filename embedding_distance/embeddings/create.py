"""
Concurrent embedding creation for a batch of input strings.

Requests are fanned out over a thread pool and collected back in input
order. Duplicate strings are embedded independently, once per occurrence.
The first failure aborts the batch: no partial result is returned.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from tqdm import tqdm

from embedding_distance.config import get_max_workers
from embedding_distance.embeddings.providers import EmbeddingProvider

logger = logging.getLogger(__name__)


def embed_strings(
    provider: EmbeddingProvider,
    model: str,
    texts: Sequence[str],
    max_workers: Optional[int] = None,
    show_progress: bool = False,
) -> List[List[float]]:
    """
    Fetch one embedding per text, preserving input order.

    Args:
        provider: Embedding provider
        model: Embedding model name
        texts: Input strings (may contain duplicates)
        max_workers: Concurrent requests (default from EMBEDDING_MAX_WORKERS)
        show_progress: Show a tqdm progress bar on stderr

    Returns:
        List of embeddings, embeddings[i] belongs to texts[i]

    Raises:
        ProviderError: If any request fails
    """
    if not texts:
        return []

    workers = min(max_workers or get_max_workers(), len(texts))
    logger.info(
        f"Fetching {len(texts)} embeddings from {provider.name} ({model}) "
        f"with {workers} workers",
        extra={"provider": provider.name, "model": model, "count": len(texts)},
    )

    start = time.time()
    embeddings: List[Optional[List[float]]] = [None] * len(texts)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(provider.fetch_embedding, model, text) for text in texts]
        with tqdm(
            total=len(futures), desc="Embedding", unit="text", disable=not show_progress
        ) as pbar:
            try:
                for index, future in enumerate(futures):
                    embeddings[index] = future.result()
                    pbar.update(1)
            except Exception:
                for pending in futures:
                    pending.cancel()
                raise

    duration_ms = int((time.time() - start) * 1000)
    logger.info(
        f"Fetched {len(texts)} embeddings in {duration_ms} ms",
        extra={"count": len(texts), "duration_ms": duration_ms},
    )
    return embeddings
