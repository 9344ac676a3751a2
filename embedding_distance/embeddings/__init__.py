"""Embedding providers and batch embedding creation."""

from embedding_distance.embeddings.cohere_client import CohereClient
from embedding_distance.embeddings.create import embed_strings
from embedding_distance.embeddings.openai_client import (
    create_embedding,
    get_openai_client,
    suppress_http_logging,
)
from embedding_distance.embeddings.providers import (
    PROVIDERS,
    CohereEmbeddingProvider,
    EmbeddingProvider,
    OpenAIEmbeddingProvider,
    get_provider,
    resolve_provider_name,
)

__all__ = [
    "CohereClient",
    "embed_strings",
    "create_embedding",
    "get_openai_client",
    "suppress_http_logging",
    "PROVIDERS",
    "CohereEmbeddingProvider",
    "EmbeddingProvider",
    "OpenAIEmbeddingProvider",
    "get_provider",
    "resolve_provider_name",
]
