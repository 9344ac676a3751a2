"""
Embedding provider abstraction.

Each provider exposes the same capability, fetch_embedding(model, text),
so the rest of the package never branches on the provider name.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

import requests
from openai import OpenAI, OpenAIError

from embedding_distance.constants import SUPPORTED_PROVIDERS
from embedding_distance.embeddings.cohere_client import CohereClient
from embedding_distance.embeddings.openai_client import create_embedding, get_openai_client
from embedding_distance.errors import InvalidArgumentError, ProviderError
from embedding_distance.retry import TransientHTTPError

logger = logging.getLogger(__name__)


class EmbeddingProvider(ABC):
    """Contract every embedding backend must fulfil."""

    name: str = ""

    @abstractmethod
    def fetch_embedding(self, model: str, text: str) -> List[float]:
        """
        Embed one text with the given model.

        Raises:
            ProviderError: On any failure; the cause is chained
        """

    @staticmethod
    def _validate(provider: str, embedding) -> List[float]:
        if not embedding:
            raise ProviderError(provider, "empty embedding returned")
        try:
            return [float(x) for x in embedding]
        except (TypeError, ValueError) as e:
            raise ProviderError(provider, f"malformed embedding: {e}") from e


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Embeddings from the OpenAI embeddings endpoint."""

    name = "openai"

    def __init__(self, client: Optional[OpenAI] = None):
        self.client = client or get_openai_client()

    def fetch_embedding(self, model: str, text: str) -> List[float]:
        try:
            embedding = create_embedding(self.client, text, model)
        except (OpenAIError, ConnectionError, TimeoutError) as e:
            raise ProviderError(self.name, str(e)) from e
        return self._validate(self.name, embedding)


class CohereEmbeddingProvider(EmbeddingProvider):
    """Embeddings from the Cohere embed endpoint."""

    name = "cohere"

    def __init__(self, client: Optional[CohereClient] = None):
        self.client = client or CohereClient()

    def fetch_embedding(self, model: str, text: str) -> List[float]:
        try:
            embedding = self.client.create_embedding(text, model)
        except (requests.exceptions.RequestException, TransientHTTPError, ValueError) as e:
            raise ProviderError(self.name, str(e)) from e
        return self._validate(self.name, embedding)


PROVIDERS: Dict[str, Type[EmbeddingProvider]] = {
    OpenAIEmbeddingProvider.name: OpenAIEmbeddingProvider,
    CohereEmbeddingProvider.name: CohereEmbeddingProvider,
}


def resolve_provider_name(name: str) -> str:
    """
    Normalize and validate a provider name.

    Raises:
        InvalidArgumentError: If the provider is not supported
    """
    normalized = str(name).strip().lower()
    if normalized not in PROVIDERS:
        raise InvalidArgumentError(
            f"Unknown provider {name!r} (choose from: {', '.join(SUPPORTED_PROVIDERS)})"
        )
    return normalized


def get_provider(name: str, **kwargs) -> EmbeddingProvider:
    """
    Create the provider registered under name.

    Args:
        name: "openai" or "cohere" (case-insensitive)
        **kwargs: Passed to the provider constructor (e.g. client=...)

    Raises:
        InvalidArgumentError: Unknown provider
        ConfigurationError: Provider credentials are missing
    """
    provider_cls = PROVIDERS[resolve_provider_name(name)]
    logger.debug(f"Using embedding provider: {provider_cls.name}")
    return provider_cls(**kwargs)
