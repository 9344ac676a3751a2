"""
Shared OpenAI client setup and embedding creation.

This module provides:
- OpenAI client initialization from the configured API key
- create_embedding with retry on transient API errors
- HTTP logging suppression
"""

import logging
from typing import List, Optional

from openai import OpenAI

from embedding_distance.config import get_openai_api_key, get_request_timeout
from embedding_distance.retry import retry_openai

logger = logging.getLogger(__name__)


def get_openai_client(api_key: Optional[str] = None) -> OpenAI:
    """
    Get OpenAI client instance.

    Args:
        api_key: Explicit key; read from OPENAI_API_KEY when omitted

    Raises:
        ConfigurationError: If no key is configured
    """
    return OpenAI(api_key=api_key or get_openai_api_key(), timeout=get_request_timeout())


def create_embedding(client: OpenAI, text: str, model: str) -> List[float]:
    """
    Create an embedding for a single text using OpenAI.

    Transient failures (rate limits, timeouts, connection errors) are retried;
    anything else propagates to the caller.

    Args:
        client: OpenAI client instance
        text: Text to embed
        model: Embedding model name

    Returns:
        Embedding vector
    """

    @retry_openai
    def _call_api():
        response = client.embeddings.create(model=model, input=text)
        return response.data[0].embedding

    return _call_api()


def suppress_http_logging():
    """Suppress verbose HTTP logging from OpenAI, requests, httpx, and httpcore."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
