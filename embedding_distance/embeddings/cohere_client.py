"""
Cohere embed API client over plain HTTP.

Reference: https://docs.cohere.com/reference/embed
Documents are embedded with input_type "search_document".
"""

import logging
from typing import List, Optional

import requests

from embedding_distance.config import (
    get_cohere_api_key,
    get_cohere_base_url,
    get_request_timeout,
)
from embedding_distance.constants import COHERE_INPUT_TYPE
from embedding_distance.retry import TransientHTTPError, retry_http

logger = logging.getLogger(__name__)

EMBED_PATH = "/v1/embed"


class CohereClient:
    """Minimal client for the Cohere /v1/embed endpoint."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.api_key = api_key or get_cohere_api_key()
        self.base_url = (base_url or get_cohere_base_url()).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout or get_request_timeout()

    @property
    def embed_url(self) -> str:
        return f"{self.base_url}{EMBED_PATH}"

    def create_embedding(self, text: str, model: str) -> List[float]:
        """
        Embed a single text.

        Raises:
            requests.exceptions.RequestException: On HTTP or connection failure
            TransientHTTPError: When 429/5xx persists after retries
            ValueError: If the response has no embedding
        """
        payload = {
            "texts": [text],
            "model": model,
            "input_type": COHERE_INPUT_TYPE,
        }
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        @retry_http
        def _call_api():
            response = self.session.post(
                self.embed_url, json=payload, headers=headers, timeout=self.timeout
            )
            if response.status_code == 429 or response.status_code >= 500:
                raise TransientHTTPError(response.status_code, response.text[:200])
            response.raise_for_status()
            return response.json()

        data = _call_api()
        embeddings = data.get("embeddings") if isinstance(data, dict) else None
        # v1 returns a list of float lists; typed requests return {"float": [...]}
        if isinstance(embeddings, dict):
            embeddings = embeddings.get("float")
        if not embeddings:
            raise ValueError("Cohere response contained no embeddings")
        return embeddings[0]
