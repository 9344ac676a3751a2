"""
Pytest configuration and shared fixtures for embedding_distance tests.
"""

import os
import threading
from typing import Dict, List

import pytest

from embedding_distance.embeddings.providers import EmbeddingProvider
from embedding_distance.errors import ProviderError

# Keep tests independent of any developer .env settings
for _var in ("EMBEDDING_MAX_WORKERS", "EMBEDDING_REQUEST_TIMEOUT", "COHERE_BASE_URL"):
    os.environ.pop(_var, None)


class FakeProvider(EmbeddingProvider):
    """In-memory provider returning fixed vectors per text."""

    name = "fake"

    def __init__(self, vectors: Dict[str, List[float]], fail_on: str = None):
        self.vectors = vectors
        self.fail_on = fail_on
        self.calls: List[str] = []
        self._lock = threading.Lock()

    def fetch_embedding(self, model: str, text: str) -> List[float]:
        with self._lock:
            self.calls.append(text)
        if text == self.fail_on:
            raise ProviderError(self.name, f"cannot embed {text!r}")
        return list(self.vectors[text])


@pytest.fixture
def fake_provider():
    """Factory for FakeProvider instances."""
    return FakeProvider


@pytest.fixture
def abc_vectors():
    """Three 2-d vectors: a=[1,0], b=[0,1], c=[1,1]."""
    return {"a": [1.0, 0.0], "b": [0.0, 1.0], "c": [1.0, 1.0]}
