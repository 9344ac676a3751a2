"""
Unit tests for embedding_distance.embeddings providers and clients.
"""

from unittest.mock import Mock

import pytest
import requests
from openai import OpenAIError

from embedding_distance.embeddings.cohere_client import CohereClient
from embedding_distance.embeddings.providers import (
    CohereEmbeddingProvider,
    OpenAIEmbeddingProvider,
    get_provider,
    resolve_provider_name,
)
from embedding_distance.errors import ConfigurationError, InvalidArgumentError, ProviderError


def _openai_response(vector):
    response = Mock()
    data = Mock()
    data.embedding = vector
    response.data = [data]
    return response


def _http_response(status_code=200, payload=None):
    response = Mock()
    response.status_code = status_code
    response.text = "" if payload is None else str(payload)
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Client Error"
        )
    else:
        response.raise_for_status.return_value = None
    return response


class TestOpenAIEmbeddingProvider:
    """Tests for OpenAIEmbeddingProvider."""

    @pytest.fixture
    def mock_client(self):
        """Create a mock OpenAI client."""
        client = Mock()
        client.embeddings.create.return_value = _openai_response([0.1, 0.2, 0.3])
        return client

    def test_fetch_embedding(self, mock_client):
        provider = OpenAIEmbeddingProvider(client=mock_client)

        assert provider.fetch_embedding("text-embedding-3-small", "hello") == [0.1, 0.2, 0.3]
        mock_client.embeddings.create.assert_called_once_with(
            model="text-embedding-3-small", input="hello"
        )

    def test_api_error_wrapped(self, mock_client):
        """Test non-transient OpenAI errors become ProviderError."""
        mock_client.embeddings.create.side_effect = OpenAIError("invalid model")
        provider = OpenAIEmbeddingProvider(client=mock_client)

        with pytest.raises(ProviderError, match="invalid model") as exc_info:
            provider.fetch_embedding("nope", "hello")
        assert isinstance(exc_info.value.__cause__, OpenAIError)
        assert mock_client.embeddings.create.call_count == 1

    def test_empty_embedding_rejected(self, mock_client):
        mock_client.embeddings.create.return_value = _openai_response([])
        provider = OpenAIEmbeddingProvider(client=mock_client)

        with pytest.raises(ProviderError, match="empty embedding"):
            provider.fetch_embedding("m", "hello")

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            OpenAIEmbeddingProvider()


class TestCohereClient:
    """Tests for CohereClient."""

    def test_request_payload(self):
        session = Mock()
        session.post.return_value = _http_response(200, {"embeddings": [[0.5, -0.5]]})
        client = CohereClient(
            api_key="test-key", base_url="https://cohere.test/", session=session, timeout=5
        )

        assert client.create_embedding("good morning!", "embed-english-v3.0") == [0.5, -0.5]

        session.post.assert_called_once_with(
            "https://cohere.test/v1/embed",
            json={
                "texts": ["good morning!"],
                "model": "embed-english-v3.0",
                "input_type": "search_document",
            },
            headers={
                "Authorization": "Bearer test-key",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=5,
        )

    def test_typed_embeddings_response(self):
        session = Mock()
        session.post.return_value = _http_response(200, {"embeddings": {"float": [[1.0, 2.0]]}})
        client = CohereClient(api_key="k", base_url="https://cohere.test", session=session)

        assert client.create_embedding("x", "m") == [1.0, 2.0]

    def test_retries_server_error(self):
        """Test a 503 is retried and the following success returned."""
        session = Mock()
        session.post.side_effect = [
            _http_response(503, {"message": "unavailable"}),
            _http_response(200, {"embeddings": [[0.25]]}),
        ]
        client = CohereClient(api_key="k", base_url="https://cohere.test", session=session)

        assert client.create_embedding("x", "m") == [0.25]
        assert session.post.call_count == 2

    def test_legacy_api_key_variable(self, monkeypatch):
        monkeypatch.delenv("COHERE_API_KEY", raising=False)
        monkeypatch.setenv("COHERE_API_HERE", "legacy-key")
        assert CohereClient(session=Mock()).api_key == "legacy-key"


class TestCohereEmbeddingProvider:
    """Tests for CohereEmbeddingProvider."""

    def test_fetch_embedding(self):
        client = Mock()
        client.create_embedding.return_value = [1, 2, 3]
        provider = CohereEmbeddingProvider(client=client)

        assert provider.fetch_embedding("embed-english-v3.0", "muffins") == [1.0, 2.0, 3.0]
        client.create_embedding.assert_called_once_with("muffins", "embed-english-v3.0")

    def test_client_error_wrapped(self):
        """Test a 400 from Cohere becomes ProviderError."""
        session = Mock()
        session.post.return_value = _http_response(400, {"message": "invalid model"})
        client = CohereClient(api_key="k", base_url="https://cohere.test", session=session)
        provider = CohereEmbeddingProvider(client=client)

        with pytest.raises(ProviderError) as exc_info:
            provider.fetch_embedding("bad-model", "x")
        assert isinstance(exc_info.value.__cause__, requests.exceptions.HTTPError)
        assert exc_info.value.provider == "cohere"

    def test_missing_embeddings_wrapped(self):
        session = Mock()
        session.post.return_value = _http_response(200, {"embeddings": []})
        provider = CohereEmbeddingProvider(
            client=CohereClient(api_key="k", base_url="https://cohere.test", session=session)
        )

        with pytest.raises(ProviderError, match="no embeddings"):
            provider.fetch_embedding("m", "x")

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("COHERE_API_KEY", raising=False)
        monkeypatch.delenv("COHERE_API_HERE", raising=False)
        with pytest.raises(ConfigurationError, match="COHERE_API_KEY"):
            CohereEmbeddingProvider()


class TestGetProvider:
    """Tests for provider resolution."""

    def test_resolve_names(self):
        assert resolve_provider_name("openai") == "openai"
        assert resolve_provider_name(" Cohere ") == "cohere"

    def test_unknown_provider(self):
        with pytest.raises(InvalidArgumentError, match="voyage"):
            get_provider("voyage")

    def test_builds_provider_with_client(self):
        client = Mock()
        provider = get_provider("OpenAI", client=client)
        assert isinstance(provider, OpenAIEmbeddingProvider)
        assert provider.client is client

    def test_builds_cohere(self):
        provider = get_provider("cohere", client=Mock())
        assert isinstance(provider, CohereEmbeddingProvider)
