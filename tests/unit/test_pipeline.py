"""
Unit tests for embedding_distance.pipeline module.
"""

import math
from unittest.mock import Mock

import pytest

from embedding_distance import pipeline
from embedding_distance.errors import (
    DegenerateVectorError,
    DimensionMismatchError,
    InvalidArgumentError,
    ProviderError,
)
from embedding_distance.pipeline import compute_distances


class TestComputeDistances:
    """Tests for compute_distances."""

    def test_l2_ranking(self, fake_provider, abc_vectors):
        provider = fake_provider(abc_vectors)

        result = compute_distances(["a", "b", "c"], provider, "test-model", "l2")

        assert [(p.first, p.second) for p in result] == [("a", "c"), ("b", "c"), ("a", "b")]
        assert math.isclose(result[2].distance, math.sqrt(2))

    def test_default_metric_is_cosine(self, fake_provider, abc_vectors):
        provider = fake_provider(abc_vectors)

        result = compute_distances(["a", "b"], provider, "test-model")

        assert math.isclose(result[0].distance, 1.0)

    def test_unknown_metric_makes_no_provider_call(self, fake_provider, abc_vectors):
        """Test an unknown metric fails before any embedding request."""
        provider = fake_provider(abc_vectors)

        with pytest.raises(InvalidArgumentError):
            compute_distances(["a", "b", "c"], provider, "test-model", "euclidean2")

        assert provider.calls == []

    def test_unknown_metric_checked_before_provider_construction(self, monkeypatch):
        get_provider = Mock()
        monkeypatch.setattr(pipeline, "get_provider", get_provider)

        with pytest.raises(InvalidArgumentError):
            compute_distances(["a", "b"], "openai", "test-model", "euclidean2")

        get_provider.assert_not_called()

    def test_unknown_provider_name(self):
        with pytest.raises(InvalidArgumentError, match="voyage"):
            compute_distances(["a", "b"], "voyage", "test-model", "l2")

    def test_provider_resolved_by_name(self, monkeypatch, fake_provider, abc_vectors):
        provider = fake_provider(abc_vectors)
        monkeypatch.setattr(pipeline, "get_provider", Mock(return_value=provider))

        result = compute_distances(["a", "c"], "openai", "test-model", "manhattan")

        pipeline.get_provider.assert_called_once_with("openai")
        assert result[0].distance == 1.0

    @pytest.mark.parametrize("texts", [[], ["lonely"]])
    def test_fewer_than_two_strings(self, fake_provider, texts):
        """Test zero or one string yields no pairs and no error."""
        provider = fake_provider({"lonely": [1.0]})

        assert compute_distances(texts, provider, "test-model", "l2") == []
        assert provider.calls == []

    def test_provider_failure_is_fatal(self, fake_provider, abc_vectors):
        provider = fake_provider(abc_vectors, fail_on="c")

        with pytest.raises(ProviderError):
            compute_distances(["a", "b", "c"], provider, "test-model", "l2")

    def test_dimension_mismatch_is_fatal(self, fake_provider):
        provider = fake_provider({"x": [1.0, 0.0], "y": [1.0, 0.0, 0.0]})

        with pytest.raises(DimensionMismatchError):
            compute_distances(["x", "y"], provider, "test-model", "l2")

    def test_zero_vector_under_cosine(self, fake_provider):
        provider = fake_provider({"x": [1.0, 0.0], "zero": [0.0, 0.0]})

        with pytest.raises(DegenerateVectorError):
            compute_distances(["x", "zero"], provider, "test-model", "cosine")
