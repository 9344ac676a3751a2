"""
Configuration management for embedding_distance.

Loads environment variables and provides configuration defaults.
"""

import os

from dotenv import load_dotenv

from embedding_distance.constants import (
    COHERE_BASE_URL,
    DEFAULT_MAX_WORKERS,
    DEFAULT_REQUEST_TIMEOUT,
)
from embedding_distance.errors import ConfigurationError

# Load environment variables from .env file
load_dotenv()


# OpenAI configuration
def get_openai_api_key() -> str:
    """Get OpenAI API key from environment."""
    key = os.getenv("OPENAI_API_KEY", "").strip()
    if not key:
        raise ConfigurationError("OPENAI_API_KEY not set in environment or .env file")
    return key


# Cohere configuration
def get_cohere_api_key() -> str:
    """
    Get Cohere API key from environment.

    COHERE_API_HERE is the variable name older releases read; it is still
    honoured when COHERE_API_KEY is unset.
    """
    key = os.getenv("COHERE_API_KEY", "").strip() or os.getenv("COHERE_API_HERE", "").strip()
    if not key:
        raise ConfigurationError("COHERE_API_KEY not set in environment or .env file")
    return key


def get_cohere_base_url() -> str:
    """Get Cohere API base URL from environment or default."""
    return os.getenv("COHERE_BASE_URL", COHERE_BASE_URL).rstrip("/")


# Request tuning
def get_max_workers() -> int:
    """Get the number of concurrent embedding requests."""
    raw = os.getenv("EMBEDDING_MAX_WORKERS", "").strip()
    if not raw:
        return DEFAULT_MAX_WORKERS
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"EMBEDDING_MAX_WORKERS must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigurationError(f"EMBEDDING_MAX_WORKERS must be >= 1, got {value}")
    return value


def get_request_timeout() -> float:
    """Get the HTTP timeout (seconds) for provider requests."""
    raw = os.getenv("EMBEDDING_REQUEST_TIMEOUT", "").strip()
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"EMBEDDING_REQUEST_TIMEOUT must be a number, got {raw!r}")
    if value <= 0:
        raise ConfigurationError(f"EMBEDDING_REQUEST_TIMEOUT must be > 0, got {value}")
    return value
