"""
Constants for embedding_distance package.

Centralizes defaults shared by the CLI, config and providers.
"""

# Provider defaults
DEFAULT_PROVIDER = "openai"
SUPPORTED_PROVIDERS = ("openai", "cohere")

# Distance defaults
DEFAULT_DISTANCE_METRIC = "cosine"

# Cohere embed API
COHERE_BASE_URL = "https://api.cohere.com"
COHERE_INPUT_TYPE = "search_document"

# Concurrency and HTTP
DEFAULT_MAX_WORKERS = 8  # concurrent embedding requests
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds

# Output
OUTPUT_FORMATS = ("text", "json")
DEFAULT_OUTPUT_FORMAT = "text"
