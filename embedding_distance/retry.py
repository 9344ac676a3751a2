"""
Retry utilities for embedding provider calls.

Provides decorators for resilient calls to the OpenAI SDK and to plain HTTP
endpoints (Cohere). Exhausted retries re-raise the last exception.
"""

import logging
from typing import Callable, TypeVar

from openai import APIConnectionError, APITimeoutError, InternalServerError, RateLimitError
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout as RequestsTimeout
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Common transient exceptions
TRANSIENT_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
)

OPENAI_TRANSIENT = (APIConnectionError, APITimeoutError, RateLimitError, InternalServerError)

HTTP_TRANSIENT = (RequestsConnectionError, RequestsTimeout)


class TransientHTTPError(Exception):
    """Retryable HTTP status (429 or 5xx) returned by a provider."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}" if message else f"HTTP {status_code}")


def retry_openai(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for retrying OpenAI API calls with exponential backoff.

    Retries on:
    - Rate limits (429)
    - Server errors (5xx)
    - Connection errors
    - Timeouts

    Example:
        @retry_openai
        def create_embedding(text: str) -> List[float]:
            return client.embeddings.create(...)
    """
    return retry(
        stop=stop_after_attempt(5),
        wait=wait_exponential(multiplier=1, min=1, max=60),
        retry=retry_if_exception_type(TRANSIENT_EXCEPTIONS + OPENAI_TRANSIENT),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )(func)


def retry_http(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for retrying HTTP requests with exponential backoff.

    Retries on connection errors, timeouts and TransientHTTPError.

    Example:
        @retry_http
        def fetch_data(url: str) -> dict:
            return requests.get(url).json()
    """
    return retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception_type(TRANSIENT_EXCEPTIONS + HTTP_TRANSIENT + (TransientHTTPError,)),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )(func)
