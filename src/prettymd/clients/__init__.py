"""Model clients that rewrite markdown content."""

from prettymd.clients.base import AIModelClient
from prettymd.clients.exceptions import (
    ApiKeyMissingError,
    InvalidResponseError,
    NetworkError,
    ProviderContentTooLargeError,
    ProviderError,
    RateLimitExceededError,
    ServerError,
)
from prettymd.clients.mock_client import MockClient

__all__ = [
    "AIModelClient",
    "ApiKeyMissingError",
    "InvalidResponseError",
    "MockClient",
    "NetworkError",
    "ProviderContentTooLargeError",
    "ProviderError",
    "RateLimitExceededError",
    "ServerError",
]
