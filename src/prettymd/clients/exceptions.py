"""Exceptions raised by model clients."""


class ProviderError(Exception):
    """Base exception for all model provider failures."""


class ApiKeyMissingError(ProviderError):
    """Raised when a live client is created without an API key."""

    def __init__(self, env_var: str = "OPENAI_API_KEY") -> None:
        self.env_var = env_var
        super().__init__(
            f"API key is missing. Please set the {env_var} environment variable."
        )


class NetworkError(ProviderError):
    """Raised when the provider cannot be reached."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Network error: {detail}")


class InvalidResponseError(ProviderError):
    """Raised when the provider reply has no usable content."""

    def __init__(self, message: str = "Invalid response from AI provider") -> None:
        super().__init__(message)


class RateLimitExceededError(ProviderError):
    """Raised when the provider rejects the request with HTTP 429."""

    def __init__(self, message: str = "Rate limit exceeded. Please try again later.") -> None:
        super().__init__(message)


class ProviderContentTooLargeError(ProviderError):
    """Raised when the provider rejects the content as too long for the model."""

    def __init__(self, message: str = "Content is too large for processing") -> None:
        super().__init__(message)


class ServerError(ProviderError):
    """Raised for any other non-success HTTP status."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Server error: {detail}")
