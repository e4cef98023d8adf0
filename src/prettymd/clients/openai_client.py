"""OpenAI chat completions backend."""

import logging

import openai

from prettymd.clients.base import AIModelClient
from prettymd.clients.exceptions import (
    ApiKeyMissingError,
    InvalidResponseError,
    NetworkError,
    ProviderContentTooLargeError,
    RateLimitExceededError,
    ServerError,
)
from prettymd.clients.prompts import build_system_prompt, build_user_prompt
from prettymd.models import AIResult

logger = logging.getLogger(__name__)

# Constants
DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
MAX_API_TOKENS = 4000
TEMPERATURE = 0.7
REQUEST_TIMEOUT = 30.0  # seconds
CONTEXT_LENGTH_CODE = "context_length_exceeded"


class OpenAIClient(AIModelClient):
    """Rewrites markdown through the OpenAI chat completions API."""

    def __init__(
        self,
        api_key: str | None,
        model: str | None = None,
        max_tokens: int = MAX_API_TOKENS,
        temperature: float = TEMPERATURE,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: OpenAI API key.
            model: Model ID; defaults to DEFAULT_OPENAI_MODEL.

        Raises:
            ApiKeyMissingError: If api_key is empty.
        """
        if not api_key:
            raise ApiKeyMissingError("OPENAI_API_KEY")
        self.api_key = api_key
        self.model = model or DEFAULT_OPENAI_MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        # One attempt per call; retries belong to the caller
        self._client = openai.AsyncOpenAI(
            api_key=api_key, timeout=timeout, max_retries=0
        )

    @property
    def provider_name(self) -> str:
        return "OpenAI"

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    async def process_markdown(self, content: str, style: str) -> AIResult:
        logger.debug("Requesting %s completion for %d characters", self.model, len(content))
        try:
            response = await self._client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": build_system_prompt(style)},
                    {"role": "user", "content": build_user_prompt(content)},
                ],
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except openai.APIConnectionError as e:
            raise NetworkError(str(e)) from e
        except openai.RateLimitError as e:
            raise RateLimitExceededError() from e
        except openai.APIStatusError as e:
            if getattr(e, "code", None) == CONTEXT_LENGTH_CODE or e.status_code == 413:
                raise ProviderContentTooLargeError() from e
            raise ServerError(f"HTTP {e.status_code}: {e.message}") from e

        if not response.choices:
            raise InvalidResponseError()
        text = response.choices[0].message.content
        if text is None:
            raise InvalidResponseError()

        usage = getattr(response, "usage", None)
        return AIResult(
            content=text,
            tokens_used=usage.total_tokens if usage else None,
            model=self.model,
        )

    async def aclose(self) -> None:
        await self._client.close()
