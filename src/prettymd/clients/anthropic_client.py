"""Anthropic messages API backend."""

import logging

from anthropic import AsyncAnthropic
import anthropic

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
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-5-20250929"
MAX_API_TOKENS = 4000
TEMPERATURE = 0.7
REQUEST_TIMEOUT = 30.0  # seconds
PROMPT_TOO_LONG_MARKER = "prompt is too long"


class AnthropicClient(AIModelClient):
    """Rewrites markdown through the Anthropic messages API."""

    def __init__(
        self,
        api_key: str | None,
        model: str | None = None,
        max_tokens: int = MAX_API_TOKENS,
        temperature: float = TEMPERATURE,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        if not api_key:
            raise ApiKeyMissingError("ANTHROPIC_API_KEY")
        self.api_key = api_key
        self.model = model or DEFAULT_ANTHROPIC_MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self._client = AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)

    @property
    def provider_name(self) -> str:
        return "Anthropic"

    @property
    def is_available(self) -> bool:
        return bool(self.api_key)

    async def process_markdown(self, content: str, style: str) -> AIResult:
        logger.debug("Requesting %s message for %d characters", self.model, len(content))
        try:
            response = await self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system=build_system_prompt(style),
                messages=[{"role": "user", "content": build_user_prompt(content)}],
            )
        except anthropic.APIConnectionError as e:
            raise NetworkError(str(e)) from e
        except anthropic.RateLimitError as e:
            raise RateLimitExceededError() from e
        except anthropic.APIStatusError as e:
            if e.status_code == 413 or PROMPT_TOO_LONG_MARKER in str(e.message).lower():
                raise ProviderContentTooLargeError() from e
            raise ServerError(f"HTTP {e.status_code}: {e.message}") from e

        text_blocks = [
            block.text for block in response.content if getattr(block, "type", None) == "text"
        ]
        if not text_blocks:
            raise InvalidResponseError()

        usage = getattr(response, "usage", None)
        tokens_used = usage.input_tokens + usage.output_tokens if usage else None
        return AIResult(
            content="".join(text_blocks),
            tokens_used=tokens_used,
            model=self.model,
        )

    async def aclose(self) -> None:
        await self._client.close()
