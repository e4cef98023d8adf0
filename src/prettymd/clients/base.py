"""Abstract interface for markdown-processing model clients."""

from abc import ABC, abstractmethod

from prettymd.models import AIResult


class AIModelClient(ABC):
    """A backend that rewrites markdown content.

    Implementations raise ProviderError subclasses on failure and perform a
    single attempt per call.
    """

    @abstractmethod
    async def process_markdown(self, content: str, style: str) -> AIResult:
        """Process markdown content with the model."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider name."""

    @property
    @abstractmethod
    def is_available(self) -> bool:
        """Whether the client is configured and usable."""

    async def aclose(self) -> None:
        """Release network resources held by the client."""

    async def __aenter__(self) -> "AIModelClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
