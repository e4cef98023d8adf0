from pathlib import Path

import pytest

from prettymd.clients.base import AIModelClient
from prettymd.models import AIResult


class StubClient(AIModelClient):
    """Client that returns a canned reply and records every call."""

    def __init__(self, reply: str | None = None, error: Exception | None = None, model: str = "stub-1"):
        self.reply = reply
        self.error = error
        self.model = model
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    @property
    def provider_name(self) -> str:
        return "Stub"

    @property
    def is_available(self) -> bool:
        return True

    async def process_markdown(self, content: str, style: str) -> AIResult:
        self.calls.append((content, style))
        if self.error is not None:
            raise self.error
        reply = content if self.reply is None else self.reply
        return AIResult(content=reply, tokens_used=len(content) // 4, model=self.model)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def stub_client():
    return StubClient()


@pytest.fixture
def markdown_file(tmp_path) -> Path:
    path = tmp_path / "README.md"
    path.write_text("# Title\n\nSome text.\n", encoding="utf-8")
    return path
