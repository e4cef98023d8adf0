"""Offline client that applies deterministic rewrites without an API key."""

import asyncio
import re

from prettymd.clients.base import AIModelClient
from prettymd.models import AIResult, Style

MOCK_MODEL = "mock-1.0"
FILLER_WORDS = ("really", "very", "quite", "somewhat", "rather")
TECHNICAL_TERMS = {
    "app": "application",
    "config": "configuration",
    "repo": "repository",
}

_FILLER_RE = re.compile(r"(?<= )(?:%s) " % "|".join(FILLER_WORDS), re.IGNORECASE)
_TECHNICAL_RE = re.compile(r"\b(%s)\b" % "|".join(TECHNICAL_TERMS))
_HEADING_RE = re.compile(r"^\s*(#+)\s*(\S.*?)\s*$")
_LIST_ITEM_RE = re.compile(r"^(\s*)([-*])\s{2,}(\S.*)$")
_INNER_SPACES_RE = re.compile(r"(?<=\S) {2,}")


class MockClient(AIModelClient):
    """Deterministic stand-in for a live model.

    Lines inside fenced code blocks are passed through untouched.
    """

    def __init__(self, delay: float = 0.5) -> None:
        self.delay = delay

    @property
    def provider_name(self) -> str:
        return "Mock"

    @property
    def is_available(self) -> bool:
        return True

    async def process_markdown(self, content: str, style: str) -> AIResult:
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        return AIResult(
            content=self.transform(content, style),
            tokens_used=len(content) // 4,  # Rough token estimate
            model=MOCK_MODEL,
        )

    def transform(self, content: str, style: str) -> str:
        resolved = Style.parse(style)
        output = []
        in_code_block = False
        for line in content.split("\n"):
            if line.lstrip().startswith("```"):
                in_code_block = not in_code_block
                output.append(line)
                continue
            if in_code_block:
                output.append(line)
                continue
            output.append(self._transform_line(line, resolved))
        return "\n".join(output)

    def _transform_line(self, line: str, style: Style) -> str:
        if style is Style.CONCISE:
            line = _FILLER_RE.sub("", line)
        elif style is Style.TECHNICAL:
            line = _TECHNICAL_RE.sub(lambda m: TECHNICAL_TERMS[m.group(1)], line)

        line = _INNER_SPACES_RE.sub(" ", line.rstrip())

        heading = _HEADING_RE.match(line)
        if heading:
            return f"{heading.group(1)} {heading.group(2)}"

        return _LIST_ITEM_RE.sub(r"\1\2 \3", line)
