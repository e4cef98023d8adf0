"""Fix pipeline: validates input, calls the model and reconciles its output."""

import logging
from pathlib import Path

from prettymd.clients.base import AIModelClient
from prettymd.core.exceptions import (
    ContentTooLargeError,
    FileTooLargeError,
    MarkdownValidationError,
)
from prettymd.core.normalizer import normalize_markdown
from prettymd.models import FixResult
from prettymd.utils.file_io import LocalFileIO
from prettymd.utils.hasher import ContentHasher

logger = logging.getLogger(__name__)

# Constants
MAX_CONTENT_LENGTH = 100_000  # Exclusive upper bound, in characters
MARKDOWN_EXTENSIONS = frozenset({".md", ".markdown"})


def validate_markdown_path(path: str | Path, file_io: LocalFileIO | None = None) -> None:
    """Check that path names an existing markdown file.

    Raises:
        MarkdownValidationError: If the file is missing or not .md/.markdown.
    """
    file_io = file_io or LocalFileIO()
    if not file_io.file_exists(path):
        raise MarkdownValidationError(f"File not found: {path}")
    if Path(path).suffix.lower() not in MARKDOWN_EXTENSIONS:
        raise MarkdownValidationError("File must be a Markdown file (.md or .markdown)")


class FixPipeline:
    """Runs one markdown document through a model client.

    The client is injected by the caller. Each call makes exactly one
    request; client errors propagate unchanged and are never retried here.
    """

    def __init__(
        self,
        client: AIModelClient,
        file_io: LocalFileIO | None = None,
        hasher: ContentHasher | None = None,
    ) -> None:
        self.client = client
        self.file_io = file_io or LocalFileIO()
        self.hasher = hasher or ContentHasher()

    async def fix(self, content: str, style: str) -> FixResult:
        """Fix markdown content.

        Args:
            content: Markdown text to improve.
            style: Style token forwarded to the client.

        Returns:
            FixResult with the normalized content.

        Raises:
            ContentTooLargeError: If len(content) >= MAX_CONTENT_LENGTH.
            ProviderError: Propagated from the client.
        """
        if len(content) >= MAX_CONTENT_LENGTH:
            raise ContentTooLargeError(len(content), MAX_CONTENT_LENGTH)
        return await self._process(content, style)

    async def fix_file(self, path: str | Path, style: str) -> FixResult:
        """Read, validate and fix a markdown file. The file is not written.

        Raises:
            MarkdownValidationError: If the path is not an existing markdown file.
            FileTooLargeError: If the file content reaches MAX_CONTENT_LENGTH.
            OSError: If the file cannot be read.
        """
        validate_markdown_path(path, self.file_io)
        content = self.file_io.read_file(path)
        if len(content) >= MAX_CONTENT_LENGTH:
            raise FileTooLargeError(str(path), len(content), MAX_CONTENT_LENGTH)
        return await self._process(content, style)

    async def _process(self, content: str, style: str) -> FixResult:
        logger.debug(
            "Sending %d characters to %s (style=%s, fingerprint=%s)",
            len(content),
            self.client.provider_name,
            style,
            self.hasher.fingerprint(content),
        )
        ai_result = await self.client.process_markdown(content, style)

        result = FixResult(
            original_content=content,
            content=normalize_markdown(ai_result.content),
            style=style,
            model=ai_result.model,
        )
        logger.info(
            "Model %s returned %s (tokens=%s, fingerprint=%s)",
            ai_result.model,
            "changes" if result.has_changes else "no changes",
            ai_result.tokens_used,
            self.hasher.fingerprint(result.content),
        )
        return result
