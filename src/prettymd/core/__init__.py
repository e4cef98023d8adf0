"""Fix pipeline core."""

from prettymd.core.exceptions import (
    ContentTooLargeError,
    FileTooLargeError,
    FixError,
    MarkdownValidationError,
)
from prettymd.core.fix_pipeline import (
    MAX_CONTENT_LENGTH,
    FixPipeline,
    validate_markdown_path,
)
from prettymd.core.normalizer import normalize_markdown

__all__ = [
    "MAX_CONTENT_LENGTH",
    "ContentTooLargeError",
    "FileTooLargeError",
    "FixError",
    "FixPipeline",
    "MarkdownValidationError",
    "normalize_markdown",
    "validate_markdown_path",
]
