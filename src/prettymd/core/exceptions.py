"""Exceptions for fix pipeline operations."""


class FixError(Exception):
    """Base exception for all fix pipeline operations."""


class MarkdownValidationError(FixError):
    """Raised when the input file or content is not acceptable for fixing."""


class ContentTooLargeError(MarkdownValidationError):
    """Raised when content reaches the maximum supported length."""

    def __init__(self, size: int, limit: int, message: str | None = None) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            message or f"Content too large: {size} characters (must be below {limit})"
        )


class FileTooLargeError(ContentTooLargeError):
    """Raised when a markdown file reaches the maximum supported length."""

    def __init__(self, path: str, size: int, limit: int) -> None:
        self.path = path
        super().__init__(
            size,
            limit,
            f"File too large: {path} has {size} characters (must be below {limit})",
        )
