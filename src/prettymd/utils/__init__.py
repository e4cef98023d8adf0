"""Utilities for prettymd."""

from prettymd.utils.diff_runner import (
    NO_CHANGES_MESSAGE,
    DiffRunner,
    format_diff_output,
)
from prettymd.utils.file_io import LocalFileIO
from prettymd.utils.hasher import ContentHasher

__all__ = [
    "NO_CHANGES_MESSAGE",
    "ContentHasher",
    "DiffRunner",
    "LocalFileIO",
    "format_diff_output",
]
