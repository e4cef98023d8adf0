"""Data models for prettymd."""

from prettymd.models.fix_models import AIResult, FixResult, Style

__all__ = [
    "AIResult",
    "FixResult",
    "Style",
]
