"""Models for markdown fix requests and results."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from prettymd.utils.hasher import ContentHasher


class Style(str, Enum):
    """Tone hint passed to the model backend."""

    CONCISE = "concise"
    FRIENDLY = "friendly"
    TECHNICAL = "technical"
    DEFAULT = "default"

    @classmethod
    def parse(cls, value: "str | Style | None") -> "Style":
        """Resolve a style token case-insensitively; unknown values map to DEFAULT."""
        if isinstance(value, Style):
            return value
        if not value:
            return cls.DEFAULT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.DEFAULT


class AIResult(BaseModel):
    """Raw output of a single model call."""

    model_config = ConfigDict(frozen=True)

    content: str
    tokens_used: int | None = None
    model: str


class FixResult(BaseModel):
    """Outcome of one fix pipeline invocation.

    has_changes is derived from the content hashes when the model is built;
    any value passed in by the caller is ignored. model_copy(update=...)
    rebuilds through validation so the flag follows the new content.
    """

    model_config = ConfigDict(frozen=True)

    original_content: str
    content: str
    has_changes: bool = False
    style: str
    model: str

    @model_validator(mode="before")
    @classmethod
    def _compute_has_changes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = dict(data)
            data["has_changes"] = ContentHasher().has_changed(
                data.get("original_content", ""),
                data.get("content", ""),
            )
        return data

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> "FixResult":
        """Copy the result; updates are re-validated so has_changes stays in sync."""
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})
