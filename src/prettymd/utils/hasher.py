"""Content hashing used for change detection."""

import hashlib
from pathlib import Path

FINGERPRINT_LENGTH = 8


class ContentHasher:
    """SHA-256 based content comparison.

    Digests are only used to compare text blobs within a single run; they are
    never used as security tokens or persisted identifiers.
    """

    def hash(self, content: str) -> str:
        """Return the hex SHA-256 digest of the UTF-8 encoded content."""
        return hashlib.sha256(content.encode("utf-8")).hexdigest()

    def fingerprint(self, content: str) -> str:
        """Return a short digest prefix for display."""
        return self.hash(content)[:FINGERPRINT_LENGTH]

    def has_changed(self, original: str, modified: str) -> bool:
        return self.hash(original) != self.hash(modified)

    def files_are_identical(self, path_a: str | Path, path_b: str | Path) -> bool:
        """Compare two files by content hash.

        Raises:
            OSError: If either file cannot be read.
            UnicodeDecodeError: If either file is not valid UTF-8.
        """
        content_a = Path(path_a).read_text(encoding="utf-8")
        content_b = Path(path_b).read_text(encoding="utf-8")
        return self.hash(content_a) == self.hash(content_b)
