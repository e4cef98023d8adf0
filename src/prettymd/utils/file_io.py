"""Local file system access for markdown files."""

import contextlib
import logging
import os
import shutil
import tempfile
import uuid
from pathlib import Path

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".backup"


class LocalFileIO:
    """Reads and writes UTF-8 text files on the local file system."""

    def read_file(self, path: str | Path) -> str:
        """Read a file as UTF-8 text.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        return Path(path).read_text(encoding="utf-8")

    def write_file(self, content: str, path: str | Path) -> None:
        """Atomically write content to path.

        The content is written to a sibling temp file first and then moved
        over the target with os.replace, so readers see either the old file
        or the complete new one.
        """
        target = Path(path)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            if target.exists():
                shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise
        logger.debug("Wrote %d characters to %s", len(content), target)

    def file_exists(self, path: str | Path) -> bool:
        return Path(path).is_file()

    def remove_file(self, path: str | Path) -> None:
        Path(path).unlink()

    def temporary_directory(self) -> str:
        return tempfile.gettempdir()

    def create_backup(self, path: str | Path) -> str:
        """Copy path to <path>.backup and return the backup path."""
        backup_path = f"{path}{BACKUP_SUFFIX}"
        shutil.copy2(path, backup_path)
        logger.debug("Created backup %s", backup_path)
        return backup_path

    def create_temporary_file(self, content: str, extension: str = "md") -> str:
        """Write content to a uniquely named file in the temp directory."""
        file_path = os.path.join(
            self.temporary_directory(), f"{uuid.uuid4().hex}.{extension}"
        )
        self.write_file(content, file_path)
        return file_path
