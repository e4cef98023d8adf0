"""Rendering of human-readable diffs between original and fixed markdown."""

import contextlib
import logging
import os
import shutil
import subprocess
import uuid

from prettymd.utils.file_io import LocalFileIO

logger = logging.getLogger(__name__)

NO_CHANGES_MESSAGE = "No changes detected."
SIMPLE_DIFF_HEADER = "=== Changes ==="
DIFF_EXECUTABLE = "diff"

# ANSI terminal colors
GREEN = "\x1b[32m"
RED = "\x1b[31m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"


class DiffRunner:
    """Generates diffs with the external diff tool or a built-in fallback."""

    def __init__(self, file_io: LocalFileIO | None = None) -> None:
        self.file_io = file_io or LocalFileIO()

    def render(self, original: str, modified: str, label: str) -> str:
        """Render a diff, preferring the external tool when it is installed."""
        if shutil.which(DIFF_EXECUTABLE) is None:
            logger.debug("'%s' not found on PATH, using simple diff", DIFF_EXECUTABLE)
            return self.render_simple_diff(original, modified)
        return self.render_unified_diff(original, modified, label)

    def render_unified_diff(self, original: str, modified: str, label: str) -> str:
        """Run `diff -u` over two temp files and colorize the output.

        Args:
            original: Content before fixing.
            modified: Content after fixing.
            label: File name shown in the diff headers, e.g. "README.md".

        Returns:
            Colorized unified diff, or NO_CHANGES_MESSAGE when diff prints nothing.

        Raises:
            OSError: If the temp files cannot be written or diff cannot be started.
        """
        temp_dir = self.file_io.temporary_directory()
        original_path = os.path.join(temp_dir, f"original_{uuid.uuid4().hex}.md")
        modified_path = os.path.join(temp_dir, f"modified_{uuid.uuid4().hex}.md")

        try:
            self.file_io.write_file(original, original_path)
            self.file_io.write_file(modified, modified_path)

            # Exit status 1 only means the files differ
            result = subprocess.run(
                [
                    DIFF_EXECUTABLE,
                    "-u",
                    "--label", f"original/{label}",
                    "--label", f"modified/{label}",
                    original_path,
                    modified_path,
                ],
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                check=False,
            )
        finally:
            for path in (original_path, modified_path):
                with contextlib.suppress(OSError):
                    self.file_io.remove_file(path)

        output = result.stdout.decode("utf-8", errors="replace")
        if not output:
            return NO_CHANGES_MESSAGE

        return format_diff_output(output)

    def render_simple_diff(self, original: str, modified: str) -> str:
        """Compare two texts line by line at equal positions.

        Lines are paired by index, not aligned, so a single inserted or
        removed line reports every following line as changed.
        """
        original_lines = original.split("\n")
        modified_lines = modified.split("\n")

        output = [SIMPLE_DIFF_HEADER]

        for i in range(max(len(original_lines), len(modified_lines))):
            original_line = original_lines[i] if i < len(original_lines) else None
            modified_line = modified_lines[i] if i < len(modified_lines) else None

            if original_line == modified_line:
                continue

            if original_line is not None and modified_line is not None:
                output.append(f"Line {i + 1}:")
                output.append(f"- {original_line}")
                output.append(f"+ {modified_line}")
            elif original_line is not None:
                output.append(f"Line {i + 1} removed:")
                output.append(f"- {original_line}")
            else:
                output.append(f"Line {i + 1} added:")
                output.append(f"+ {modified_line}")
            output.append("")

        if len(output) == 1:
            return NO_CHANGES_MESSAGE

        return "\n".join(output)


def colorize_line(line: str) -> str:
    """Wrap a single unified diff line in the color for its prefix."""
    # Header prefixes are checked before single-character ones
    if line.startswith("+++"):
        return f"{GREEN}{line}{RESET}"
    if line.startswith("---"):
        return f"{RED}{line}{RESET}"
    if line.startswith("+"):
        return f"{GREEN}{line}{RESET}"
    if line.startswith("-"):
        return f"{RED}{line}{RESET}"
    if line.startswith("@@"):
        return f"{CYAN}{line}{RESET}"
    return line


def format_diff_output(diff_text: str) -> str:
    return "\n".join(colorize_line(line) for line in diff_text.split("\n"))
