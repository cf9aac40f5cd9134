"""File writes for documentation writers.

Every artifact goes through WriterFilesystem.write_file(): the parent
directory is created, content is written to a temporary sibling and moved
into place with os.replace(), so readers never observe a half-written file.
Failures are wrapped in DocumentationWriteError carrying the target path.
"""

import os
import tempfile
from pathlib import Path

from docbot.domain.errors import DocumentationWriteError


class WriterFilesystem:
    """Write documentation files atomically."""

    def write_file(self, path: Path, content: str, context: str | None = None) -> None:
        """Ensure the directory exists and write content to path.

        Args:
            path: Target file.
            content: Text content, written as UTF-8.
            context: Optional label prefixed to error messages.

        Raises:
            DocumentationWriteError: If the directory or file cannot be written.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            self._replace(path, content)
        except OSError as exc:
            prefix = f"{context}: " if context is not None else ""
            raise DocumentationWriteError(
                f'{prefix}Failed to write documentation to "{path}": {exc}',
                path=path,
                context=context,
            ) from exc

    @staticmethod
    def _replace(path: Path, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
                handle.write(content)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
