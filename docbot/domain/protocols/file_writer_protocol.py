"""FileWriterProtocol - the write-file operation injected into writers."""

from pathlib import Path
from typing import Protocol


class FileWriterProtocol(Protocol):
    """Persist text content to a file.

    Implementations create the parent directory when missing and raise
    DocumentationWriteError on failure.
    """

    def write_file(self, path: Path, content: str, context: str | None = None) -> None:
        """Write content to path.

        Args:
            path: Target file.
            content: Text content (UTF-8).
            context: Optional label prefixed to error messages.
        """
        ...
