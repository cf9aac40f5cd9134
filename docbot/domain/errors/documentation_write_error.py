"""Documentation write error.

Raised by the file writer when an artifact cannot be persisted. The command
handler converts it into a WriterFailure result.
"""

from pathlib import Path


class DocumentationWriteError(Exception):
    """Raised when a documentation file cannot be written.

    Attributes:
        path: Target file.
        context: Optional label of the operation (e.g. "postman").
    """

    def __init__(self, message: str, *, path: Path, context: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.context = context
