"""Domain errors package."""

from docbot.domain.errors.documentation_write_error import DocumentationWriteError
from docbot.domain.errors.writer_failure import WriterFailure

__all__ = ["DocumentationWriteError", "WriterFailure"]
