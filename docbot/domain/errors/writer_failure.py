"""Writer failure error.

A writer that could not persist its artifact produces a WriterFailure. It
flows as data (inside a Failure result) so the caller decides between
aborting the run and continuing with the remaining writers.
"""

from dataclasses import dataclass

from docbot.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class WriterFailure(DomainError):
    """Documentation write failure for one (segment, format) pair.

    Attributes:
        code: ErrorCode.WRITE_FAILED.
        message: Human-readable message.
        segment_key: Segment being written.
        format_name: Writer format.
        path: Target path, when known.
        cause: Underlying exception message.
        details: Additional context.
    """

    segment_key: str
    format_name: str
    path: str | None = None
    cause: str | None = None
