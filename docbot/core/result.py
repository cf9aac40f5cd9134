"""Result types for railway-oriented programming.

Operations that can fail in an expected way (a documentation file that could
not be written) return a Result instead of raising, so callers decide whether
to abort or keep going.

Usage:
    def write(...) -> Result[Path, WriterFailure]:
        if failed:
            return Failure(error=failure)
        return Success(value=path)

    match write(...):
        case Success(value=path):
            print(path)
        case Failure(error=error):
            print(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
