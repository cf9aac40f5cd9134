"""Fatal configuration error.

Broken configuration (a segment without a key, an output directory outside
the project, two writers claiming the same format) cannot be recovered from
per route or per file. It is raised, propagates to the entry point and aborts
the run before anything is written.
"""

from docbot.core.enums import ErrorCode


class ConfigurationError(Exception):
    """Raised when documentation configuration is invalid.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable message.
        details: Optional context (config key, offending value).
    """

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode,
        details: dict[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
