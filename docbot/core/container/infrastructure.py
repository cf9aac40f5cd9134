"""Infrastructure dependency factories.

Process-scoped singletons for infrastructure services:
- Logging (structlog console adapter)
- Filesystem (atomic documentation writes)
- Description extraction (endpoint docstrings)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from docbot.core.config import get_settings

if TYPE_CHECKING:
    from docbot.domain.protocols import (
        DescriptionExtractorProtocol,
        FileWriterProtocol,
        LoggerProtocol,
    )


# ============================================================================
# Process-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the process-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from docbot.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.uses_json_logs, level=settings.log_level)


@lru_cache()
def get_filesystem() -> "FileWriterProtocol":
    """Return the documentation file writer singleton.

    Returns:
        FileWriterProtocol: WriterFilesystem instance.
    """
    from docbot.infrastructure.filesystem.writer_filesystem import WriterFilesystem

    return WriterFilesystem()


def get_description_extractor() -> "DescriptionExtractorProtocol":
    """Return a fresh description extractor (cache lives for one run).

    Returns:
        DescriptionExtractorProtocol: DocstringDescriptionExtractor instance.
    """
    from docbot.infrastructure.descriptions.docstring_extractor import (
        DocstringDescriptionExtractor,
    )

    return DocstringDescriptionExtractor(logger=get_logger())
