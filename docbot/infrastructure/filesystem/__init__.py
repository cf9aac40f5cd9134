"""Filesystem adapters: guarded output paths and atomic file writes."""

from docbot.domain.errors import DocumentationWriteError
from docbot.infrastructure.filesystem.path_guard import PathGuard
from docbot.infrastructure.filesystem.writer_filesystem import WriterFilesystem

__all__ = ["DocumentationWriteError", "PathGuard", "WriterFilesystem"]
