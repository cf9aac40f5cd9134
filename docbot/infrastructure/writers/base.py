"""Shared writer plumbing: output filenames, route name grouping.

Route names are dotted ("api.users.index"). Writers group routes by the
leading name component; Postman and OpenAPI skip a conventional "api"
prefix first, Markdown keeps it.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from docbot.core.constants import MISC_GROUP, STRIPPED_NAME_PREFIXES
from docbot.domain.entities import RouteRecord
from docbot.domain.protocols import DescriptionExtractorProtocol, FileWriterProtocol
from docbot.domain.value_objects import ResolvedSegment


def name_parts(name: str | None, *, strip_prefixes: bool = False) -> list[str]:
    """Split a dotted route name.

    Args:
        name: Route name (None or "" yields an empty list).
        strip_prefixes: Drop a leading conventional prefix such as "api".

    Returns:
        Name components in order.
    """
    if not name:
        return []

    parts = name.split(".")
    if strip_prefixes and parts[0] in STRIPPED_NAME_PREFIXES:
        parts = parts[1:]

    return parts


def route_group(name: str | None) -> str:
    """Leading name component, or "misc" for unnamed routes."""
    parts = name_parts(name)
    return parts[0] if parts and parts[0] else MISC_GROUP


def capitalize_first(text: str) -> str:
    """Upper-case the first character only ("users" -> "Users")."""
    return text[:1].upper() + text[1:]


class BaseRouteWriter(ABC):
    """Base class for the built-in writers.

    Subclasses render a document; this class names the file
    (``<safe_key>.<extension>``) and hands it to the injected file writer.

    Args:
        filesystem: File writer used for every artifact.
        descriptions: Route description lookup.
    """

    extension: str

    def __init__(
        self,
        *,
        filesystem: FileWriterProtocol,
        descriptions: DescriptionExtractorProtocol,
    ) -> None:
        self._filesystem = filesystem
        self._descriptions = descriptions

    @abstractmethod
    def format(self) -> str:
        """Format name this writer is registered under."""

    @abstractmethod
    def render(self, segment: ResolvedSegment, routes: Sequence[RouteRecord]) -> str:
        """Render the document for a segment."""

    def write(
        self,
        segment: ResolvedSegment,
        routes: Sequence[RouteRecord],
        directory: Path,
    ) -> Path:
        """Render and persist the segment document.

        Returns:
            Path of the written file.

        Raises:
            DocumentationWriteError: If the file cannot be written.
        """
        path = directory / f"{segment.safe_key}.{self.extension}"
        self._filesystem.write_file(path, self.render(segment, routes), self.format())
        return path

    def describe(self, route: RouteRecord) -> str:
        """Description text for a route ("" when none)."""
        if not route.action:
            return ""
        return self._descriptions.extract(route.action)
