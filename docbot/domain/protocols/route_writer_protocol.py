"""RouteWriterProtocol - one documentation output format.

Writers are selected by the format name they report. Each call renders a
single segment into a single file.

Implementations:
    - MarkdownRouteWriter ("markdown", .md)
    - PostmanRouteWriter ("postman", .json)
    - OpenApiRouteWriter ("openapi", .yaml)
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from docbot.domain.entities import RouteRecord
from docbot.domain.value_objects import ResolvedSegment


@runtime_checkable
class RouteWriterProtocol(Protocol):
    """Strategy serializing a segment's routes into one format."""

    def format(self) -> str:
        """Return the format name this writer is registered under."""
        ...

    def write(
        self,
        segment: ResolvedSegment,
        routes: Sequence[RouteRecord],
        directory: Path,
    ) -> Path:
        """Render routes and write them below directory.

        Args:
            segment: Segment being documented.
            routes: Routes assigned to the segment.
            directory: Output directory for this run.

        Returns:
            Path of the written file.

        Raises:
            DocumentationWriteError: If the file cannot be written.
        """
        ...
