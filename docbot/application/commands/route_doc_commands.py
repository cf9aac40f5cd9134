"""Route documentation commands.

Architecture:
    - Commands are immutable value objects representing user intent
    - GenerateRouteDocsHandler executes the run and returns a Result
    - Configuration problems are raised (fatal); write problems are returned
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class GenerateRouteDocs:
    """Command to generate route documentation.

    Attributes:
        segments: Segment keys to write; empty means every segment.
        formats: Writer formats to run; empty means every configured writer.
        continue_on_error: Keep writing remaining (segment, format) pairs
            after a write failure instead of stopping at the first one.

    Example:
        >>> command = GenerateRouteDocs(segments=("api",), formats=("openapi",))
    """

    segments: tuple[str, ...] = ()
    formats: tuple[str, ...] = ()
    continue_on_error: bool = False


@dataclass(frozen=True, kw_only=True)
class GenerateRouteDocsResult:
    """Outcome of a successful documentation run.

    Attributes:
        total_routes: Routes collected.
        segment_counts: Routes assigned per selected segment.
        written: Files written, in write order.
        skipped_segments: Selected segments without routes.
    """

    total_routes: int
    segment_counts: dict[str, int] = field(default_factory=dict)
    written: tuple[Path, ...] = ()
    skipped_segments: tuple[str, ...] = ()
