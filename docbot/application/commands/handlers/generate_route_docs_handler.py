"""Generate route documentation handler.

Flow:
1. Collect routes
2. Resolve segments (ConfigurationError propagates, nothing written yet)
3. Partition routes over all segments, then narrow to requested segments
4. Select writers by requested formats
5. For each segment with routes, run every selected writer
6. Return Success(GenerateRouteDocsResult)

On failure:
- A write error becomes a WriterFailure
- Default mode returns Failure immediately
- continue_on_error mode finishes every pair, then returns Failure with all
  collected failures

Architecture:
- Application layer ONLY imports from domain layer and core
- Collectors, writers and the filesystem are injected via protocols
"""

from collections.abc import Mapping, Sequence
from pathlib import Path

from docbot.application.commands.route_doc_commands import (
    GenerateRouteDocs,
    GenerateRouteDocsResult,
)
from docbot.application.services import RoutePartitioner, SegmentResolver
from docbot.core.constants import ROUTES_SUBDIRECTORY
from docbot.core.enums import ErrorCode
from docbot.core.result import Failure, Result, Success
from docbot.domain.entities import RouteRecord
from docbot.domain.errors import DocumentationWriteError, WriterFailure
from docbot.domain.protocols import (
    LoggerProtocol,
    RouteCollectorProtocol,
    RouteWriterProtocol,
)
from docbot.domain.value_objects import ResolvedSegment


class GenerateRouteDocsHandler:
    """Handler for the GenerateRouteDocs command.

    Single responsibility: orchestrate one documentation run. Rendering
    belongs to writers, matching to the partitioner.
    """

    def __init__(
        self,
        collector: RouteCollectorProtocol,
        resolver: SegmentResolver,
        partitioner: RoutePartitioner,
        writers: Mapping[str, RouteWriterProtocol],
        output_root: Path,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            collector: Route source.
            resolver: Segment resolver built from project config.
            partitioner: Route partitioner.
            writers: Writers keyed by format, in configured order.
            output_root: Confined output root; files go to <root>/routes/.
            logger: Structured logger.
        """
        self._collector = collector
        self._resolver = resolver
        self._partitioner = partitioner
        self._writers = writers
        self._output_root = output_root
        self._logger = logger

    def handle(
        self, cmd: GenerateRouteDocs
    ) -> Result[GenerateRouteDocsResult, tuple[WriterFailure, ...]]:
        """Handle the generate command.

        Args:
            cmd: GenerateRouteDocs command.

        Returns:
            Success(GenerateRouteDocsResult) when every write succeeded.
            Failure(tuple of WriterFailure) otherwise.

        Raises:
            ConfigurationError: If segment configuration is invalid.
        """
        routes = self._collector.collect()
        self._logger.info("Routes collected", total=len(routes))

        segments = self._resolver.resolve()
        partitioned = self._partitioner.partition(routes, segments)

        selected = self._select_segments(segments, cmd.segments)
        writers = self._select_writers(cmd.formats)
        directory = self._output_root / ROUTES_SUBDIRECTORY

        written: list[Path] = []
        skipped: list[str] = []
        counts: dict[str, int] = {}
        failures: list[WriterFailure] = []

        for key, segment in selected.items():
            segment_routes = partitioned.get(key, [])
            counts[key] = len(segment_routes)

            if not segment_routes:
                self._logger.info("No routes matched segment; skipped", segment=key)
                skipped.append(key)
                continue

            for format_name, writer in writers.items():
                outcome = self._write(writer, format_name, segment, segment_routes, directory)

                match outcome:
                    case Success(value=path):
                        written.append(path)
                    case Failure(error=failure):
                        failures.append(failure)
                        if not cmd.continue_on_error:
                            return Failure(error=tuple(failures))

        if failures:
            return Failure(error=tuple(failures))

        self._logger.info(
            "Route documentation generated",
            files=len(written),
            segments=len(counts) - len(skipped),
        )

        return Success(
            value=GenerateRouteDocsResult(
                total_routes=len(routes),
                segment_counts=counts,
                written=tuple(written),
                skipped_segments=tuple(skipped),
            )
        )

    def _write(
        self,
        writer: RouteWriterProtocol,
        format_name: str,
        segment: ResolvedSegment,
        routes: Sequence[RouteRecord],
        directory: Path,
    ) -> Result[Path, WriterFailure]:
        try:
            path = writer.write(segment, routes, directory)
        except (DocumentationWriteError, OSError) as exc:
            target = exc.path if isinstance(exc, DocumentationWriteError) else exc.filename
            self._logger.error(
                "Documentation write failed",
                error=exc,
                segment=segment.key,
                format=format_name,
            )
            return Failure(
                error=WriterFailure(
                    code=ErrorCode.WRITE_FAILED,
                    message=str(exc),
                    segment_key=segment.key,
                    format_name=format_name,
                    path=None if target is None else str(target),
                    cause=str(exc.__cause__ or exc),
                )
            )

        self._logger.info(
            "Documentation written",
            segment=segment.key,
            format=format_name,
            path=str(path),
            routes=len(routes),
        )
        return Success(value=path)

    def _select_segments(
        self,
        segments: Mapping[str, ResolvedSegment],
        requested: Sequence[str],
    ) -> dict[str, ResolvedSegment]:
        if not requested:
            return dict(segments)

        for key in requested:
            if key not in segments:
                self._logger.warning("Unknown segment requested; ignored", segment=key)

        wanted = set(requested)
        return {key: seg for key, seg in segments.items() if key in wanted}

    def _select_writers(self, requested: Sequence[str]) -> dict[str, RouteWriterProtocol]:
        if not requested:
            return dict(self._writers)

        for name in requested:
            if name not in self._writers:
                self._logger.warning("Unknown format requested; ignored", format=name)

        wanted = set(requested)
        return {name: w for name, w in self._writers.items() if name in wanted}
