"""Unit tests for GenerateRouteDocsHandler.

Tests the documentation run orchestration with a stub collector, real
resolver/partitioner/writers and an in-memory file writer.

Tests cover:
- Happy path: one file per (segment with routes, writer)
- Segment and format filters (unknown values warned and ignored)
- Empty segments skipped
- Write failures: abort by default, collect with continue_on_error
- Configuration errors propagate
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from docbot.application.commands import GenerateRouteDocs
from docbot.application.commands.handlers import GenerateRouteDocsHandler
from docbot.application.services import RoutePartitioner, SegmentResolver
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.result import Failure, Success
from docbot.infrastructure.writers import (
    MarkdownRouteWriter,
    OpenApiRouteWriter,
    PostmanRouteWriter,
)
from tests.conftest import InMemoryFileWriter, StubDescriptions, create_route

OUTPUT_ROOT = Path("/project/doc")


# =============================================================================
# Test Fixtures
# =============================================================================


def create_handler(
    routes=None,
    definitions=None,
    file_writer: InMemoryFileWriter | None = None,
) -> tuple[GenerateRouteDocsHandler, InMemoryFileWriter, Mock]:
    """Create handler with stub collector and in-memory writers."""
    file_writer = file_writer or InMemoryFileWriter()
    descriptions = StubDescriptions()
    logger = Mock()

    collector = Mock()
    collector.collect.return_value = (
        routes
        if routes is not None
        else [
            create_route("api/users", name="api.users.index"),
            create_route("api/users/{id}", name="api.users.show"),
            create_route("home", name="home"),
        ]
    )

    writers = {
        writer.format(): writer
        for writer in (
            MarkdownRouteWriter(filesystem=file_writer, descriptions=descriptions),
            PostmanRouteWriter(filesystem=file_writer, descriptions=descriptions),
            OpenApiRouteWriter(filesystem=file_writer, descriptions=descriptions),
        )
    }

    handler = GenerateRouteDocsHandler(
        collector=collector,
        resolver=SegmentResolver(
            definitions=definitions
            if definitions is not None
            else [{"key": "api", "prefix": "api/"}, {"key": "admin", "prefix": "admin/"}]
        ),
        partitioner=RoutePartitioner(logger=logger),
        writers=writers,
        output_root=OUTPUT_ROOT,
        logger=logger,
    )
    return handler, file_writer, logger


@pytest.mark.unit
class TestGenerateRouteDocsSuccess:
    """Test successful runs."""

    def test_writes_every_format_for_segments_with_routes(self):
        handler, file_writer, _ = create_handler()

        result = handler.handle(GenerateRouteDocs())

        assert isinstance(result, Success)
        summary = result.value
        routes_dir = OUTPUT_ROOT / "routes"
        assert set(file_writer.files) == {
            routes_dir / "web.md",
            routes_dir / "web.json",
            routes_dir / "web.yaml",
            routes_dir / "api.md",
            routes_dir / "api.json",
            routes_dir / "api.yaml",
        }
        assert summary.total_routes == 3
        assert summary.segment_counts == {"web": 1, "api": 2, "admin": 0}
        assert summary.skipped_segments == ("admin",)
        assert summary.written[0] == routes_dir / "web.md"

    def test_segment_filter(self):
        handler, file_writer, _ = create_handler()

        result = handler.handle(GenerateRouteDocs(segments=("api",)))

        assert isinstance(result, Success)
        assert {path.stem for path in file_writer.files} == {"api"}

    def test_format_filter(self):
        handler, file_writer, _ = create_handler()

        result = handler.handle(GenerateRouteDocs(formats=("openapi",)))

        assert isinstance(result, Success)
        assert {path.suffix for path in file_writer.files} == {".yaml"}

    def test_unknown_segment_and_format_warned_and_ignored(self):
        handler, file_writer, logger = create_handler()

        result = handler.handle(
            GenerateRouteDocs(segments=("api", "ghost"), formats=("markdown", "html"))
        )

        assert isinstance(result, Success)
        assert set(file_writer.files) == {OUTPUT_ROOT / "routes" / "api.md"}
        warned = [call.kwargs for call in logger.warning.call_args_list]
        assert {"segment": "ghost"} in warned
        assert {"format": "html"} in warned

    def test_routes_matched_before_segment_filter(self):
        # Partitioning covers every segment, so api routes stay out of web.
        handler, file_writer, _ = create_handler()

        handler.handle(GenerateRouteDocs(segments=("web",), formats=("markdown",)))

        content = file_writer.files[OUTPUT_ROOT / "routes" / "web.md"]
        assert "`home`" in content
        assert "api/users" not in content


@pytest.mark.unit
class TestGenerateRouteDocsFailures:
    """Test write failures and configuration errors."""

    def test_first_failure_aborts_by_default(self):
        file_writer = InMemoryFileWriter(fail_on={"postman"})
        handler, _, logger = create_handler(file_writer=file_writer)

        result = handler.handle(GenerateRouteDocs())

        assert isinstance(result, Failure)
        assert len(result.error) == 1
        failure = result.error[0]
        assert failure.code == ErrorCode.WRITE_FAILED
        assert failure.segment_key == "web"
        assert failure.format_name == "postman"
        assert failure.path == str(OUTPUT_ROOT / "routes" / "web.json")
        # markdown for web written, nothing attempted after the failure
        assert len(file_writer.attempts) == 2
        logger.error.assert_called_once()

    def test_continue_on_error_attempts_every_pair(self):
        file_writer = InMemoryFileWriter(fail_on={"postman"})
        handler, _, _ = create_handler(file_writer=file_writer)

        result = handler.handle(GenerateRouteDocs(continue_on_error=True))

        assert isinstance(result, Failure)
        assert [f.segment_key for f in result.error] == ["web", "api"]
        assert len(file_writer.attempts) == 6
        assert len(file_writer.files) == 4

    def test_os_error_from_writer_becomes_failure(self):
        handler, _, _ = create_handler()
        broken = Mock()
        broken.write.side_effect = PermissionError(13, "denied", "/project/doc/routes/web.x")
        handler._writers = {"broken": broken}

        result = handler.handle(GenerateRouteDocs())

        assert isinstance(result, Failure)
        assert result.error[0].format_name == "broken"
        assert result.error[0].path == "/project/doc/routes/web.x"

    def test_configuration_error_propagates_before_writing(self):
        handler, file_writer, _ = create_handler(definitions=[{"prefix": "api/"}])

        with pytest.raises(ConfigurationError):
            handler.handle(GenerateRouteDocs())

        assert file_writer.attempts == []
