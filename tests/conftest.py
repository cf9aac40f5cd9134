"""Shared pytest fixtures.

Provides:
1. Route and segment factories
2. In-memory file writer (records writes, optionally fails per format)
3. Stub description extractor
4. Isolation of cached settings/logger singletons between tests
"""

from collections.abc import Iterable, Mapping
from pathlib import Path

import pytest

from docbot.core.config import get_settings
from docbot.core.container import get_filesystem, get_logger
from docbot.domain.entities import RouteRecord
from docbot.domain.enums import AuthType
from docbot.domain.errors import DocumentationWriteError
from docbot.domain.value_objects import ResolvedSegment, SegmentAuth


class InMemoryFileWriter:
    """FileWriterProtocol implementation keeping files in a dict.

    Writes whose context is listed in ``fail_on`` raise
    DocumentationWriteError, mimicking a read-only target.
    """

    def __init__(self, fail_on: Iterable[str] = ()) -> None:
        self.files: dict[Path, str] = {}
        self.attempts: list[tuple[Path, str | None]] = []
        self.fail_on = set(fail_on)

    def write_file(self, path: Path, content: str, context: str | None = None) -> None:
        self.attempts.append((path, context))
        if context in self.fail_on:
            raise DocumentationWriteError(
                f'{context}: Failed to write documentation to "{path}": read-only',
                path=path,
                context=context,
            )
        self.files[path] = content


class StubDescriptions:
    """DescriptionExtractorProtocol backed by a mapping."""

    def __init__(self, mapping: Mapping[str, str] | None = None) -> None:
        self.mapping = dict(mapping or {})
        self.calls: list[str] = []

    def extract(self, action: str) -> str:
        self.calls.append(action)
        return self.mapping.get(action, "")


def create_route(
    uri: str = "users",
    methods: Iterable[str] = ("GET",),
    name: str | None = None,
    action: str | None = None,
    middleware: Iterable[str] = (),
    domain: str | None = None,
) -> RouteRecord:
    """Helper to create a RouteRecord for testing."""
    return RouteRecord.build(
        methods=methods,
        uri=uri,
        name=name,
        action=action,
        middleware=middleware,
        domain=domain,
    )


def create_segment(
    key: str = "api",
    *,
    prefix: str | None = None,
    domain: str | None = None,
    include_middleware: tuple[str, ...] = (),
    exclude_middleware: tuple[str, ...] = (),
    host_variable: str = "HOST",
    host_value: str = "https://api.example.com",
    auth_type: AuthType | None = None,
    token_variable: str = "API_TOKEN",
    header: str = "Authorization",
) -> ResolvedSegment:
    """Helper to create a ResolvedSegment for testing."""
    auth = (
        SegmentAuth(type=auth_type, token_variable=token_variable, header=header)
        if auth_type is not None
        else None
    )
    return ResolvedSegment(
        key=key,
        safe_key=key,
        prefix=prefix,
        domain=domain,
        include_middleware=include_middleware,
        exclude_middleware=exclude_middleware,
        host_variable=host_variable,
        host_value=host_value,
        auth=auth,
    )


@pytest.fixture
def file_writer() -> InMemoryFileWriter:
    """In-memory file writer."""
    return InMemoryFileWriter()


@pytest.fixture
def descriptions() -> StubDescriptions:
    """Description stub knowing two actions."""
    return StubDescriptions(
        {
            "app.users:index": "List users.",
            "app.users:show": "Show a user | by id.",
        }
    )


@pytest.fixture(autouse=True)
def isolated_singletons(monkeypatch):
    """Run every test with fresh cached settings and logger (JSON logs)."""
    monkeypatch.setenv("DOCBOT_ENVIRONMENT", "testing")
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_filesystem.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
    get_filesystem.cache_clear()
