"""Route documentation factories.

Composes the documentation pipeline from runtime settings and the project
config:

    settings -> project config -> resolver / writers / output root -> handler

Configuration problems surface here as ConfigurationError, before the
handler writes anything.
"""

import importlib
from pathlib import Path

from docbot.application.commands.handlers import GenerateRouteDocsHandler
from docbot.application.services import RoutePartitioner, SegmentResolver
from docbot.core.config import Settings, get_settings
from docbot.core.container.infrastructure import (
    get_description_extractor,
    get_filesystem,
    get_logger,
)
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.project_config import DocbotConfig, load_project_config
from docbot.domain.protocols import RouteCollectorProtocol
from docbot.infrastructure.collectors import FastAPIRouteCollector, JsonRouteCollector
from docbot.infrastructure.filesystem import PathGuard
from docbot.infrastructure.writers import RouteWriterManager


def get_project_config(settings: Settings | None = None) -> DocbotConfig:
    """Load the project config, applying the route host override.

    Args:
        settings: Runtime settings (defaults to get_settings()).

    Returns:
        DocbotConfig: Validated project config.
    """
    settings = settings or get_settings()
    config = load_project_config(settings.resolved_config_file())
    return config.with_host_value(settings.route_host)


def build_segment_resolver(config: DocbotConfig) -> SegmentResolver:
    """Create the segment resolver for a project config."""
    return SegmentResolver(
        config.route_defaults,
        config.segments,
        sanitizer=config.sanitization.filename.to_sanitizer(),
        logger=get_logger(),
    )


def build_writer_manager(config: DocbotConfig) -> RouteWriterManager:
    """Create the writer manager for the configured writer list."""
    return RouteWriterManager(
        config.writers,
        filesystem=get_filesystem(),
        descriptions=get_description_extractor(),
    )


def resolve_output_root(settings: Settings, config: DocbotConfig) -> Path:
    """Confined output root; the DOCBOT_OUTPUT_DIR setting wins over the config file."""
    configured = settings.output_dir if settings.output_dir is not None else config.output_dir
    return PathGuard.resolve_output_root(
        configured,
        settings.base_path,
        context_key="output_dir",
    )


def build_route_collector(
    *,
    app_ref: str | None = None,
    routes_file: Path | None = None,
) -> RouteCollectorProtocol:
    """Create the route collector for an application or a route dump.

    Args:
        app_ref: ``"module:attribute"`` reference to a FastAPI application.
        routes_file: JSON route dump.

    Returns:
        RouteCollectorProtocol: Collector for exactly one source.

    Raises:
        ConfigurationError: If neither or both sources are given, or the
            application cannot be imported.
    """
    if (app_ref is None) == (routes_file is None):
        raise ConfigurationError(
            "Provide exactly one route source: an application reference or a routes file.",
            code=ErrorCode.ROUTE_SOURCE_INVALID,
        )

    if routes_file is not None:
        return JsonRouteCollector(routes_file)

    module_name, sep, attribute = (app_ref or "").partition(":")
    if not sep or not module_name or not attribute:
        raise ConfigurationError(
            f'Application reference "{app_ref}" must look like "package.module:app".',
            code=ErrorCode.ROUTE_SOURCE_INVALID,
            details={"app": str(app_ref)},
        )

    try:
        app: object = importlib.import_module(module_name)
        for part in attribute.split("."):
            app = getattr(app, part)
    except Exception as exc:
        raise ConfigurationError(
            f'Unable to import application "{app_ref}": {exc}',
            code=ErrorCode.ROUTE_SOURCE_INVALID,
            details={"app": str(app_ref)},
        ) from exc

    if not hasattr(app, "routes"):
        raise ConfigurationError(
            f'"{app_ref}" is not an ASGI application with a route table.',
            code=ErrorCode.ROUTE_SOURCE_INVALID,
            details={"app": str(app_ref)},
        )

    return FastAPIRouteCollector(app)  # type: ignore[arg-type]


def build_generate_route_docs_handler(
    collector: RouteCollectorProtocol,
    *,
    settings: Settings | None = None,
    config: DocbotConfig | None = None,
) -> GenerateRouteDocsHandler:
    """Compose the GenerateRouteDocs handler.

    Args:
        collector: Route source.
        settings: Runtime settings (defaults to get_settings()).
        config: Project config (defaults to get_project_config(settings)).

    Returns:
        GenerateRouteDocsHandler: Ready-to-use handler.

    Raises:
        ConfigurationError: On an escaping output directory or an invalid
            writer list.
    """
    settings = settings or get_settings()
    config = config or get_project_config(settings)
    logger = get_logger()

    return GenerateRouteDocsHandler(
        collector=collector,
        resolver=build_segment_resolver(config),
        partitioner=RoutePartitioner(logger=logger),
        writers=build_writer_manager(config).all(),
        output_root=resolve_output_root(settings, config),
        logger=logger,
    )
