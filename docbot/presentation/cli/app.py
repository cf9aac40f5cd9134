"""Docbot command line interface.

Usage:
    docbot routes --app myproject.main:app
    docbot routes --routes-file routes.json --segment api --format openapi
    docbot routes --app myproject.main:app --continue-on-error
    docbot segments --config docbot.json

Exit codes:
    0  documentation written
    1  one or more documentation files could not be written
    2  configuration error (nothing written)
"""

from pathlib import Path

import typer
from pydantic import ValidationError

from docbot.application.commands import GenerateRouteDocs
from docbot.core.config import Settings, get_settings
from docbot.core.container import (
    build_generate_route_docs_handler,
    build_route_collector,
    build_segment_resolver,
    get_logger,
    get_project_config,
)
from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.core.result import Failure, Success

EXIT_WRITE_FAILED = 1
EXIT_CONFIGURATION_ERROR = 2

app = typer.Typer(help="Generate route documentation (Markdown, Postman, OpenAPI).")


def _settings(
    base_path: Path | None,
    config_file: Path | None,
    output_dir: str | None,
) -> Settings:
    overrides = {
        "base_path": base_path,
        "config_file": config_file,
        "output_dir": output_dir,
    }
    updates = {key: value for key, value in overrides.items() if value is not None}

    try:
        settings = get_settings()
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) or "settings" for error in exc.errors()}
        )
        raise ConfigurationError(
            f"Invalid DOCBOT_ settings: {', '.join(fields)}.",
            code=ErrorCode.SETTINGS_INVALID,
            details={"fields": fields},
        ) from exc

    return settings.model_copy(update=updates) if updates else settings


def _abort(exc: ConfigurationError) -> typer.Exit:
    # The logger is built from settings, so invalid settings cannot be logged.
    if exc.code is not ErrorCode.SETTINGS_INVALID:
        get_logger().critical(
            "Configuration error; run aborted", error=exc, code=exc.code.value
        )
    typer.echo(f"Configuration error: {exc.message}", err=True)
    return typer.Exit(EXIT_CONFIGURATION_ERROR)


@app.command()
def routes(
    app_ref: str | None = typer.Option(
        None, "--app", help="FastAPI application as 'package.module:app'"
    ),
    routes_file: Path | None = typer.Option(
        None, "--routes-file", help="JSON route dump to document instead of an app"
    ),
    config_file: Path | None = typer.Option(
        None, "--config", help="Project config file (default: <base>/docbot.json)"
    ),
    base_path: Path | None = typer.Option(
        None, "--base-path", help="Project root; output must stay inside it"
    ),
    output_dir: str | None = typer.Option(
        None, "--output-dir", help="Output directory relative to the project root"
    ),
    segment: list[str] | None = typer.Option(
        None, "--segment", "-s", help="Only write this segment (repeatable)"
    ),
    format_: list[str] | None = typer.Option(
        None, "--format", "-f", help="Only run this writer format (repeatable)"
    ),
    continue_on_error: bool = typer.Option(
        False, "--continue-on-error", help="Keep writing after a failed file"
    ),
) -> None:
    """Generate documentation for every route segment.

    Example:
        docbot routes --app myproject.main:app --segment api
    """
    command = GenerateRouteDocs(
        segments=tuple(segment or ()),
        formats=tuple(format_ or ()),
        continue_on_error=continue_on_error,
    )

    try:
        settings = _settings(base_path, config_file, output_dir)
        collector = build_route_collector(app_ref=app_ref, routes_file=routes_file)
        handler = build_generate_route_docs_handler(collector, settings=settings)
        result = handler.handle(command)
    except ConfigurationError as exc:
        raise _abort(exc) from exc

    match result:
        case Success(value=summary):
            for path in summary.written:
                typer.echo(str(path))
            typer.echo(
                f"Documented {summary.total_routes} routes into "
                f"{len(summary.written)} files.",
                err=True,
            )
        case Failure(error=failures):
            for failure in failures:
                typer.echo(
                    f"[{failure.segment_key}/{failure.format_name}] {failure.message}",
                    err=True,
                )
            raise typer.Exit(EXIT_WRITE_FAILED)


@app.command()
def segments(
    config_file: Path | None = typer.Option(
        None, "--config", help="Project config file (default: <base>/docbot.json)"
    ),
    base_path: Path | None = typer.Option(None, "--base-path", help="Project root"),
) -> None:
    """List resolved segments in evaluation order.

    Example:
        docbot segments --config docbot.json
    """
    try:
        settings = _settings(base_path, config_file, None)
        resolved = build_segment_resolver(get_project_config(settings)).resolve()
    except ConfigurationError as exc:
        raise _abort(exc) from exc

    for key, seg in resolved.items():
        auth = seg.auth.type.value if seg.auth is not None else "none"
        typer.echo(
            f"{key}\tfile={seg.safe_key}\tprefix={seg.prefix or '-'}\t"
            f"domain={seg.domain or '-'}\thost={seg.host_value}\tauth={auth}"
        )


def main() -> None:
    """Console script entry point."""
    app()
