"""OpenAPI writer: OpenAPI 3.0 YAML document per segment.

Operations get a summary, an extracted description, a generated
operationId, path parameters, a generic JSON request body for POST/PUT/PATCH
and one tag derived from the route name. Responses are a fixed generic set.
Segments with auth declare a security scheme applied to every operation.
"""

import re
from collections.abc import Sequence
from typing import Any
from urllib.parse import urlsplit

from docbot.core.constants import (
    BODY_METHODS,
    NO_DESCRIPTION,
    OPENAPI_DOCUMENT_VERSION,
    OPENAPI_VERSION,
)
from docbot.domain.entities import RouteRecord
from docbot.domain.enums import AuthType
from docbot.domain.value_objects import ResolvedSegment, SegmentAuth
from docbot.infrastructure.writers.base import (
    BaseRouteWriter,
    capitalize_first,
    name_parts,
)
from docbot.infrastructure.writers.yaml_emitter import dump_yaml

OPTIONAL_PARAMETER_PATTERN = re.compile(r"\{(\w+)\?\}")
OPERATION_ID_UNSAFE = re.compile(r"[^a-zA-Z0-9_]")
DEFAULT_TAG = "general"

JSON_OBJECT_CONTENT: dict[str, Any] = {"application/json": {"schema": {"type": "object"}}}


def server_url(host_value: str) -> str:
    """Base URL for the ``servers`` entry, without trailing slash.

    Absolute URLs are rebuilt from scheme, host and path (query and fragment
    dropped); anything else is used as given.
    """
    parts = urlsplit(host_value)
    if parts.scheme and parts.netloc:
        return f"{parts.scheme}://{parts.netloc}{parts.path}".rstrip("/")
    return host_value.rstrip("/")


def operation_id(route: RouteRecord, method: str) -> str:
    """``<method>_<name with dots as underscores>`` or a uri-derived fallback."""
    if route.name:
        return f"{method.lower()}_{route.name.replace('.', '_')}"
    return f"{method.lower()}_{OPERATION_ID_UNSAFE.sub('_', route.uri)}"


def operation_tags(name: str | None) -> list[str]:
    """One tag: the capitalized first name component after "api"."""
    parts = name_parts(name, strip_prefixes=True)
    if not parts or not parts[0]:
        return [DEFAULT_TAG]
    return [capitalize_first(parts[0])]


class OpenApiRouteWriter(BaseRouteWriter):
    """Write ``<safe_key>.yaml`` OpenAPI documents."""

    extension = "yaml"

    def format(self) -> str:
        return "openapi"

    def render(self, segment: ResolvedSegment, routes: Sequence[RouteRecord]) -> str:
        return dump_yaml(self.build_document(segment, routes))

    def build_document(
        self, segment: ResolvedSegment, routes: Sequence[RouteRecord]
    ) -> dict[str, Any]:
        """Build the OpenAPI document as plain mappings and lists."""
        document: dict[str, Any] = {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": f"{segment.key} API",
                "description": f"API documentation for {segment.key} segment",
                "version": OPENAPI_DOCUMENT_VERSION,
            },
            "servers": [
                {
                    "url": server_url(segment.host_value),
                    "description": f"{capitalize_first(segment.key)} server",
                }
            ],
            "paths": self._paths(routes),
        }

        if segment.auth is not None:
            scheme_name, scheme = self._security_scheme(segment.auth)
            document["components"] = {"securitySchemes": {scheme_name: scheme}}
            document["security"] = [{scheme_name: []}]

        return document

    def _paths(self, routes: Sequence[RouteRecord]) -> dict[str, dict[str, Any]]:
        paths: dict[str, dict[str, Any]] = {}

        for route in routes:
            path = "/" + OPTIONAL_PARAMETER_PATTERN.sub(r"{\1}", route.uri.lstrip("/"))
            operations = paths.setdefault(path, {})

            for method in route.methods:
                operations[method.lower()] = self._operation(route, method)

        return paths

    def _operation(self, route: RouteRecord, method: str) -> dict[str, Any]:
        operation: dict[str, Any] = {
            "summary": route.name or f"{method.upper()} {route.uri}",
            "description": self.describe(route) or NO_DESCRIPTION,
            "operationId": operation_id(route, method),
            "responses": {
                "200": {
                    "description": "Successful response",
                    "content": JSON_OBJECT_CONTENT,
                },
                "400": {"description": "Bad request"},
                "401": {"description": "Unauthorized"},
                "404": {"description": "Not found"},
                "500": {"description": "Internal server error"},
            },
        }

        if route.path_parameters:
            operation["parameters"] = [
                {
                    "name": param,
                    "in": "path",
                    "required": True,
                    "schema": {"type": "string"},
                    "description": f"Path parameter: {param}",
                }
                for param in route.path_parameters
            ]

        if method.upper() in BODY_METHODS:
            operation["requestBody"] = {"required": True, "content": JSON_OBJECT_CONTENT}

        operation["tags"] = operation_tags(route.name)
        return operation

    @staticmethod
    def _security_scheme(auth: SegmentAuth) -> tuple[str, dict[str, str]]:
        if auth.type is AuthType.BEARER:
            return "bearerAuth", {"type": "http", "scheme": "bearer", "bearerFormat": "JWT"}

        return "apiKeyAuth", {"type": "apiKey", "in": "header", "name": auth.header}
