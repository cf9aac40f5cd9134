"""Postman writer: v2.1 collection per segment.

Requests are nested into folders following the dotted route name, with a
leading "api" component skipped:

    api.users.index   -> folder "users" / request "GET api.users.index"
    users.posts.show  -> folder "users" / folder "posts" / request
    home              -> top-level request (single-component name)

Every request carries a status-2xx test script. The host and token are
collection variables so a Postman environment can override them.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from docbot.core.constants import MISC_GROUP, POSTMAN_SCHEMA_URL, POSTMAN_STATUS_TEST
from docbot.domain.entities import RouteRecord
from docbot.domain.entities.route_record import PATH_PARAMETER_PATTERN
from docbot.domain.enums import AuthType
from docbot.domain.value_objects import ResolvedSegment, SegmentAuth
from docbot.infrastructure.writers.base import BaseRouteWriter, name_parts


@dataclass(frozen=True, slots=True)
class _Row:
    """One (route, method) pair awaiting placement in the folder tree."""

    folders: tuple[str, ...]
    route: RouteRecord
    method: str


def placeholder(variable: str) -> str:
    """Postman variable reference ("host" -> "{{host}}")."""
    return "{{" + variable + "}}"


def folder_segments(name: str | None) -> list[str]:
    """Folder path for a route name; unnamed or single-component names go to misc."""
    if not name or len(name_parts(name)) <= 1:
        return [MISC_GROUP]
    return name_parts(name, strip_prefixes=True)


class PostmanRouteWriter(BaseRouteWriter):
    """Write ``<safe_key>.json`` Postman collections."""

    extension = "json"

    def format(self) -> str:
        return "postman"

    def render(self, segment: ResolvedSegment, routes: Sequence[RouteRecord]) -> str:
        return json.dumps(self.build_collection(segment, routes), indent=4) + "\n"

    def build_collection(
        self, segment: ResolvedSegment, routes: Sequence[RouteRecord]
    ) -> dict[str, Any]:
        """Build the collection payload (key order: info, item, variable, auth)."""
        collection: dict[str, Any] = {
            "info": {"name": f"{segment.key} API", "schema": POSTMAN_SCHEMA_URL},
            "item": self._nest(segment, self._rows(routes)),
            "variable": self._variables(segment, routes),
        }

        if segment.auth is not None:
            collection["auth"] = self._collection_auth(segment.auth)

        return collection

    @staticmethod
    def _variables(
        segment: ResolvedSegment, routes: Sequence[RouteRecord]
    ) -> list[dict[str, str]]:
        variables = [
            {"key": segment.host_variable, "value": segment.host_value, "type": "text"}
        ]

        if segment.auth is not None:
            variables.append(
                {"key": segment.auth.token_variable, "value": "", "type": "secret"}
            )

        existing = {variable["key"] for variable in variables}
        for route in routes:
            for param in route.path_parameters:
                if param in existing:
                    continue
                variables.append({"key": param, "value": "", "type": "text"})
                existing.add(param)

        return variables

    @staticmethod
    def _rows(routes: Sequence[RouteRecord]) -> list[_Row]:
        return [
            _Row(tuple(folder_segments(route.name)), route, method)
            for route in routes
            for method in route.methods
        ]

    def _nest(self, segment: ResolvedSegment, rows: list[_Row]) -> list[dict[str, Any]]:
        requests: list[dict[str, Any]] = []
        folders: dict[str, list[_Row]] = {}

        for row in rows:
            if len(row.folders) <= 1:
                requests.append(self._request_item(segment, row.route, row.method))
                continue

            first, *rest = row.folders
            folders.setdefault(first or MISC_GROUP, []).append(
                _Row(tuple(rest), row.route, row.method)
            )

        return requests + [
            {"name": name, "item": self._nest(segment, children)}
            for name, children in folders.items()
        ]

    def _request_item(
        self, segment: ResolvedSegment, route: RouteRecord, method: str
    ) -> dict[str, Any]:
        path = PATH_PARAMETER_PATTERN.sub(lambda m: placeholder(m.group(1)), route.uri)
        host = placeholder(segment.host_variable)
        trimmed = path.strip("/")

        request: dict[str, Any] = {
            "method": method,
            "header": self._headers(segment.auth),
            "url": {
                "raw": f"{host}/{path.lstrip('/')}",
                "host": [host],
                "path": trimmed.split("/") if trimmed else [],
            },
        }

        description = self.describe(route)
        if description:
            request["description"] = description

        return {
            "name": f"{method.upper()} {route.name or route.uri}",
            "event": [
                {"listen": "test", "script": {"exec": [POSTMAN_STATUS_TEST]}},
            ],
            "request": request,
        }

    @staticmethod
    def _headers(auth: SegmentAuth | None) -> list[dict[str, str]]:
        if auth is None or auth.type is not AuthType.HEADER:
            return []

        return [
            {
                "key": auth.header,
                "value": placeholder(auth.token_variable),
                "type": "text",
            }
        ]

    @staticmethod
    def _collection_auth(auth: SegmentAuth) -> dict[str, Any]:
        token = placeholder(auth.token_variable)

        if auth.type is AuthType.BEARER:
            return {
                "type": "bearer",
                "bearer": [{"key": "token", "value": token, "type": "string"}],
            }

        return {
            "type": "apikey",
            "apikey": [
                {"key": "key", "value": auth.header, "type": "string"},
                {"key": "value", "value": token, "type": "string"},
                {"key": "in", "value": "header", "type": "string"},
            ],
        }
