"""Markdown writer: one table per route group.

Output:
    # api documentation

    **Base URL:** `{{API_HOST}}` (defaults to https://api.example.com).

    Authenticated via Bearer `{{API_TOKEN}}` in the `Authorization` header.

    ## users
    | Method | Path | Description | Path Params |
    | ------ | ---- | ----------- | ----------- |
    | GET | `users/{id}` | Show a user. | id |
"""

from collections.abc import Sequence

from docbot.core.sanitizer import sanitize_cell
from docbot.domain.entities import RouteRecord
from docbot.domain.value_objects import ResolvedSegment
from docbot.infrastructure.writers.base import (
    BaseRouteWriter,
    capitalize_first,
    route_group,
)

TABLE_HEADER = (
    "| Method | Path | Description | Path Params |\n"
    "| ------ | ---- | ----------- | ----------- |\n"
)


class MarkdownRouteWriter(BaseRouteWriter):
    """Write ``<safe_key>.md`` tables grouped by route name."""

    extension = "md"

    def format(self) -> str:
        return "markdown"

    def render(self, segment: ResolvedSegment, routes: Sequence[RouteRecord]) -> str:
        document = [
            f"# {segment.key} documentation\n\n",
            f"**Base URL:** `{{{{{segment.host_variable}}}}}` "
            f"(defaults to {segment.host_value}).\n\n",
            self._auth_line(segment),
        ]

        groups: dict[str, list[RouteRecord]] = {}
        for route in routes:
            groups.setdefault(route_group(route.name), []).append(route)

        for group, items in groups.items():
            document.append(f"## {group}\n")
            document.append(TABLE_HEADER)
            document.extend(self._row(route) for route in items)
            document.append("\n")

        return "".join(document)

    def _row(self, route: RouteRecord) -> str:
        methods = ", ".join(route.methods)
        uri = sanitize_cell(route.uri)
        description = sanitize_cell(self.describe(route))
        params = sanitize_cell(", ".join(route.path_parameters))
        return f"| {methods} | `{uri}` | {description} | {params} |\n"

    @staticmethod
    def _auth_line(segment: ResolvedSegment) -> str:
        auth = segment.auth
        if auth is None:
            return "Authentication: not required.\n\n"

        return (
            f"Authenticated via {capitalize_first(auth.type.value)} "
            f"`{{{{{auth.token_variable}}}}}` in the `{auth.header}` header.\n\n"
        )
