"""Route collector for FastAPI / Starlette applications.

Walks the application's route table, descending into mounted sub-apps
(``Mount``, path prefix) and host-bound routers (``Host``, domain). WebSocket
routes and routes hidden from the schema (/docs, /openapi.json) are skipped.

Mapping to RouteRecord:
    methods     route.methods (HEAD/OPTIONS dropped)
    uri         mount prefix + route.path, convertors removed ("{id:int}" -> "{id}")
    name        route.name
    action      "<module>:<qualname>" of the endpoint
    middleware  names of route-level dependencies (APIRoute only)
    domain      enclosing Host pattern
"""

import re
from collections.abc import Iterable

from fastapi import FastAPI
from fastapi.routing import APIRoute
from starlette.routing import BaseRoute, Host, Mount, Route

from docbot.domain.entities import RouteRecord

CONVERTOR_PATTERN = re.compile(r"\{(\w+):[^}]+\}")


def strip_convertors(path: str) -> str:
    """Remove Starlette path convertors ("{id:int}" -> "{id}")."""
    return CONVERTOR_PATTERN.sub(r"{\1}", path)


def callable_reference(target: object) -> str | None:
    """``"module:qualname"`` for a function or class, None when unnamed."""
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None)
    if not module or not qualname:
        return None
    return f"{module}:{qualname}"


def dependency_names(route: APIRoute) -> list[str]:
    """Names of the dependencies declared on the route itself."""
    names: list[str] = []
    for dependency in route.dependencies:
        target = dependency.dependency
        if target is None:
            continue
        names.append(getattr(target, "__name__", type(target).__name__))
    return names


class FastAPIRouteCollector:
    """Collect RouteRecords from a FastAPI (or Starlette) application.

    Args:
        app: Application whose ``routes`` are walked.
    """

    def __init__(self, app: FastAPI) -> None:
        self._app = app

    def collect(self) -> list[RouteRecord]:
        """Return every HTTP route in registration order."""
        return list(self._walk(self._app.routes, prefix="", domain=None))

    def _walk(
        self,
        routes: Iterable[BaseRoute],
        *,
        prefix: str,
        domain: str | None,
    ) -> Iterable[RouteRecord]:
        for route in routes:
            if isinstance(route, Route):
                if not route.include_in_schema:
                    continue
                yield self._record(route, prefix=prefix, domain=domain)
            elif isinstance(route, Mount):
                yield from self._walk(
                    route.routes, prefix=prefix + route.path, domain=domain
                )
            elif isinstance(route, Host):
                yield from self._walk(route.routes, prefix=prefix, domain=route.host)

    @staticmethod
    def _record(route: Route, *, prefix: str, domain: str | None) -> RouteRecord:
        middleware = dependency_names(route) if isinstance(route, APIRoute) else []

        return RouteRecord.build(
            methods=sorted(route.methods or ()),
            uri=strip_convertors(prefix + route.path),
            name=route.name,
            action=callable_reference(route.endpoint),
            middleware=middleware,
            domain=domain,
        )
