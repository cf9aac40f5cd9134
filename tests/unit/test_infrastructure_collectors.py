"""Unit tests for route collectors.

Tests cover:
- FastAPIRouteCollector: API routes, mounts, hosts, dependencies, schema-hidden routes
- JsonRouteCollector: route dumps and malformed input
"""

import json

import pytest
from fastapi import APIRouter, Depends, FastAPI
from starlette.responses import PlainTextResponse
from starlette.routing import Host, Route, Router

from docbot.core.enums import ErrorCode
from docbot.core.errors import ConfigurationError
from docbot.domain.entities import RouteRecord
from docbot.infrastructure.collectors import FastAPIRouteCollector, JsonRouteCollector
from docbot.infrastructure.collectors.fastapi_collector import (
    callable_reference,
    strip_convertors,
)


def require_token():
    """Dependency standing in for an auth guard."""


def list_users():
    """List users."""
    return []


def create_user():
    return {}


def hidden():
    return {}


def yearly_report(request):
    return PlainTextResponse("report")


def list_orders(request):
    return PlainTextResponse("orders")


def build_app() -> FastAPI:
    """Application with a router, a mount and a host."""
    app = FastAPI()

    router = APIRouter(prefix="/api")
    router.add_api_route(
        "/users",
        list_users,
        methods=["GET"],
        name="api.users.index",
        dependencies=[Depends(require_token)],
    )
    router.add_api_route("/users", create_user, methods=["PUT", "POST"], name="api.users.store")
    router.add_api_route("/internal", hidden, methods=["GET"], include_in_schema=False)
    app.include_router(router)

    app.mount("/admin", Router(routes=[Route("/reports/{year:int}", yearly_report)]))
    app.router.routes.append(
        Host("partner.example.com", Router(routes=[Route("/orders", list_orders)]))
    )

    return app


@pytest.mark.unit
class TestFastAPIHelpers:
    """Test collector helpers."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/users/{id:int}", "/users/{id}"),
            ("/files/{path:path}/{name}", "/files/{path}/{name}"),
            ("/plain", "/plain"),
        ],
    )
    def test_strip_convertors(self, path, expected):
        assert strip_convertors(path) == expected

    def test_callable_reference(self):
        assert callable_reference(list_users) == f"{__name__}:list_users"


@pytest.mark.unit
class TestFastAPIRouteCollector:
    """Test FastAPIRouteCollector.collect()."""

    @pytest.fixture
    def routes(self) -> list[RouteRecord]:
        return FastAPIRouteCollector(build_app()).collect()

    def test_schema_hidden_routes_skipped(self, routes):
        uris = [route.uri for route in routes]

        assert "docs" not in uris
        assert "openapi.json" not in uris
        assert "api/internal" not in uris

    def test_api_routes(self, routes):
        index, store = routes[0], routes[1]

        assert index.methods == ("GET",)
        assert index.uri == "api/users"
        assert index.name == "api.users.index"
        assert index.action == f"{__name__}:list_users"
        assert index.middleware == ("require_token",)
        assert index.domain is None

        assert store.methods == ("POST", "PUT")
        assert store.middleware == ()

    def test_mounted_routes_prefixed(self, routes):
        report = routes[2]

        assert report.uri == "admin/reports/{year}"
        assert report.methods == ("GET",)
        assert report.name == "yearly_report"
        assert report.path_parameters == ("year",)

    def test_host_routes_carry_domain(self, routes):
        orders = routes[3]

        assert orders.uri == "orders"
        assert orders.domain == "partner.example.com"

    def test_registration_order(self, routes):
        assert [route.uri for route in routes] == [
            "api/users",
            "api/users",
            "admin/reports/{year}",
            "orders",
        ]


@pytest.mark.unit
class TestJsonRouteCollector:
    """Test JsonRouteCollector.collect()."""

    def test_reads_route_dump(self, tmp_path):
        dump = tmp_path / "routes.json"
        dump.write_text(
            json.dumps(
                [
                    {
                        "method": "GET|HEAD",
                        "uri": "api/users/{id}",
                        "name": "api.users.show",
                        "action": "app.users:show",
                        "middleware": ["api", "auth"],
                    },
                    {"methods": ["post"], "uri": "/login", "domain": "auth.example.com"},
                ]
            ),
            encoding="utf-8",
        )

        routes = JsonRouteCollector(dump).collect()

        assert routes[0] == RouteRecord.build(
            methods=["GET"],
            uri="api/users/{id}",
            name="api.users.show",
            action="app.users:show",
            middleware=["api", "auth"],
        )
        assert routes[1].methods == ("POST",)
        assert routes[1].uri == "login"
        assert routes[1].domain == "auth.example.com"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            JsonRouteCollector(tmp_path / "missing.json").collect()

        assert exc_info.value.code == ErrorCode.ROUTE_SOURCE_INVALID

    @pytest.mark.parametrize(
        "content",
        ["not json", '{"uri": "users"}', '["users"]'],
    )
    def test_malformed_dump(self, tmp_path, content):
        dump = tmp_path / "routes.json"
        dump.write_text(content, encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            JsonRouteCollector(dump).collect()

        assert exc_info.value.code == ErrorCode.ROUTE_SOURCE_INVALID

    def test_empty_dump(self, tmp_path):
        dump = tmp_path / "routes.json"
        dump.write_text("[]", encoding="utf-8")

        assert JsonRouteCollector(dump).collect() == []
