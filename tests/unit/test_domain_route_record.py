"""Unit tests for the RouteRecord entity.

Tests cover:
- Method normalization (upper-case, de-duplication, HEAD/OPTIONS dropped)
- Leading slash removal and path parameter extraction
- Loose mapping input (route dumps)
"""

import pytest

from docbot.domain.entities import RouteRecord
from docbot.domain.entities.route_record import extract_path_parameters


@pytest.mark.unit
class TestRouteRecordBuild:
    """Test RouteRecord.build()."""

    def test_normalizes_methods(self):
        route = RouteRecord.build(methods=["get", "HEAD", "GET", "options", "post"], uri="/x")
        assert route.methods == ("GET", "POST")

    def test_strips_leading_slash(self):
        route = RouteRecord.build(methods=["GET"], uri="/api/users")
        assert route.uri == "api/users"

    def test_root_uri_becomes_empty(self):
        route = RouteRecord.build(methods=["GET"], uri="/")
        assert route.uri == ""

    def test_empty_optionals_become_none(self):
        route = RouteRecord.build(methods=["GET"], uri="x", name="", action="", domain="")
        assert route.name is None
        assert route.action is None
        assert route.domain is None

    def test_middleware_deduplicated(self):
        route = RouteRecord.build(methods=["GET"], uri="x", middleware=["api", "auth", "api"])
        assert route.middleware == ("api", "auth")

    def test_path_parameters(self):
        route = RouteRecord.build(methods=["GET"], uri="users/{id}/posts/{postId?}")
        assert route.path_parameters == ("id", "postId")


@pytest.mark.unit
class TestPathParameters:
    """Test placeholder extraction."""

    @pytest.mark.parametrize(
        ("uri", "expected"),
        [
            ("users", ()),
            ("users/{id}", ("id",)),
            ("{a}/{b?}/{a}", ("a", "b")),
            ("files/{path:path}", ()),
        ],
    )
    def test_extract(self, uri, expected):
        assert extract_path_parameters(uri) == expected


@pytest.mark.unit
class TestRouteRecordFromMapping:
    """Test RouteRecord.from_mapping()."""

    def test_pipe_separated_method_string(self):
        route = RouteRecord.from_mapping(
            {
                "method": "GET|HEAD",
                "uri": "api/users/{id}",
                "name": "api.users.show",
                "action": "app.users:show",
                "middleware": ["api", "auth"],
            }
        )

        assert route.methods == ("GET",)
        assert route.uri == "api/users/{id}"
        assert route.name == "api.users.show"
        assert route.action == "app.users:show"
        assert route.middleware == ("api", "auth")
        assert route.path_parameters == ("id",)

    def test_methods_list_takes_precedence(self):
        route = RouteRecord.from_mapping({"methods": ["PUT"], "method": "GET", "uri": "x"})
        assert route.methods == ("PUT",)

    def test_tolerates_missing_fields(self):
        route = RouteRecord.from_mapping({})
        assert route.methods == ()
        assert route.uri == ""
        assert route.name is None
        assert route.middleware == ()
