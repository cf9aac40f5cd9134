"""Unit tests for the YAML emitter.

Tests cover:
- Block layout for nested mappings and sequences
- Empty collections
- Scalar quoting rules for values and keys
- Determinism
"""

import pytest

from docbot.infrastructure.writers.yaml_emitter import dump_yaml, format_key, format_scalar


@pytest.mark.unit
class TestLayout:
    """Test document layout."""

    def test_nested_mapping(self):
        assert dump_yaml({"info": {"title": "api API", "version": "1.0.0"}}) == (
            "info:\n  title: api API\n  version: 1.0.0\n"
        )

    def test_sequence_of_mappings_starts_on_dash_line(self):
        data = {"servers": [{"url": "https://api.example.com", "description": "Api server"}]}

        assert dump_yaml(data) == (
            "servers:\n"
            "  - url: 'https://api.example.com'\n"
            "    description: Api server\n"
        )

    def test_nested_collections_inside_sequence_items(self):
        data = {"parameters": [{"name": "id", "schema": {"type": "string"}}]}

        assert dump_yaml(data) == (
            "parameters:\n"
            "  - name: id\n"
            "    schema:\n"
            "      type: string\n"
        )

    def test_scalar_sequence(self):
        assert dump_yaml({"tags": ["Users", "Posts"]}) == "tags:\n  - Users\n  - Posts\n"

    def test_empty_collections(self):
        assert dump_yaml({"paths": {}, "security": [{"bearerAuth": []}]}) == (
            "paths: {}\nsecurity:\n  - bearerAuth: []\n"
        )

    def test_empty_document(self):
        assert dump_yaml({}) == "{}\n"

    def test_deterministic(self):
        data = {"b": [1, {"c": None}], "a": True}
        assert dump_yaml(data) == dump_yaml(data)
        assert dump_yaml(data) == "b:\n  - 1\n  - c: null\na: true\n"


@pytest.mark.unit
class TestScalars:
    """Test scalar formatting."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "null"),
            (True, "true"),
            (False, "false"),
            (200, "200"),
            (1.5, "1.5"),
            ("plain text", "plain text"),
            ("application/json", "application/json"),
            ("3.0.0", "3.0.0"),
        ],
    )
    def test_plain(self, value, expected):
        assert format_scalar(value) == expected

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("", "''"),
            ("Path parameter: id", "'Path parameter: id'"),
            ("https://api.example.com", "'https://api.example.com'"),
            ("it's", "'it''s'"),
            (" padded", "' padded'"),
            ("true", "'true'"),
            ("no", "'no'"),
            ("null", "'null'"),
            ("123", "'123'"),
            ("1e3", "'1e3'"),
            ("0x1F", "'0x1F'"),
            ("get_users-list", "'get_users-list'"),
        ],
    )
    def test_single_quoted(self, value, expected):
        assert format_scalar(value) == expected

    def test_line_breaks_double_quoted(self):
        assert format_scalar("first\nsecond") == '"first\\nsecond"'


@pytest.mark.unit
class TestKeys:
    """Test key formatting."""

    @pytest.mark.parametrize(
        "key", ["/users", "/users/{id}", "application/json", "bearerAuth", "get"]
    )
    def test_plain_keys(self, key):
        assert format_key(key) == key

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("200", "'200'"),
            (404, "'404'"),
            ("", "''"),
            ("-dash", "'-dash'"),
            ("a: b", "'a: b'"),
            ("yes", "'yes'"),
        ],
    )
    def test_quoted_keys(self, key, expected):
        assert format_key(key) == expected
