"""Unit tests for value coercion helpers and sanitizers.

Tests cover:
- string_or_none / string_or_fallback scalar handling
- string_list filtering
- Filename sanitization (replacement, trimming, fallback, idempotence)
- Markdown cell sanitization
"""

import pytest

from docbot.core.sanitizer import FilenameSanitizer, sanitize_cell, sanitize_filename
from docbot.core.values import string_list, string_or_fallback, string_or_none, unique


@pytest.mark.unit
class TestStringCoercion:
    """Test scalar to string coercion."""

    def test_strings_pass_through(self):
        assert string_or_none("api") == "api"
        assert string_or_none("") == ""

    def test_booleans_and_numbers(self):
        assert string_or_none(True) == "true"
        assert string_or_none(False) == "false"
        assert string_or_none(8080) == "8080"
        assert string_or_none(1.5) == "1.5"

    def test_non_scalars_use_fallback(self):
        assert string_or_none(None) is None
        assert string_or_none(["a"]) is None
        assert string_or_none({"a": 1}, "x") == "x"

    def test_string_or_fallback(self):
        assert string_or_fallback(None, "HOST") == "HOST"
        assert string_or_fallback("API_HOST", "HOST") == "API_HOST"


@pytest.mark.unit
class TestStringList:
    """Test list coercion."""

    def test_keeps_order_and_drops_empty_items(self):
        assert string_list(["auth", "", None, 3, ["x"]]) == ["auth", "3"]

    def test_rejects_scalars_and_mappings(self):
        assert string_list("auth") == []
        assert string_list({"auth": True}) == []
        assert string_list(None) == []
        assert string_list(5) == []

    def test_unique_keeps_first_seen_order(self):
        assert unique(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.unit
class TestFilenameSanitizer:
    """Test filename sanitization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("api", "api"),
            ("admin api", "admin-api"),
            ("../../etc/passwd", "..-..-etc-passwd"),
            ("  spaced  ", "spaced"),
            ("v1.2_beta-x", "v1.2_beta-x"),
            ("ümlaut/ß", "mlaut"),
        ],
    )
    def test_sanitize(self, raw, expected):
        assert sanitize_filename(raw) == expected

    @pytest.mark.parametrize("raw", ["", ".", "..", "///", None])
    def test_reserved_results_use_fallback(self, raw):
        assert sanitize_filename(raw) == "unknown"

    def test_call_fallback_overrides_policy(self):
        assert sanitize_filename("..", fallback="segment") == "segment"

    @pytest.mark.parametrize("raw", ["admin api", "a//b", "-x-", "ok.md", "!!"])
    def test_idempotent(self, raw):
        once = sanitize_filename(raw)
        assert sanitize_filename(once) == once

    def test_custom_policy(self):
        sanitizer = FilenameSanitizer(pattern=r"[^a-z]+", replacement="_", fallback="none")
        assert sanitizer.sanitize("Admin Api") == "dmin_pi"
        assert sanitizer.sanitize("123") == "none"


@pytest.mark.unit
class TestSanitizeCell:
    """Test Markdown cell sanitization."""

    def test_collapses_line_breaks(self):
        assert sanitize_cell("first\r\nsecond\nthird\rfourth") == "first second third fourth"

    def test_escapes_pipes_and_backticks(self):
        assert sanitize_cell("a | `b`") == "a \\| \\`b\\`"

    def test_trims(self):
        assert sanitize_cell("  text \n") == "text"
