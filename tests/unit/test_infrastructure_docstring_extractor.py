"""Unit tests for DocstringDescriptionExtractor."""

import importlib
from unittest.mock import MagicMock, patch

import pytest

from docbot.infrastructure.descriptions import DocstringDescriptionExtractor
from docbot.infrastructure.descriptions.docstring_extractor import first_sentence


def show_user(user_id: int):
    """Show a single user
    by id.

    Args:
        user_id: User identifier.
    """


def store_user():
    """Store a user
    @throws ValidationError
    """


def undocumented():
    pass


class UserController:
    def index(self):
        """List users | paginated"""


@pytest.mark.unit
class TestFirstSentence:
    """Test first_sentence()."""

    @pytest.mark.parametrize(
        ("docstring", "expected"),
        [
            ("List users.", "List users."),
            ("Show a single user\nby id.\n\nArgs:\n    x: y", "Show a single user by id."),
            ("One. Two.", "One. Two."),
            ("First line.\nSecond line.", "First line."),
            ("Store a user\n@throws Error", "Store a user"),
            ("Update\n:param id: identifier", "Update"),
            ("", ""),
            ("   \nLater", ""),
        ],
    )
    def test_first_sentence(self, docstring, expected):
        assert first_sentence(docstring) == expected


@pytest.mark.unit
class TestDocstringDescriptionExtractor:
    """Test DocstringDescriptionExtractor.extract()."""

    def test_function_docstring(self):
        extractor = DocstringDescriptionExtractor()
        assert extractor.extract(f"{__name__}:show_user") == "Show a single user by id."

    def test_stops_at_directive(self):
        extractor = DocstringDescriptionExtractor()
        assert extractor.extract(f"{__name__}:store_user") == "Store a user"

    def test_method_docstring(self):
        extractor = DocstringDescriptionExtractor()
        assert (
            extractor.extract(f"{__name__}:UserController.index")
            == "List users | paginated"
        )

    def test_undocumented(self):
        assert DocstringDescriptionExtractor().extract(f"{__name__}:undocumented") == ""

    @pytest.mark.parametrize(
        "action",
        [
            "Closure",
            "module_that_does_not_exist_xyz:handler",
            f"{__name__}:missing_function",
            f"{__name__}:",
            ".users:index",
            "..:index",
        ],
    )
    def test_unresolvable_actions(self, action):
        logger = MagicMock()
        extractor = DocstringDescriptionExtractor(logger=logger)

        assert extractor.extract(action) == ""

    def test_unresolvable_action_logged_at_debug(self):
        logger = MagicMock()
        extractor = DocstringDescriptionExtractor(logger=logger)

        extractor.extract("module_that_does_not_exist_xyz:handler")

        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["action"] == (
            "module_that_does_not_exist_xyz:handler"
        )

    def test_module_raising_on_import_yields_empty_description(self):
        logger = MagicMock()
        extractor = DocstringDescriptionExtractor(logger=logger)

        with patch("importlib.import_module", side_effect=RuntimeError("settings missing")):
            assert extractor.extract("app.users:index") == ""

        logger.debug.assert_called_once()
        assert logger.debug.call_args.kwargs["error_type"] == "RuntimeError"
        assert logger.debug.call_args.kwargs["error"] == "settings missing"

    def test_results_cached(self):
        extractor = DocstringDescriptionExtractor()

        with patch("importlib.import_module", wraps=importlib.import_module) as import_module:
            first = extractor.extract(f"{__name__}:show_user")
            second = extractor.extract(f"{__name__}:show_user")

        assert first == second
        import_module.assert_called_once()
