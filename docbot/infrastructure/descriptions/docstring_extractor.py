"""Route descriptions taken from endpoint docstrings.

The description is the docstring's first sentence: lines up to the first
blank line or directive line (``@...``, ``:param ...``), stopping early after
a line that ends with a period. Lines are joined with single spaces.

    def show_user(user_id: int):
        \"\"\"Show a single user
        by id.

        Args:
            user_id: ...
        \"\"\"

    extractor.extract("app.users:show_user")   # "Show a single user by id."
"""

import importlib
import inspect

from docbot.domain.protocols import LoggerProtocol

DIRECTIVE_PREFIXES = ("@", ":")


def first_sentence(docstring: str) -> str:
    """Return the leading sentence of a cleaned docstring."""
    collected: list[str] = []

    for line in docstring.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(DIRECTIVE_PREFIXES):
            break

        collected.append(stripped)
        if stripped.endswith("."):
            break

    return " ".join(collected)


class DocstringDescriptionExtractor:
    """Extract descriptions from ``"module:qualname"`` action references.

    Results are cached per instance; unresolvable actions yield "".

    Args:
        logger: Optional logger; unresolvable actions are reported at debug level.
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        self._logger = logger
        self._cache: dict[str, str] = {}

    def extract(self, action: str) -> str:
        """Return the description for an action reference."""
        if action not in self._cache:
            self._cache[action] = self._lookup(action)
        return self._cache[action]

    def _lookup(self, action: str) -> str:
        module_name, sep, qualname = action.partition(":")
        if not sep or not module_name or not qualname:
            return ""

        try:
            target: object = importlib.import_module(module_name)
            for part in qualname.split("."):
                target = getattr(target, part)
        except Exception as exc:
            # Importing user code can fail in any way; descriptions are optional.
            if self._logger is not None:
                self._logger.debug(
                    "Route action not resolvable; no description",
                    action=action,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
            return ""

        docstring = inspect.getdoc(target)
        return first_sentence(docstring) if docstring else ""
