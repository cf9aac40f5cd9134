"""DescriptionExtractorProtocol - route description lookup.

Writers show a one-line description per route. Where that text comes from
(docstrings, a static mapping) is an adapter concern.
"""

from typing import Protocol


class DescriptionExtractorProtocol(Protocol):
    """Return a short description for a route action.

    Implementations must be pure within a run: the same action always
    yields the same text. Unknown actions yield an empty string.
    """

    def extract(self, action: str) -> str:
        """Return the description for an action reference ("" when none)."""
        ...
