"""Route description extractors."""

from docbot.infrastructure.descriptions.docstring_extractor import (
    DocstringDescriptionExtractor,
)

__all__ = ["DocstringDescriptionExtractor"]
