"""Text cleanup components for article content.

This package provides the deterministic cleaning rules applied to article text
at read time, plus slug derivation for category labels.
"""

from .cleaners import (
    BACKSLASH_ESCAPE_TABLE,
    CollapseWhitespace,
    DecodeHtmlEntities,
    RepairBackslashEscapes,
    StripHtmlTags,
    TextCleaner,
    TextCleaningReport,
    clean_text,
)
from .slug import slugify_category

__all__ = [
    "BACKSLASH_ESCAPE_TABLE",
    "TextCleaner",
    "TextCleaningReport",
    "DecodeHtmlEntities",
    "StripHtmlTags",
    "RepairBackslashEscapes",
    "CollapseWhitespace",
    "clean_text",
    "slugify_category",
]
