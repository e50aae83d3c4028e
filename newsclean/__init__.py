"""Top-level package for newsclean.

This package repairs stored news-article text for display: it decodes HTML
entities, strips markup, undoes backslash-escape artifacts and collapses
whitespace. The main entry points are `clean_text` and `clean_record`.
"""

from .records import ARTICLE_TEXT_FIELDS, clean_record, clean_records
from .text.cleaners import clean_text

__all__ = [
    "ARTICLE_TEXT_FIELDS",
    "clean_record",
    "clean_records",
    "clean_text",
    "__version__",
]

__version__ = "0.1.0"
