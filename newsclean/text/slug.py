"""Deterministic slug helpers for article categories.

Responsibilities:
- Derive the `categorySlug` stored next to a free-form category label.
- Keep slug behavior locale-independent so the same label always maps to the same slug.
"""

from __future__ import annotations

import re
import unicodedata


_WHITESPACE_RE = re.compile(r"\s+")
_NON_SLUG_RE = re.compile(r"[^\w\-]+", flags=re.ASCII)


def slugify_category(value: str) -> str:
    """Return an ASCII slug for a category label.

    Accents are folded to their base letters, whitespace runs become `-` and any
    other character outside `[A-Za-z0-9_-]` is dropped.
    """

    normalized = unicodedata.normalize("NFKD", value)
    ascii_only = normalized.encode("ascii", "ignore").decode("ascii")
    lowered = ascii_only.lower().strip()
    hyphenated = _WHITESPACE_RE.sub("-", lowered)
    return _NON_SLUG_RE.sub("", hyphenated)
