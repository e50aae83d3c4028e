"""Deterministic text cleaning rules for stored article content.

Responsibilities:
- Repair article text that was saved with HTML markup, character entities,
  and backslash-escape artifacts.
- Keep the rule order explicit, since later rules assume earlier ones ran.

Key types:
- `CleanerRule`: protocol implemented by every rule.
- `TextCleaner`: ordered rule pipeline with optional per-rule diagnostics.
- `clean_text`: module-level entry point used by record cleaning.
"""

from __future__ import annotations

from dataclasses import dataclass
import html
import re
from typing import Protocol

from bs4 import BeautifulSoup


# Applied in order. `\\` must stay last so that a backslash it produces is
# never consumed by an earlier pair.
BACKSLASH_ESCAPE_TABLE: tuple[tuple[str, str], ...] = (
    ("\\,", ","),
    ("\\-", "-"),
    ("\\/", "/"),
    ("//", ""),
    ("/.", "."),
    ("\\.", "."),
    ("\\:", ":"),
    ("\\;", ";"),
    ("\\'", "'"),
    ('\\"', '"'),
    ("\\(", "("),
    ("\\)", ")"),
    ("\\[", "["),
    ("\\]", "]"),
    ("\\!", "!"),
    ("\\?", "?"),
    ("\\n", "\n"),
    ("\\r", "\r"),
    ("\\t", "\t"),
    ("\\\\", "\\"),
)


class CleanerRule(Protocol):
    """Protocol for text cleaning rules."""

    name: str

    def apply(self, text: str) -> str:
        """Apply a single cleaning transformation."""


class DecodeHtmlEntities:
    """Replace named and numeric character references with literal characters."""

    name = "decode_entities"

    def apply(self, text: str) -> str:
        """Decode entities such as `&amp;`, `&eacute;` and `&#39;`."""

        return html.unescape(text)


class StripHtmlTags:
    """Remove HTML tags while keeping the text between them.

    Entities are already decoded when this rule runs, so literal `&` is
    re-escaped before parsing and comes back unchanged. A `<` followed by
    whitespace stays as text; a tag left open at the end of the text is dropped.
    """

    name = "strip_tags"

    _UNCLOSED_TRAILING_TAG_RE = re.compile(r"<(?=[A-Za-z/!?])[^<>]*\Z")

    def apply(self, text: str) -> str:
        """Drop tag markup, including comments and self-closing tags."""

        if "<" not in text:
            return text
        markup = self._UNCLOSED_TRAILING_TAG_RE.sub("", text).replace("&", "&amp;")
        soup = BeautifulSoup(markup, "html.parser")
        return soup.get_text()


class RepairBackslashEscapes:
    """Undo backslash-escape artifacts using an ordered rewrite table."""

    name = "repair_escapes"

    def __init__(self, table: tuple[tuple[str, str], ...] = BACKSLASH_ESCAPE_TABLE) -> None:
        """Initialize with the rewrite table applied in sequence."""

        self.table = table

    def apply(self, text: str) -> str:
        """Apply every `(sequence, replacement)` pair in table order."""

        for sequence, replacement in self.table:
            text = text.replace(sequence, replacement)
        return text


class CollapseWhitespace:
    """Collapse whitespace runs to single spaces and trim both ends."""

    name = "collapse_whitespace"

    _WHITESPACE_RE = re.compile(r"\s+")

    def apply(self, text: str) -> str:
        """Normalize whitespace left behind by earlier rules."""

        return self._WHITESPACE_RE.sub(" ", text).strip()


@dataclass(frozen=True, slots=True)
class TextCleaningReport:
    """Structured output of one cleaning run.

    Attributes:
        cleaned_text: Final text after every rule ran.
        applied_rules: Names of rules that changed the text, in pipeline order.
    """

    cleaned_text: str
    applied_rules: tuple[str, ...]


class TextCleaner:
    """Apply a sequence of deterministic cleaner rules."""

    def __init__(self, rules: list[CleanerRule] | None = None) -> None:
        """Initialize with custom rules or the default article rule sequence."""

        self.rules = rules or [
            DecodeHtmlEntities(),
            StripHtmlTags(),
            RepairBackslashEscapes(),
            CollapseWhitespace(),
        ]

    def clean_with_report(self, text: str) -> TextCleaningReport:
        """Apply all configured rules and record which of them changed the text."""

        current = text
        applied: list[str] = []
        for rule in self.rules:
            updated = rule.apply(current)
            if updated != current:
                applied.append(rule.name)
            current = updated
        return TextCleaningReport(cleaned_text=current, applied_rules=tuple(applied))

    def clean(self, text: str) -> str:
        """Apply all configured rules in order."""

        return self.clean_with_report(text).cleaned_text


_DEFAULT_CLEANER = TextCleaner()


def clean_text(text: str | None) -> str | None:
    """Return display-ready article text.

    `None` and the empty string are returned unchanged. Any other value runs
    through entity decoding, tag stripping, escape repair and whitespace
    collapsing, in that order.

    Note that the escape table removes every `//`, so URL separators such as
    `http://` lose their slashes.
    """

    if not text:
        return text
    return _DEFAULT_CLEANER.clean(text)
