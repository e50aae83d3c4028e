"""Record-level cleaning for article documents.

Responsibilities:
- Apply `clean_text` to the text-bearing fields of one article or a list of articles.
- Accept mapper objects that need an explicit conversion to plain data first.

Key types:
- `ArticleRecord`: plain mapping of field name to value.
- `SupportsToDict`: capability check for objects exposing `to_dict()`.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Protocol, Sequence, Union, runtime_checkable

from .text.cleaners import clean_text


ARTICLE_TEXT_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "content",
    "author",
    "category",
)

ArticleRecord = Mapping[str, Any]


@runtime_checkable
class SupportsToDict(Protocol):
    """Objects that convert themselves into a plain field mapping."""

    def to_dict(self) -> Mapping[str, Any]:
        """Return the plain-data view of the object."""


RecordInput = Union[ArticleRecord, SupportsToDict]


def to_plain_record(value: RecordInput) -> dict[str, Any]:
    """Return a new plain dict for a mapping or a `to_dict()`-capable object."""

    if isinstance(value, SupportsToDict):
        return dict(value.to_dict())
    return dict(value)


def _clean_single(value: RecordInput, fields: Iterable[str]) -> dict[str, Any]:
    """Clean one record; fields the record does not carry stay absent."""

    record = to_plain_record(value)
    for field_name in fields:
        if field_name in record:
            record[field_name] = clean_text(record[field_name])
    return record


def clean_records(
    records: Iterable[RecordInput],
    fields: Sequence[str] = ARTICLE_TEXT_FIELDS,
) -> list[dict[str, Any]]:
    """Clean every record of a collection, preserving order and length."""

    return [_clean_single(record, fields) for record in records]


def clean_record(
    value: RecordInput | Sequence[RecordInput] | None,
    fields: Sequence[str] = ARTICLE_TEXT_FIELDS,
) -> dict[str, Any] | list[dict[str, Any]] | None:
    """Return a cleaned copy of one article record or of a list of records.

    Args:
        value: A mapping, a `to_dict()`-capable object, a list/tuple of those, or `None`.
        fields: Names of text fields passed through `clean_text`.

    Returns:
        A new dict for a single record, a new list for a sequence, or `None`
        when `value` is `None`. Fields outside `fields` are copied unchanged and
        the input is never mutated.
    """

    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return clean_records(value, fields)
    return _clean_single(value, fields)
