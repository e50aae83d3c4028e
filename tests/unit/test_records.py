"""Unit tests for record-level article cleaning."""

from __future__ import annotations

import copy
from typing import Any

from newsclean.records import (
    ARTICLE_TEXT_FIELDS,
    SupportsToDict,
    clean_record,
    clean_records,
    to_plain_record,
)


class _MappedArticle:
    """Stand-in for a mapper object that exposes plain data through `to_dict()`."""

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data
        self.to_dict_calls = 0

    def to_dict(self) -> dict[str, Any]:
        self.to_dict_calls += 1
        return dict(self._data)


def test_clean_record_cleans_text_fields_and_keeps_null() -> None:
    """Only the text fields are cleaned; `None` values stay `None`."""

    cleaned = clean_record({"title": "<i>X</i>", "content": None})

    assert cleaned == {"title": "X", "content": None}


def test_clean_record_copies_other_fields_unchanged(dirty_articles: list[dict[str, Any]]) -> None:
    """Non-text fields should be copied verbatim, URLs included."""

    original = dirty_articles[0]
    cleaned = clean_record(original)

    assert cleaned["title"] == "Markets & Money"
    assert cleaned["description"] == "Stocks (briefly) rallied."
    assert cleaned["content"] == "It's been a long week!"
    assert cleaned["author"] == "Jane Doe"
    assert cleaned["category"] == "Business"
    for key in ("_id", "categorySlug", "image", "createdAt"):
        assert cleaned[key] == original[key]
    assert cleaned["tags"] is original["tags"]
    assert list(cleaned.keys()) == list(original.keys())


def test_clean_record_does_not_mutate_input(dirty_articles: list[dict[str, Any]]) -> None:
    """The input record and list should be left untouched."""

    snapshot = copy.deepcopy(dirty_articles)

    cleaned = clean_record(dirty_articles)

    assert dirty_articles == snapshot
    assert cleaned is not dirty_articles
    assert cleaned[0] is not dirty_articles[0]


def test_clean_record_keeps_absent_fields_absent() -> None:
    """Fields the record does not carry should not be added."""

    cleaned = clean_record({"title": " A ", "views": 3})

    assert cleaned == {"title": "A", "views": 3}


def test_clean_record_on_sequence_preserves_length_and_order(
    dirty_articles: list[dict[str, Any]],
) -> None:
    """A list input should yield a list of the same length in the same order."""

    cleaned = clean_record(dirty_articles)

    assert isinstance(cleaned, list)
    assert len(cleaned) == len(dirty_articles)
    assert [item["_id"] for item in cleaned] == ["a1", "a2"]
    assert cleaned[1]["title"] == "Café opens"
    assert cleaned[1]["content"] is None


def test_clean_record_accepts_tuple_and_empty_sequences() -> None:
    """Tuples are treated as sequences and empty sequences stay empty."""

    assert clean_record(({"title": "<b>a</b>"}, {"title": "b"})) == [
        {"title": "a"},
        {"title": "b"},
    ]
    assert clean_record([]) == []


def test_clean_record_returns_none_for_none() -> None:
    """A missing record should map to `None`."""

    assert clean_record(None) is None


def test_clean_record_converts_to_dict_capable_objects() -> None:
    """Objects exposing `to_dict()` should be converted before cleaning."""

    article = _MappedArticle({"_id": "m1", "title": "Tom &amp; Jerry", "author": None})

    cleaned = clean_record(article)

    assert article.to_dict_calls == 1
    assert cleaned == {"_id": "m1", "title": "Tom & Jerry", "author": None}


def test_clean_record_converts_each_item_in_sequence() -> None:
    """Mapped objects inside a list should each be converted."""

    articles = [_MappedArticle({"title": "<p>one</p>"}), {"title": "two\\!"}]

    assert clean_record(articles) == [{"title": "one"}, {"title": "two!"}]


def test_clean_record_with_custom_fields() -> None:
    """Only the requested fields should be cleaned."""

    record = {"title": "<b>keep</b>", "summary": "<b>clean</b>"}

    assert clean_record(record, fields=("summary",)) == {
        "title": "<b>keep</b>",
        "summary": "clean",
    }


def test_clean_records_returns_list_for_iterables() -> None:
    """`clean_records` should accept any iterable of records."""

    records = (record for record in [{"category": " Sports "}])

    assert clean_records(records) == [{"category": "Sports"}]


def test_to_plain_record_and_capability_check() -> None:
    """Plain mappings are copied; `to_dict()` objects satisfy the protocol."""

    data = {"title": "x"}
    plain = to_plain_record(data)

    assert plain == data
    assert plain is not data
    assert isinstance(_MappedArticle({}), SupportsToDict)
    assert not isinstance(data, SupportsToDict)


def test_article_text_fields() -> None:
    """The cleaned field set should be the five article text fields."""

    assert ARTICLE_TEXT_FIELDS == ("title", "description", "content", "author", "category")
