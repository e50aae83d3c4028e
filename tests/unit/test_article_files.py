"""Unit tests for article JSON file storage and ordering."""

from __future__ import annotations

from pathlib import Path

import pytest

from newsclean.io.article_files import ArticleFileStore, sort_newest_first


def test_article_file_store_roundtrip_object_and_list(tmp_path: Path) -> None:
    """Saved documents should load back with the same content."""

    store = ArticleFileStore(tmp_path / "store")

    object_path = store.save(Path("one/article.json"), {"title": "Café"})
    list_path = store.save(Path("list.json"), [{"title": "a"}, {"title": "b"}])

    assert object_path.exists()
    assert list_path.exists()
    assert store.load(Path("one/article.json")) == {"title": "Café"}
    assert store.load(Path("list.json")) == [{"title": "a"}, {"title": "b"}]
    assert "Café" in object_path.read_text(encoding="utf-8")


def test_article_file_store_respects_indent(tmp_path: Path) -> None:
    """Indentation `None` should produce single-line JSON."""

    store = ArticleFileStore(tmp_path, indent=None)

    assert store.dumps([{"a": 1}]) == '[{"a": 1}]'
    assert ArticleFileStore(tmp_path, indent=2).dumps({"a": 1}) == '{\n  "a": 1\n}'


def test_article_file_store_missing_file_raises(tmp_path: Path) -> None:
    """Loading a missing document should raise `FileNotFoundError`."""

    with pytest.raises(FileNotFoundError):
        ArticleFileStore(tmp_path).load(Path("nope.json"))


@pytest.mark.parametrize(
    ("raw_text", "message"),
    [
        ("{not json", "not valid JSON"),
        ('"just a string"', "must contain a JSON object or a list"),
        ('[{"title": "a"}, 3]', "item 1 must be a JSON object"),
    ],
)
def test_article_file_store_rejects_malformed_documents(
    tmp_path: Path, raw_text: str, message: str
) -> None:
    """Invalid JSON and wrong shapes should raise `ValueError`."""

    (tmp_path / "bad.json").write_text(raw_text, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ArticleFileStore(tmp_path).load(Path("bad.json"))


def test_sort_newest_first_orders_descending_and_keeps_undated_last() -> None:
    """Records should be ordered by `createdAt` descending with ties stable."""

    records = [
        {"_id": "old", "createdAt": "2024-01-01T00:00:00.000Z"},
        {"_id": "undated"},
        {"_id": "new", "createdAt": "2024-03-01T00:00:00.000Z"},
        {"_id": "new-twin", "createdAt": "2024-03-01T00:00:00.000Z"},
    ]

    ordered = sort_newest_first(records)

    assert [record["_id"] for record in ordered] == ["new", "new-twin", "old", "undated"]
    assert [record["_id"] for record in records][0] == "old"


def test_sort_newest_first_with_custom_key() -> None:
    """A custom key should be honored."""

    records = [{"publishedAt": "2020"}, {"publishedAt": "2021"}]

    assert sort_newest_first(records, key="publishedAt") == [
        {"publishedAt": "2021"},
        {"publishedAt": "2020"},
    ]
