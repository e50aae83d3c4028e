"""Article document storage on the local filesystem.

Responsibilities:
- Load JSON documents holding one article object or a list of article objects.
- Save cleaned payloads as UTF-8 JSON.
- Order collections newest first, as list reads expect.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence


ArticlePayload = dict[str, Any] | list[dict[str, Any]]


class ArticleFileStore:
    """Filesystem-backed store for article JSON documents."""

    def __init__(self, root: Path, indent: int | None = 2) -> None:
        """Initialize the store with a root directory and JSON indentation."""

        self.root = root
        self.indent = indent

    def load(self, relative_path: Path) -> ArticlePayload:
        """Load one article or a list of articles.

        Raises:
            FileNotFoundError: If the document does not exist.
            ValueError: If the document is not valid JSON or has the wrong shape.
        """

        path = self.root / relative_path
        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = json.loads(raw_text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Article file `{path}` is not valid JSON: {exc.msg}.") from exc
        return _validate_payload(payload, path)

    def save(self, relative_path: Path, payload: ArticlePayload) -> Path:
        """Save an article payload and return the final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(payload) + "\n", encoding="utf-8")
        return path

    def dumps(self, payload: ArticlePayload) -> str:
        """Serialize a payload the same way `save` writes it."""

        return json.dumps(payload, ensure_ascii=False, indent=self.indent)


def _validate_payload(payload: object, path: Path) -> ArticlePayload:
    """Ensure a decoded document is an object or a list of objects."""

    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        for index, item in enumerate(payload):
            if not isinstance(item, dict):
                raise ValueError(
                    f"Article file `{path}` item {index} must be a JSON object."
                )
        return payload
    raise ValueError(f"Article file `{path}` must contain a JSON object or a list of objects.")


def sort_newest_first(
    records: Sequence[Mapping[str, Any]],
    key: str = "createdAt",
) -> list[Mapping[str, Any]]:
    """Return records ordered by `key` descending; records without it go last.

    Ties keep their input order. Values are compared as strings, which orders
    ISO-8601 timestamps chronologically.
    """

    dated = [record for record in records if record.get(key) is not None]
    undated = [record for record in records if record.get(key) is None]
    dated_sorted = sorted(dated, key=lambda record: str(record[key]), reverse=True)
    return dated_sorted + undated
