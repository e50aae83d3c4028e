"""Shared pytest fixtures for the full newsclean test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def dirty_articles() -> list[dict[str, Any]]:
    """Provide stored articles with markup, entities and escape artifacts."""

    return [
        {
            "_id": "a1",
            "title": "<h1>Markets &amp; Money</h1>",
            "description": "Stocks \\(briefly\\) rallied\\.",
            "content": "<p>It\\'s   been a <b>long</b> week\\!</p>",
            "author": " Jane&nbsp;Doe ",
            "category": "Business",
            "categorySlug": "business",
            "image": "https://cdn.example.com/img/a1.png",
            "tags": ["markets", "weekly"],
            "createdAt": "2024-05-01T08:00:00.000Z",
        },
        {
            "_id": "a2",
            "title": "Caf&eacute; opens",
            "content": None,
            "category": "Local",
            "image": "https://cdn.example.com/img/a2.png",
            "createdAt": "2024-05-03T08:00:00.000Z",
        },
    ]


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper writing a JSON payload under `tmp_path`."""

    def _write(name: str, payload: object) -> Path:
        """Write `payload` to `tmp_path / name` and return the path."""

        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
