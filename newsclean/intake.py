"""Preparation of new article payloads before they are stored.

Responsibilities:
- Reject payloads missing a title, body, image or category.
- Fill derived fields: unified `content`, `categorySlug` and `publishedAt`.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

from .errors import ArticleIntakeError
from .parsing import normalize_optional_string
from .text.slug import slugify_category


_BODY_FIELD_LABEL = "content|description"


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with millisecond precision and `Z` suffix."""

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc_moment.microsecond // 1000:03d}Z"


def article_body(record: Mapping[str, Any]) -> Any:
    """Return the unified article body, preferring `content` over `description`."""

    return record.get("content") or record.get("description")


def _is_present(value: object) -> bool:
    """Return whether a payload value counts as provided."""

    return normalize_optional_string(value) is not None


def prepare_article(
    payload: Mapping[str, Any],
    now: datetime | None = None,
) -> dict[str, Any]:
    """Validate a new article payload and return it with derived fields filled.

    Args:
        payload: Incoming article fields.
        now: Timestamp used when `publishedAt` is absent; defaults to current UTC time.

    Raises:
        ArticleIntakeError: If `title`, a body (`content` or `description`),
            `image` or `category` is missing or blank.
    """

    missing: list[str] = []
    if not _is_present(payload.get("title")):
        missing.append("title")
    if not (_is_present(payload.get("content")) or _is_present(payload.get("description"))):
        missing.append(_BODY_FIELD_LABEL)
    if not _is_present(payload.get("image")):
        missing.append("image")
    if not _is_present(payload.get("category")):
        missing.append("category")
    if missing:
        raise ArticleIntakeError(tuple(missing))

    article = dict(payload)
    article["content"] = (
        payload.get("content") if _is_present(payload.get("content")) else payload.get("description")
    )
    if not _is_present(payload.get("categorySlug")):
        article["categorySlug"] = slugify_category(str(payload["category"]))
    if not _is_present(payload.get("publishedAt")):
        article["publishedAt"] = format_timestamp(now or datetime.now(timezone.utc))
    return article
