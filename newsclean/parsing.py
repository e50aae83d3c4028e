"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_field_list(value: object, field_name: str) -> tuple[str, ...]:
    """Parse a field-name list from a comma-separated string or a YAML sequence.

    Blank entries are dropped and duplicates keep their first position.

    Raises:
        ValueError: If the value is neither a string nor a list, or yields no names.
    """

    if isinstance(value, str):
        raw_items: list[object] = list(value.split(","))
    elif isinstance(value, (list, tuple)):
        raw_items = list(value)
    else:
        raise ValueError(f"`{field_name}` must be a comma-separated string or a list.")

    names: list[str] = []
    for item in raw_items:
        name = normalize_optional_string(item)
        if name is not None and name not in names:
            names.append(name)
    if not names:
        raise ValueError(f"`{field_name}` must name at least one field.")
    return tuple(names)
