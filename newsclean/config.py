"""Configuration model and loaders for newsclean.

Responsibilities:
- Define settings for one record-cleaning run as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `NewscleanConfig`: normalized settings for a cleaning run.
- `ConfigLoader`: static construction helpers for `NewscleanConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_optional_string,
    parse_field_list,
    parse_permissive_boolean,
)
from .records import ARTICLE_TEXT_FIELDS


_DEFAULT_INDENT = 2


@dataclass(slots=True)
class NewscleanConfig:
    """Settings for one record-cleaning run.

    Attributes:
        input_path: JSON document holding one article or a list of articles.
        output_path: Destination JSON document; `None` writes to stdout.
        fields: Text fields passed through the cleaner.
        indent: JSON indentation for written output.
        newest_first: Whether lists are ordered by `createdAt` descending before cleaning.
    """

    input_path: Path
    output_path: Path | None = None
    fields: tuple[str, ...] = ARTICLE_TEXT_FIELDS
    indent: int = _DEFAULT_INDENT
    newest_first: bool = False

    def validate(self) -> None:
        """Validate configuration values before a run."""

        if not self.fields:
            raise ValueError("`fields` must name at least one field.")
        for name in self.fields:
            if not isinstance(name, str) or not name.strip():
                raise ValueError("`fields` entries must be non-empty strings.")
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError("`indent` must be a non-negative integer.")


class ConfigLoader:
    """Factory methods for creating `NewscleanConfig` from external sources."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_path",
            "fields",
            "indent",
            "newest_first",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> NewscleanConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NewscleanConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_path = ConfigLoader._required_env_path(env_map, "NEWSCLEAN_INPUT")
        output_path = ConfigLoader._optional_env_path(env_map, "NEWSCLEAN_OUTPUT")
        raw_fields = ConfigLoader._optional_env_string(env_map, "NEWSCLEAN_FIELDS")
        fields = (
            parse_field_list(raw_fields, "NEWSCLEAN_FIELDS")
            if raw_fields is not None
            else ARTICLE_TEXT_FIELDS
        )
        indent = ConfigLoader._optional_env_non_negative_int(env_map, "NEWSCLEAN_INDENT")
        newest_first = ConfigLoader._optional_env_boolean(env_map, "NEWSCLEAN_NEWEST_FIRST")

        config = NewscleanConfig(
            input_path=input_path,
            output_path=output_path,
            fields=fields,
            indent=_DEFAULT_INDENT if indent is None else indent,
            newest_first=bool(newest_first),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> NewscleanConfig:
        """Build a validated config from a normalized mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        input_path = ConfigLoader._required_path(payload, "input_path", source_label)
        output_value = ConfigLoader._optional_non_empty_string(payload, "output_path")
        fields = (
            parse_field_list(payload["fields"], "fields")
            if payload.get("fields") is not None
            else ARTICLE_TEXT_FIELDS
        )
        indent = ConfigLoader._optional_non_negative_int(
            payload, "indent", source_label, default=_DEFAULT_INDENT
        )
        newest_first = ConfigLoader._optional_boolean(
            payload, "newest_first", source_label, default=False
        )

        config = NewscleanConfig(
            input_path=input_path,
            output_path=Path(output_value) if output_value is not None else None,
            fields=fields,
            indent=indent,
            newest_first=newest_first,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")

    @staticmethod
    def _required_path(payload: Mapping[str, Any], key: str, source_label: str) -> Path:
        """Read a required non-empty path-like field from a payload."""

        value = ConfigLoader._optional_non_empty_string(payload, key)
        if value is None:
            raise ValueError(f"{source_label} requires non-empty `{key}`.")
        return Path(value)

    @staticmethod
    def _optional_non_empty_string(payload: Mapping[str, Any], key: str) -> str | None:
        """Read an optional string field and normalize blank values to `None`."""

        if key not in payload:
            return None
        return normalize_optional_string(payload[key])

    @staticmethod
    def _optional_non_negative_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a non-negative integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a non-negative integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a non-negative integer."
                ) from exc

        if parsed < 0:
            raise ValueError(f"{source_label} field `{key}` must be a non-negative integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _required_env_path(env: Mapping[str, str], key: str) -> Path:
        """Read a required non-empty path value from environment mapping."""

        value = ConfigLoader._optional_env_string(env, key)
        if value is None:
            raise ValueError(f"Environment variable `{key}` is required.")
        return Path(value)

    @staticmethod
    def _optional_env_path(env: Mapping[str, str], key: str) -> Path | None:
        """Read an optional path value from environment mapping."""

        value = ConfigLoader._optional_env_string(env, key)
        if value is None:
            return None
        return Path(value)

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_non_negative_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional non-negative integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(
                f"Environment variable `{key}` must be a non-negative integer."
            ) from exc
        if parsed < 0:
            raise ValueError(f"Environment variable `{key}` must be a non-negative integer.")
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
