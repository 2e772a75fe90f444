"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from schema_fragments.fragment_resolution import (
    DEFAULT_MAX_RESOLUTION_DEPTH,
    DEFAULT_REFERENCE_KEY,
)

from .runtime_settings import ResolutionSettings, ResolverSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> ResolverSettings:
    """Load and validate a YAML or JSON resolver configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_dir = _resolve_path(
        path.parent, _optional_string(parsed.get("base_dir"), "base_dir") or "."
    )
    schema_value = _optional_string(parsed.get("schema"), "schema")
    schema = _resolve_path(base_dir, schema_value) if schema_value else None
    components = tuple(
        _resolve_path(base_dir, item)
        for item in _normalize_string_sequence(parsed.get("components"), "components")
    )
    resolution = _parse_resolution_section(parsed.get("resolution"))

    return ResolverSettings(
        path=path,
        base_dir=base_dir,
        schema=schema,
        components=components,
        resolution=resolution,
    )


def default_settings(base_dir: Path | str) -> ResolverSettings:
    """Settings used when no configuration file is given."""
    return ResolverSettings(
        path=None,
        base_dir=Path(base_dir).resolve(),
        schema=None,
        components=(),
        resolution=ResolutionSettings(),
    )


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    if value is None:
        return ResolutionSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'resolution' must be a mapping.")
    reference_key = _require_non_empty_string(
        value.get("reference_key", DEFAULT_REFERENCE_KEY), "resolution.reference_key"
    )
    max_depth = _require_positive_int(
        value.get("max_depth", DEFAULT_MAX_RESOLUTION_DEPTH), "resolution.max_depth"
    )
    return ResolutionSettings(reference_key=reference_key, max_depth=max_depth)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
