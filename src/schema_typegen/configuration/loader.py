"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_typegen.type_rendering.render_options import (
    ExportMode,
    OutputFormat,
    RenderError,
    resolve_export_mode,
    resolve_output_format,
)

from .runtime_settings import ProjectConfiguration

DEFAULT_SCHEMA_PATH = "./schemas"
DEFAULT_OUTPUT_PATH = "./types"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration(base_path: Path | None = None) -> ProjectConfiguration:
    """Return settings used when no configuration file is present."""
    base = base_path or Path.cwd()
    return ProjectConfiguration(
        path=None,
        name=None,
        description=None,
        version=None,
        schema_path=_resolve_path(base, DEFAULT_SCHEMA_PATH),
        output_path=_resolve_path(base, DEFAULT_OUTPUT_PATH),
        output_format=OutputFormat.STRUCTURAL,
        include_comments=True,
        export_mode=None,
    )


def load_configuration(config_path: Path | str) -> ProjectConfiguration:
    """Load and validate the project configuration file."""
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

    base_path = path.resolve().parent
    schema_path = _path_setting(parsed, "schema_path", DEFAULT_SCHEMA_PATH)
    output_path = _path_setting(parsed, "output_path", DEFAULT_OUTPUT_PATH)
    return ProjectConfiguration(
        path=path,
        name=_optional_string(parsed.get("name"), "name"),
        description=_optional_string(parsed.get("description"), "description"),
        version=_optional_scalar_string(parsed.get("version"), "version"),
        schema_path=_resolve_path(base_path, schema_path),
        output_path=_resolve_path(base_path, output_path),
        output_format=_parse_output_format(parsed.get("format")),
        include_comments=_parse_bool(parsed.get("include_comments", True), "include_comments"),
        export_mode=_parse_export_mode(parsed.get("export_mode")),
    )


def _parse_output_format(value: Any) -> OutputFormat:
    if value is None:
        return OutputFormat.STRUCTURAL
    if not isinstance(value, str):
        raise ConfigurationError("format must be one of: ts, js, json.")
    try:
        return resolve_output_format(value.strip().lower())
    except RenderError as exc:
        raise ConfigurationError(f"format '{value}' must be one of: ts, js, json.") from exc


def _parse_export_mode(value: Any) -> ExportMode | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError("export_mode must be one of: named, default, both.")
    try:
        return resolve_export_mode(value.strip().lower())
    except RenderError as exc:
        raise ConfigurationError(
            f"export_mode '{value}' must be one of: named, default, both."
        ) from exc


def _parse_bool(value: Any, label: str) -> bool:
    if isinstance(value, bool):
        return value
    raise ConfigurationError(f"{label} must be a boolean.")


def _path_setting(section: Mapping[str, Any], label: str, default: str) -> str:
    parsed = _optional_string(section.get(label), label)
    return parsed if parsed else default


def _optional_string(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{label} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_scalar_string(value: Any, label: str) -> str | None:
    if isinstance(value, int | float) and not isinstance(value, bool):
        return str(value)
    return _optional_string(value, label)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
