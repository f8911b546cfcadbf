"""Schema loading and normalization service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .schema_models import CanonicalSchema, Dialect

ROOT_DEFINITION_NAME = "Root"
REMOTE_DEFAULT_TITLE = "Remote API"
REMOTE_DEFAULT_VERSION = "1.0.0"


class SchemaError(Exception):
    """Raised for schema parsing or normalization failures."""


class SchemaSyntaxError(SchemaError):
    """Raised when schema text is not valid JSON."""


class UnsupportedDialectError(SchemaError):
    """Raised when a document is neither OpenAPI/Swagger nor JSON Schema."""


def decode_schema_text(raw_text: str) -> Any:
    """Decode schema text into an untyped JSON value."""
    try:
        return json.loads(raw_text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise SchemaSyntaxError(f"Invalid JSON syntax in schema file: {exc}") from exc


def detect_dialect(document: Any) -> Dialect | None:
    """Return the dialect fingerprinted by top-level keys, if any."""
    if not isinstance(document, Mapping):
        return None
    if "openapi" in document or "swagger" in document:
        return Dialect.OPENAPI
    if "$schema" in document or "definitions" in document:
        return Dialect.JSON_SCHEMA
    return None


def normalize(raw_text: str) -> CanonicalSchema:
    """Parse local schema text into a canonical schema."""
    document = decode_schema_text(raw_text)
    dialect = detect_dialect(document)
    if dialect is Dialect.OPENAPI:
        return _normalize_openapi(document)
    if dialect is Dialect.JSON_SCHEMA:
        return _normalize_json_schema(document)
    raise UnsupportedDialectError("Unsupported schema format")


def normalize_remote(raw_object: Any) -> CanonicalSchema:
    """Normalize an already-decoded remote document without failing on gaps.

    Definitions are taken from the first mapping found among
    ``components.schemas``, ``definitions`` and ``schemas``. Title and version fall
    back to placeholder values.
    """
    document = raw_object if isinstance(raw_object, Mapping) else {}
    info = _mapping_or_empty(document.get("info"))
    definitions = _first_mapping(
        _mapping_or_empty(document.get("components")).get("schemas"),
        document.get("definitions"),
        document.get("schemas"),
    )
    return CanonicalSchema(
        title=_optional_text(info.get("title")) or REMOTE_DEFAULT_TITLE,
        version=_optional_text(info.get("version")) or REMOTE_DEFAULT_VERSION,
        definitions=definitions,
        paths=document.get("paths"),
    )


def _normalize_openapi(document: Mapping[str, Any]) -> CanonicalSchema:
    info = _mapping_or_empty(document.get("info"))
    definitions = _first_mapping(
        _mapping_or_empty(document.get("components")).get("schemas"),
        document.get("definitions"),
    )
    return CanonicalSchema(
        title=_optional_text(info.get("title")),
        version=_optional_text(info.get("version")),
        definitions=definitions,
        paths=document.get("paths"),
    )


def _normalize_json_schema(document: Mapping[str, Any]) -> CanonicalSchema:
    definitions = document.get("definitions")
    if isinstance(definitions, Mapping):
        normalized = dict(definitions)
    else:
        normalized = {ROOT_DEFINITION_NAME: dict(document)}
    return CanonicalSchema(
        title=_optional_text(document.get("title")),
        version=_optional_text(document.get("version")),
        definitions=normalized,
        paths=document.get("paths"),
    )


def _first_mapping(*candidates: Any) -> dict[str, Any]:
    for candidate in candidates:
        if isinstance(candidate, Mapping):
            return dict(candidate)
    return {}


def _mapping_or_empty(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _optional_text(value: Any) -> str | None:
    if value is None or isinstance(value, Mapping | list):
        return None
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)
