"""Dialect-aware structural schema checks."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .schema_models import Dialect, ValidationResult
from .schema_normalizer import detect_dialect


def validate(raw_text: str, strict: bool = False) -> ValidationResult:
    """Check schema text and return errors and warnings without raising.

    Args:
      raw_text: Schema document text.
      strict: Promote advisory findings (missing ``paths``, missing ``$schema``).

    Returns:
      A validation result whose messages follow the fixed rule order.
    """
    try:
        document = json.loads(raw_text)
    except (json.JSONDecodeError, RecursionError) as exc:
        return ValidationResult(errors=(f"Invalid JSON: {exc}",))

    if not isinstance(document, Mapping):
        return ValidationResult(errors=("Schema must be a valid JSON object",))

    errors: list[str] = []
    warnings: list[str] = []
    if detect_dialect(document) is Dialect.OPENAPI:
        _check_openapi(document, errors, warnings, strict=strict)
    else:
        _check_json_schema(document, warnings, strict=strict)
    return ValidationResult(errors=tuple(errors), warnings=tuple(warnings))


def _check_openapi(
    document: Mapping[str, Any], errors: list[str], warnings: list[str], *, strict: bool
) -> None:
    info = document.get("info")
    if _is_missing(info):
        errors.append('OpenAPI schema missing required "info" object')
    else:
        info_fields = info if isinstance(info, Mapping) else {}
        if _is_missing(info_fields.get("title")):
            errors.append('OpenAPI info missing required "title" field')
        if _is_missing(info_fields.get("version")):
            errors.append('OpenAPI info missing required "version" field')

    if _is_missing(document.get("paths")):
        message = 'OpenAPI schema missing "paths" object'
        (errors if strict else warnings).append(message)

    openapi_version = document.get("openapi")
    if not _is_missing(openapi_version) and not str(openapi_version).startswith("3."):
        warnings.append("Consider upgrading to OpenAPI 3.x")


def _check_json_schema(document: Mapping[str, Any], warnings: list[str], *, strict: bool) -> None:
    if strict and "$schema" not in document:
        warnings.append("Consider adding $schema field for better validation")

    if _is_missing(document.get("definitions")) and _is_missing(document.get("properties")):
        warnings.append("Schema has no definitions or properties")


def _is_missing(value: Any) -> bool:
    """Treat null, false, zero and the empty string as absent; containers always count."""
    if value is None or value is False or value == "":
        return True
    return isinstance(value, int | float) and not isinstance(value, bool) and value == 0
