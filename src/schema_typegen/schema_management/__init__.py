"""Schema management exports."""

from .schema_models import CanonicalSchema, Dialect, ValidationResult
from .schema_normalizer import (
    SchemaError,
    SchemaSyntaxError,
    UnsupportedDialectError,
    decode_schema_text,
    detect_dialect,
    normalize,
    normalize_remote,
)
from .schema_validator import validate

__all__ = [
    "CanonicalSchema",
    "Dialect",
    "ValidationResult",
    "SchemaError",
    "SchemaSyntaxError",
    "UnsupportedDialectError",
    "decode_schema_text",
    "detect_dialect",
    "normalize",
    "normalize_remote",
    "validate",
]
