"""Generated-file banner helpers."""

from __future__ import annotations

from datetime import datetime

from schema_typegen.schema_management.schema_models import CanonicalSchema

from .declaration_text import comment_text

GENERATOR_NAME = "schema-typegen"
DEFAULT_TITLE = "API Types"


def build_file_banner(schema: CanonicalSchema, generated_at: datetime) -> str:
    """Build the comment block placed at the top of generated type files."""
    lines = ["/**", f" * {comment_text(schema.title or DEFAULT_TITLE)}"]
    if schema.version:
        lines.append(f" * Version: {comment_text(schema.version)}")
    lines.extend(
        [
            f" * Generated on: {_format_timestamp(generated_at)}",
            " *",
            f" * This file was automatically generated by {GENERATOR_NAME}.",
            " * Do not edit this file directly.",
            " */",
        ]
    )
    return "\n".join(lines) + "\n\n"


def _format_timestamp(value: datetime) -> str:
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
