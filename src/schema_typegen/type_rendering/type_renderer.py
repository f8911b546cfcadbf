"""Type rendering service."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any, assert_never

from schema_typegen.schema_management.schema_models import CanonicalSchema
from schema_typegen.type_mapping import map_definitions

from .doc_comment_renderer import render_doc_comments
from .file_banner import build_file_banner
from .render_options import OutputFormat, RenderOptions, resolve_output_format
from .structural_renderer import render_structural


def render(
    schema: CanonicalSchema,
    options: RenderOptions,
    *,
    generated_at: datetime | None = None,
) -> str:
    """Render a canonical schema in the requested output format.

    Args:
      schema: Normalized schema to render.
      options: Output format, comment and export settings.
      generated_at: Banner timestamp; defaults to the current UTC time.

    Returns:
      Generated text.

    Raises:
      UnsupportedFormatError: If ``options.output_format`` is not a known format.
    """
    output_format = resolve_output_format(options.output_format)
    if output_format is OutputFormat.PASSTHROUGH:
        return render_passthrough(schema)

    header = ""
    if options.include_comments:
        header = build_file_banner(schema, generated_at or datetime.now(UTC))

    definitions = map_definitions(schema)
    if output_format is OutputFormat.STRUCTURAL:
        return header + render_structural(definitions, options)
    if output_format is OutputFormat.DOC_COMMENT:
        return header + render_doc_comments(definitions)
    assert_never(output_format)


def render_passthrough(schema: CanonicalSchema) -> str:
    """Serialize the canonical schema itself as indented JSON."""
    payload: dict[str, Any] = {}
    if schema.title is not None:
        payload["title"] = schema.title
    if schema.version is not None:
        payload["version"] = schema.version
    payload["definitions"] = schema.definitions
    if schema.paths is not None:
        payload["paths"] = schema.paths
    return json.dumps(payload, indent=2, ensure_ascii=False)
