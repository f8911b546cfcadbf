"""Generation use-case service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from schema_typegen.schema_management import SchemaError, normalize
from schema_typegen.type_rendering import (
    RenderError,
    RenderOptions,
    render,
    resolve_output_format,
)

from .run_contracts import GenerationOutcome, GenerationRequest

logger = logging.getLogger(__name__)

SCHEMA_FILE_CANDIDATES = (
    "api-schema.json",
    "schema.json",
    "openapi.json",
    "swagger.json",
    "api.json",
)
OUTPUT_FILE_STEM = "index"


class GenerationError(Exception):
    """Raised when a generation use case cannot be completed."""


def execute_generation(
    request: GenerationRequest, *, search_root: Path | None = None
) -> GenerationOutcome:
    """Read one schema file, render it and write ``index.<ext>`` to the output dir."""
    input_path = _resolve_input_path(request.input_path, search_root or Path.cwd())
    logger.debug("Parsing schema file %s", input_path)
    try:
        schema = normalize(input_path.read_text(encoding="utf-8"))
    except (SchemaError, OSError, UnicodeDecodeError) as exc:
        raise GenerationError(f"Failed to generate types: {exc}") from exc

    try:
        options = RenderOptions(
            output_format=resolve_output_format(request.output_format),
            include_comments=request.include_comments,
            export_mode=request.export_mode,
        )
        generated = render(schema, options)
    except RenderError as exc:
        raise GenerationError(f"Failed to generate types: {exc}") from exc

    output_dir = Path(request.output_dir)
    output_path = output_dir / f"{OUTPUT_FILE_STEM}.{options.output_format.file_extension}"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(generated, encoding="utf-8")
    except OSError as exc:
        raise GenerationError(f"Failed to write generated types: {exc}") from exc

    logger.info("Wrote %d type definitions to %s", len(schema.definitions), output_path)
    return GenerationOutcome(
        input_path=input_path.resolve(),
        output_path=output_path.resolve(),
        definition_count=len(schema.definitions),
    )


def find_schema_file(
    directory: Path, candidates: Sequence[str] = SCHEMA_FILE_CANDIDATES
) -> Path | None:
    """Return the first well-known schema file in a directory, if any."""
    for name in candidates:
        candidate = directory / name
        if candidate.is_file():
            return candidate
    return None


def _resolve_input_path(input_path: str | None, search_root: Path) -> Path:
    if input_path is None:
        found = find_schema_file(search_root)
        if found is None:
            raise GenerationError("No schema file found. Please specify with --input option.")
        logger.debug("Discovered schema file %s", found)
        return found

    path = Path(input_path)
    if path.is_dir():
        found = find_schema_file(path) or next(iter(sorted(path.glob("*.json"))), None)
        if found is None:
            raise GenerationError(f"No schema file found in directory: {path}")
        logger.debug("Discovered schema file %s", found)
        return found
    if not path.exists():
        raise GenerationError(f"Schema file not found: {path}")
    return path
