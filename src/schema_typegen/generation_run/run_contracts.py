"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_typegen.type_rendering.render_options import ExportMode, OutputFormat


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one types file."""

    input_path: str | None
    output_dir: str
    output_format: OutputFormat = OutputFormat.STRUCTURAL
    include_comments: bool = True
    export_mode: ExportMode | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation."""

    input_path: Path
    output_path: Path
    definition_count: int
