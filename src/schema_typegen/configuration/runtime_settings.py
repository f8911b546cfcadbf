"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_typegen.type_rendering.render_options import ExportMode, OutputFormat


@dataclass(frozen=True)
class ProjectConfiguration:  # pylint: disable=too-many-instance-attributes
    """Project-level generation settings."""

    path: Path | None
    name: str | None
    description: str | None
    version: str | None
    schema_path: Path
    output_path: Path
    output_format: OutputFormat
    include_comments: bool
    export_mode: ExportMode | None
