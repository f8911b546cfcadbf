"""Type rendering entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RenderError(Exception):
    """Raised when generated output cannot be produced."""


class UnsupportedFormatError(RenderError):
    """Raised when the requested output format is not recognized."""


class OutputFormat(str, Enum):
    """Output representations; values double as generated file extensions."""

    STRUCTURAL = "ts"
    DOC_COMMENT = "js"
    PASSTHROUGH = "json"

    @property
    def file_extension(self) -> str:
        return self.value


class ExportMode(str, Enum):
    """Trailing export section variants for structural output."""

    NAMED = "named"
    DEFAULT = "default"
    BOTH = "both"


@dataclass(frozen=True)
class RenderOptions:
    """Options controlling one rendering pass."""

    output_format: OutputFormat
    include_comments: bool = True
    export_mode: ExportMode | None = None

    @property
    def includes_default_export(self) -> bool:
        return self.export_mode in (ExportMode.DEFAULT, ExportMode.BOTH)


def resolve_output_format(value: OutputFormat | str) -> OutputFormat:
    """Return the output format for an enum member or its string value."""
    if isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(value)
    except ValueError as exc:
        raise UnsupportedFormatError(f"Unsupported format: {value}") from exc


def resolve_export_mode(value: ExportMode | str | None) -> ExportMode | None:
    """Return the export mode for an enum member, its string value or None."""
    if value is None or isinstance(value, ExportMode):
        return value
    try:
        return ExportMode(value)
    except ValueError as exc:
        raise RenderError(f"Unsupported export mode: {value}") from exc
