"""Type rendering exports."""

from .declaration_text import comment_text, declaration_names
from .doc_comment_renderer import doc_comment_type, render_doc_comments
from .file_banner import build_file_banner
from .render_options import (
    ExportMode,
    OutputFormat,
    RenderError,
    RenderOptions,
    UnsupportedFormatError,
    resolve_export_mode,
    resolve_output_format,
)
from .structural_renderer import render_structural, render_type_expression
from .type_renderer import render, render_passthrough

__all__ = [
    "ExportMode",
    "OutputFormat",
    "RenderError",
    "RenderOptions",
    "UnsupportedFormatError",
    "build_file_banner",
    "comment_text",
    "declaration_names",
    "doc_comment_type",
    "render",
    "render_doc_comments",
    "render_passthrough",
    "render_structural",
    "render_type_expression",
    "resolve_export_mode",
    "resolve_output_format",
]
