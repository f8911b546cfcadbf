"""Project scaffold generation helpers."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

DEFAULT_CONFIG_FILENAME = "typegen.config.yaml"
PROJECT_DIRECTORIES = ("src", "types", "schemas")

_CONFIG_SCAFFOLD_TEMPLATE = """# Project configuration for schema-typegen.
# Paths are resolved relative to this file.

name: {name}
description: {description}
version: "1.0.0"

# Schema file, or a directory searched for api-schema.json, schema.json, openapi.json, ...
schema_path: "./schemas"
output_path: "./types"

# Output format: ts (interfaces), js (JSDoc typedefs) or json (normalized schema).
format: "ts"
include_comments: true
# export_mode: "named"  # named, default or both
"""

_README_TEMPLATE = """# {name}

{description}

## Getting Started

1. Define your API schemas in the `schemas/` directory
2. Run `schema-typegen generate` to generate TypeScript types
3. Import the generated types in your project

## Commands

- `schema-typegen generate` - Generate types from schemas
- `schema-typegen validate <schema>` - Validate a schema file
- `schema-typegen sync --url <url>` - Sync types from remote API

## Configuration

Edit `{config_filename}` to customize the generation process.
"""

_GITIGNORE = """node_modules/
dist/
*.log
.env
.DS_Store
"""

EXAMPLE_JSON_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "User API",
    "type": "object",
    "definitions": {
        "User": {
            "type": "object",
            "properties": {
                "id": {"type": "string"},
                "name": {"type": "string"},
                "email": {"type": "string", "format": "email"},
                "createdAt": {"type": "string", "format": "date-time"},
            },
            "required": ["id", "name", "email"],
        }
    },
}

EXAMPLE_OPENAPI_SCHEMA = {
    "openapi": "3.0.3",
    "info": {"title": "User API", "version": "1.0.0"},
    "paths": {
        "/users": {
            "get": {
                "operationId": "listUsers",
                "responses": {"200": {"description": "List of users"}},
            }
        }
    },
    "components": {
        "schemas": {
            "UserStatus": {"type": "string", "enum": ["active", "suspended"]},
            "User": {
                "type": "object",
                "description": "Registered account.",
                "properties": {
                    "id": {"type": "string"},
                    "status": {"type": "string", "enum": ["active", "suspended"]},
                    "tags": {"type": "array", "items": {"type": "string"}},
                },
                "required": ["id"],
            },
        }
    },
}


class ProjectTemplate(str, Enum):
    """Scaffold variants offered by ``init``."""

    BASIC = "basic"
    ADVANCED = "advanced"


class ScaffoldError(Exception):
    """Raised when the project scaffold cannot be written."""


def build_project_configuration(name: str, description: str) -> str:
    """Build the YAML project configuration with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE.format(
        name=json.dumps(name, ensure_ascii=False),
        description=json.dumps(description, ensure_ascii=False),
    )


def build_readme(name: str, description: str) -> str:
    return _README_TEMPLATE.format(
        name=name, description=description, config_filename=DEFAULT_CONFIG_FILENAME
    )


def scaffold_project(
    project_root: Path | str,
    *,
    name: str,
    description: str,
    use_git: bool,
    template: ProjectTemplate = ProjectTemplate.BASIC,
) -> tuple[Path, ...]:
    """Create the project layout, configuration, example schemas and README.

    Args:
      project_root: Directory the project is created in.
      name: Project name used in the configuration and README.
      description: Short project description.
      use_git: Also write a ``.gitignore``.
      template: ``advanced`` adds an OpenAPI example schema.

    Returns:
      The resolved paths of every written file, in write order.

    Raises:
      ScaffoldError: If the configuration already exists or writing fails.
    """
    root = Path(project_root)
    config_path = root / DEFAULT_CONFIG_FILENAME
    if config_path.exists():
        raise ScaffoldError(f"Project configuration already exists: {config_path.resolve()}")

    files: dict[Path, str] = {
        config_path: build_project_configuration(name, description),
        root / "schemas" / "example.json": _json_text(EXAMPLE_JSON_SCHEMA),
    }
    if template is ProjectTemplate.ADVANCED:
        files[root / "schemas" / "openapi-example.json"] = _json_text(EXAMPLE_OPENAPI_SCHEMA)
    files[root / "README.md"] = build_readme(name, description)
    if use_git:
        files[root / ".gitignore"] = _GITIGNORE

    try:
        for directory in PROJECT_DIRECTORIES:
            (root / directory).mkdir(parents=True, exist_ok=True)
        for path, contents in files.items():
            path.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise ScaffoldError(f"Failed to initialize project: {exc}") from exc
    return tuple(path.resolve() for path in files)


def _json_text(document: object) -> str:
    return json.dumps(document, indent=2) + "\n"
