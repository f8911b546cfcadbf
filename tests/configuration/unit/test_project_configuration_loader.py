"""Project configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_typegen.configuration import (
    ConfigurationError,
    default_configuration,
    load_configuration,
)
from schema_typegen.type_rendering import ExportMode, OutputFormat


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "typegen.config.yaml",
        """
name: shop-types
description: Types for the shop API
version: 1.0
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.name == "shop-types"
    assert configuration.description == "Types for the shop API"
    assert configuration.version == "1.0"
    assert configuration.schema_path == (tmp_path / "schemas").resolve()
    assert configuration.output_path == (tmp_path / "types").resolve()
    assert configuration.output_format is OutputFormat.STRUCTURAL
    assert configuration.include_comments is True
    assert configuration.export_mode is None


def test_loads_json_configuration_with_explicit_values(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "typegen.config.json",
        json.dumps(
            {
                "schema_path": "api/openapi.json",
                "output_path": "/abs/out",
                "format": "JS",
                "include_comments": False,
                "export_mode": "both",
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.schema_path == (tmp_path / "api" / "openapi.json").resolve()
    assert configuration.output_path == Path("/abs/out")
    assert configuration.output_format is OutputFormat.DOC_COMMENT
    assert configuration.include_comments is False
    assert configuration.export_mode is ExportMode.BOTH


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "typegen.config.yaml", ""))

    assert configuration.output_format is OutputFormat.STRUCTURAL
    assert configuration.name is None


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- a\n- b\n", "Configuration root must be a mapping"),
        ("format: xml\n", "format 'xml' must be one of"),
        ("export_mode: all\n", "export_mode 'all' must be one of"),
        ("include_comments: maybe\n", "include_comments must be a boolean"),
        ("name: [1, 2]\n", "name must be a string"),
        ("schema_path: {a: b}\n", "schema_path must be a string"),
        ("name: 'unterminated\n", "Failed to parse configuration file"),
    ],
)
def test_invalid_configuration_values_raise(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "typegen.config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_default_configuration_is_relative_to_base_path(tmp_path: Path) -> None:
    configuration = default_configuration(tmp_path)

    assert configuration.path is None
    assert configuration.output_path == (tmp_path / "types").resolve()
    assert configuration.include_comments is True
