"""Tests for the packaging metadata of the schema-typegen distribution."""

from __future__ import annotations

import re
import tomllib
from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def _pyproject() -> dict:
    pyproject_path = _project_root() / "pyproject.toml"
    return tomllib.loads(pyproject_path.read_text(encoding="utf-8"))


def _requirement_names(requirements: list[str]) -> set[str]:
    return {re.split(r"[<>=!~\[ ;]", requirement, maxsplit=1)[0] for requirement in requirements}


def test_runtime_dependencies_cover_cli_config_and_http_stack() -> None:
    dependencies = _requirement_names(_pyproject()["project"]["dependencies"])

    assert dependencies == {"click", "httpx", "PyYAML"}


def test_wheel_ships_the_schema_typegen_package_from_src() -> None:
    pyproject = _pyproject()
    packages = pyproject["tool"]["hatch"]["build"]["targets"]["wheel"]["packages"]

    assert packages == ["src/schema_typegen"]
    for package in packages:
        assert (_project_root() / package / "cli.py").is_file()


def test_console_script_points_at_cli_main() -> None:
    pyproject = _pyproject()

    assert pyproject["project"]["scripts"]["schema-typegen"] == "schema_typegen.cli:main"


def test_pytest_imports_sources_from_src_layout() -> None:
    pytest_options = _pyproject()["tool"]["pytest"]["ini_options"]

    assert pytest_options["pythonpath"] == ["src"]
    assert "--import-mode=importlib" in pytest_options["addopts"]


def test_dev_group_carries_lint_type_and_stub_tooling() -> None:
    dev_dependencies = _requirement_names(_pyproject()["dependency-groups"]["dev"])

    assert {"mypy", "pytest", "ruff", "types-PyYAML"} <= dev_dependencies
