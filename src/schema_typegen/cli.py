"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from schema_typegen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    ProjectConfiguration,
    ProjectTemplate,
    ScaffoldError,
    default_configuration,
    load_configuration,
    scaffold_project,
)
from schema_typegen.generation_run import GenerationError, GenerationRequest, execute_generation
from schema_typegen.remote_sync import SyncError, SyncRequest, execute_sync
from schema_typegen.schema_management import validate
from schema_typegen.type_rendering import OutputFormat, resolve_export_mode

_FORMAT_CHOICES = [output_format.value for output_format in OutputFormat]
_EXPORT_MODE_CHOICES = ["named", "default", "both"]


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-typegen")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Generate typed declarations from OpenAPI and JSON Schema documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate")
@click.option(
    "-i",
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="Input schema file or directory",
)
@click.option(
    "-o",
    "--output",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Output directory  [default: ./types]",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    required=False,
    type=click.Choice(_FORMAT_CHOICES),
    help="Output format  [default: ts]",
)
@click.option(
    "--no-comments",
    is_flag=True,
    default=False,
    help="Exclude comments in generated types",
)
@click.option(
    "--export-mode",
    required=False,
    type=click.Choice(_EXPORT_MODE_CHOICES),
    help="Export section style for ts output",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help=f"Project configuration file  [default: ./{DEFAULT_CONFIG_FILENAME} when present]",
)
def generate(  # pylint: disable=too-many-arguments
    input_path: str | None,
    output_dir: str | None,
    output_format: str | None,
    no_comments: bool,
    export_mode: str | None,
    config_path: str | None,
) -> None:
    """Generate types from an API schema file."""
    configuration = _load_project_configuration(config_path)
    if input_path is None and configuration.path is not None:
        input_path = str(configuration.schema_path)

    request = GenerationRequest(
        input_path=input_path,
        output_dir=output_dir or str(configuration.output_path),
        output_format=OutputFormat(output_format) if output_format else configuration.output_format,
        include_comments=configuration.include_comments and not no_comments,
        export_mode=resolve_export_mode(export_mode) or configuration.export_mode,
    )
    try:
        outcome = execute_generation(request)
    except GenerationError as exc:
        raise CliError(str(exc)) from exc
    click.secho("Types generated successfully!", fg="green")
    click.echo(f"Output: {outcome.output_path}")
    click.echo(f"Generated {outcome.definition_count} type definitions")


@cli.command(name="validate")
@click.argument("schema_path", type=click.Path(path_type=str))
@click.option("--strict", is_flag=True, default=False, help="Enable strict validation mode")
def validate_schema(schema_path: str, strict: bool) -> None:
    """Validate an API schema file."""
    path = Path(schema_path)
    if not path.is_file():
        raise CliError(f"Schema file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CliError(f"Validation failed: {exc}") from exc

    result = validate(text, strict=strict)
    if not result.valid:
        click.secho("Schema validation failed!", fg="red")
        click.secho("\nErrors:", fg="red")
        for error in result.errors:
            click.secho(f"  • {error}", fg="red")
        raise CliError(f"{len(result.errors)} validation error(s) in {path}")

    click.secho("Schema is valid!", fg="green")
    if result.warnings:
        click.secho("\nWarnings:", fg="yellow")
        for warning in result.warnings:
            click.secho(f"  • {warning}", fg="yellow")


@cli.command(name="sync")
@click.option("-u", "--url", required=False, help="API endpoint URL serving the schema")
@click.option(
    "-o",
    "--output",
    "output_dir",
    default="./types",
    show_default=True,
    type=click.Path(path_type=str),
    help="Output directory",
)
@click.option("-H", "--headers", required=False, help="Custom headers (JSON format)")
@click.option(
    "--timeout",
    "timeout_seconds",
    default=30.0,
    show_default=True,
    type=click.FloatRange(min=0, min_open=True),
    help="Request timeout in seconds",
)
def sync(url: str | None, output_dir: str, headers: str | None, timeout_seconds: float) -> None:
    """Sync types from a remote API schema endpoint."""
    try:
        outcome = execute_sync(
            SyncRequest(
                url=url,
                output_dir=output_dir,
                headers=headers,
                timeout_seconds=timeout_seconds,
            )
        )
    except SyncError as exc:
        raise CliError(str(exc)) from exc
    click.secho("Types synced successfully!", fg="green")
    click.echo(f"Types: {outcome.types_path}")
    click.echo(f"Schema: {outcome.schema_path}")


@cli.command(name="init")
@click.option(
    "-t",
    "--template",
    type=click.Choice([template.value for template in ProjectTemplate]),
    default=ProjectTemplate.BASIC.value,
    show_default=True,
    help="Project template",
)
@click.option("--name", prompt="Project name", default=lambda: Path.cwd().name)
@click.option("--description", prompt="Project description", default="API types project")
@click.option("--git/--no-git", "use_git", prompt="Add a .gitignore?", default=True)
def init_project(template: str, name: str, description: str, use_git: bool) -> None:
    """Initialize a new types project in the current directory."""
    try:
        scaffold_project(
            Path.cwd(),
            name=name,
            description=description,
            use_git=use_git,
            template=ProjectTemplate(template),
        )
    except ScaffoldError as exc:
        raise CliError(str(exc)) from exc
    click.secho("Project initialized successfully!", fg="green")
    click.echo("\nNext steps:")
    click.echo("1. Edit schemas in the schemas/ directory")
    click.echo("2. Run: schema-typegen generate")
    click.echo("3. Import generated types from ./types/")


def _load_project_configuration(config_path: str | None) -> ProjectConfiguration:
    if config_path is None:
        discovered = Path.cwd() / DEFAULT_CONFIG_FILENAME
        if not discovered.is_file():
            return default_configuration()
        config_path = str(discovered)
    try:
        return load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
