"""Command line interface entry point."""

from __future__ import annotations

import json
import sys
from typing import Any

import click
import yaml

from schema_fragments.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from schema_fragments.document_inspection import (
    InspectionError,
    InspectionRequest,
    collect_indirections,
    prepare_workspace,
    resolve_entry,
)
from schema_fragments.fragment_resolution import ValueKind, kind_of
from schema_fragments.logging import configure_logging


class CliError(Exception):
    """Custom CLI error."""


def _document_options(command):
    command = click.option(
        "--verbose",
        "-v",
        is_flag=True,
        default=False,
        help="Log document loads and followed references to stderr.",
    )(command)
    command = click.option(
        "--config",
        "config_path",
        required=False,
        type=click.Path(path_type=str),
        help="Path to a YAML/JSON resolver configuration file",
    )(command)
    command = click.option(
        "--schema",
        "schema_path",
        required=False,
        type=click.Path(path_type=str),
        help="Entry document (.json, .yaml or .yml); overrides the configured schema",
    )(command)
    command = click.option(
        "--base-dir",
        "base_dir",
        required=False,
        type=click.Path(path_type=str, file_okay=False),
        help="Directory document paths are relative to; overrides the configured base_dir",
    )(command)
    return command


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-fragments")
def cli() -> None:
    """Resolve $ref-connected JSON/YAML documents into dereferenced fragments."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML resolver configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a resolver configuration template with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="resolve")
@_document_options
@click.option(
    "--pointer",
    default="",
    show_default=False,
    help="Slash-separated pointer into the entry document, e.g. /components/schemas/Pet",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Rendering of the resolved value",
)
def resolve(
    base_dir: str | None,
    schema_path: str | None,
    config_path: str | None,
    verbose: bool,
    pointer: str,
    output_format: str,
) -> None:
    """Follow references from a pointer and print the value they lead to."""
    configure_logging(verbose=verbose)
    request = InspectionRequest(
        config_path=config_path,
        base_dir=base_dir,
        schema_path=schema_path,
        pointer=pointer,
    )
    try:
        resolved = resolve_entry(prepare_workspace(request))
    except InspectionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(f"# {resolved.reference}")
    click.echo(_render(resolved.value, output_format))


@cli.command(name="references")
@_document_options
@click.option(
    "--pointer",
    default="",
    help="Only list references below this pointer",
)
def references(
    base_dir: str | None,
    schema_path: str | None,
    config_path: str | None,
    verbose: bool,
    pointer: str,
) -> None:
    """List every indirection node in the entry document and its target."""
    configure_logging(verbose=verbose)
    request = InspectionRequest(
        config_path=config_path,
        base_dir=base_dir,
        schema_path=schema_path,
        pointer=pointer,
    )
    try:
        entries = collect_indirections(prepare_workspace(request))
    except InspectionError as exc:
        raise CliError(str(exc)) from exc
    for entry in entries:
        click.echo(f"{entry.location} -> {entry.target}")


def _render(value: Any, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(value, indent=2, ensure_ascii=False, default=str)
    if kind_of(value) in (ValueKind.MAPPING, ValueKind.SEQUENCE):
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True).rstrip("\n")
    # Plain scalars are printed as JSON, which is also valid YAML.
    return json.dumps(value, ensure_ascii=False, default=str)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="schema-fragments", standalone_mode=False)
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
