"""Command line interface entry point."""

from __future__ import annotations

import sys

import click

from mock_equivalency.configuration import DEFAULT_CONFIG_FILENAME, write_placeholder_configuration
from mock_equivalency.document_comparison import (
    ComparisonRequest,
    DocumentComparisonError,
    execute_document_comparison,
)


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mock-equivalency")
def cli() -> None:
    """Structural equivalency checks for test doubles and documents."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML equivalency configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML equivalency configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="compare")
@click.option(
    "--expected",
    "expected_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the expected YAML/JSON document",
)
@click.option(
    "--actual",
    "actual_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the actual YAML/JSON document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML equivalency configuration file",
)
def compare_documents(expected_path: str, actual_path: str, config_path: str | None) -> None:
    """Compare two documents and list every structural mismatch."""
    try:
        outcome = execute_document_comparison(
            ComparisonRequest(
                expected_path=expected_path,
                actual_path=actual_path,
                config_path=config_path,
            )
        )
    except DocumentComparisonError as exc:
        raise CliError(str(exc)) from exc
    if outcome.is_equivalent:
        click.echo("Documents are equivalent.")
        return
    for message in outcome.messages:
        click.echo(message)
    raise CliError(f"Found {len(outcome.messages)} mismatch(es).")


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
