"""Command line interface entry point."""

from __future__ import annotations

import logging
import mimetypes
import sys
from pathlib import Path

import click

from provider_verifier.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    ValueResolver,
    chain_value_resolvers,
    environment_value_resolver,
    load_configuration,
    settings_value_resolver,
    write_placeholder_configuration,
)
from provider_verifier.contract_model import (
    TEXT_PLAIN,
    OptionalBody,
    PlainMessageInteraction,
    parse_content_type,
)
from provider_verifier.response_comparison import (
    DiffPolicyError,
    compare_message,
    should_generate_diff,
)
from provider_verifier.results_writing import render_comparison_report

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="provider-verifier")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level for diagnostic output on stderr",
)
def cli(log_level: str) -> None:
    """Contract verification utility for provider responses and messages."""
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML verifier configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML verifier configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="diff-policy")
@click.option(
    "--length",
    required=True,
    type=click.IntRange(min=0),
    help="Body length in bytes to evaluate the diff policy for",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML verifier configuration file",
)
def diff_policy(length: int, config_path: str | None) -> None:
    """Report whether a body diff would be rendered for a body of the given length."""
    decision = should_generate_diff(_build_resolver(config_path), length)
    if isinstance(decision, DiffPolicyError):
        raise CliError(f"Invalid diff configuration: {decision.reason}")
    click.echo("enabled" if decision.enabled else "disabled")


@cli.command(name="compare-bodies")
@click.option(
    "--expected",
    "expected_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the expected message payload",
)
@click.option(
    "--actual",
    "actual_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the actual message payload",
)
@click.option(
    "--content-type",
    "content_type",
    required=False,
    help="Content type of both payloads (guessed from the expected file name when omitted)",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Path to YAML verifier configuration file",
)
@click.pass_context
def compare_bodies(
    ctx: click.Context,
    expected_path: str,
    actual_path: str,
    content_type: str | None,
    config_path: str | None,
) -> None:
    """Compare two message payload files and print the mismatch report."""
    resolver = _build_resolver(config_path)
    declared_content_type = content_type or mimetypes.guess_type(expected_path)[0]
    resolved_content_type = (
        parse_content_type(declared_content_type) if declared_content_type else TEXT_PLAIN
    )
    try:
        expected_bytes = Path(expected_path).read_bytes()
        actual_bytes = Path(actual_path).read_bytes()
    except OSError as exc:
        raise CliError(str(exc)) from exc

    message = PlainMessageInteraction(
        description=Path(expected_path).name,
        contents=OptionalBody.of(expected_bytes, resolved_content_type),
    )
    result = compare_message(
        message,
        OptionalBody.of(actual_bytes, resolved_content_type),
        resolver=resolver,
    )
    for line in render_comparison_report(result):
        click.echo(line)
    if result.has_mismatches:
        ctx.exit(1)


def _build_resolver(config_path: str | None) -> ValueResolver:
    if config_path is None:
        return environment_value_resolver()
    try:
        configuration = load_configuration(config_path)
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc
    return chain_value_resolvers(
        environment_value_resolver(),
        settings_value_resolver(configuration.verifier),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
