"""Secret command - resolve MONGODB_URI and materialize the secrets file."""

import sys

import click

from llmstack.config.secrets import resolve_secret_from_environment
from llmstack.errors import ConfigurationError
from llmstack.models.constants import SecretSource


def run_secret(
    secret_file: str | None,
    env_file: str,
    default_secret_file: str,
    dry_run: bool = False,
) -> None:
    """Resolve the MongoDB credential and report where it came from.

    The value itself is never printed.

    Args:
        secret_file: Secrets file override (defaults to MONGODB_URI_FILE).
        env_file: Path of the .env file to consult.
        default_secret_file: Canonical secrets file location.
        dry_run: Resolve and validate without writing the secrets file.
    """
    try:
        resolved = resolve_secret_from_environment(
            dotenv_file=env_file,
            default_file_path=default_secret_file,
            explicit_file_path=secret_file,
            materialize=not dry_run,
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"MONGODB_URI source: {resolved.source.value}")
    click.echo(f"Secrets file:       {resolved.materialized_path}")
    if dry_run and resolved.source != SecretSource.SECRET_FILE:
        click.echo("DRY RUN - secrets file not written")
    for advisory in resolved.warnings:
        click.echo(f"WARNING: {advisory.message}", err=True)
