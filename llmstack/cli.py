#!/usr/bin/env python3
"""llmstack CLI - Command-line interface for llmstack."""

import click

from llmstack.models.constants import (
    DEFAULT_BASELINES_FILE,
    DEFAULT_DOTENV_FILE,
    DEFAULT_SECRET_FILE,
    LOG_LEVEL_ENV_VAR,
    LOG_TIMESTAMPS_ENV_VAR,
)
from llmstack.utils.env import get_env
from llmstack.utils.logger import Logger, LogLevel


def configure_logging() -> None:
    """Configure the Logger from LLMSTACK_LOG_LEVEL and LLMSTACK_LOG_TIMESTAMPS."""
    level_name = get_env(LOG_LEVEL_ENV_VAR, default="INFO")
    try:
        level = LogLevel(level_name.upper())
    except ValueError:
        valid = ", ".join(lvl.value for lvl in LogLevel)
        raise click.ClickException(
            f"{LOG_LEVEL_ENV_VAR} must be one of {valid}, got '{level_name}'"
        ) from None

    # Logs go to stderr; stdout carries reports
    Logger.configure(
        level=level,
        timestamps=get_env(LOG_TIMESTAMPS_ENV_VAR, default=False, as_type=bool),
    )


@click.group()
def llmstack():
    """Runtime resolution and benchmark regression checks for the LLM stack."""
    if not Logger.is_configured():
        configure_logging()


@llmstack.command()
@click.option(
    "--runtime",
    "-r",
    default=None,
    help="Force a backend (podman or docker). Defaults to $CONTAINER_RUNTIME.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json", "env"], case_sensitive=False),
    default="text",
    help="Output format; 'env' prints shell export lines",
)
@click.option("--verbose", "-v", is_flag=True, help="Show probing details")
def runtime(runtime, fmt, verbose):
    r"""Resolve the container runtime (Podman or Docker).

    \b
    Examples:
      llmstack runtime                       # Auto-detect, Podman first
      llmstack runtime -r docker             # Force Docker
      eval "$(llmstack runtime -f env)"      # Export CONTAINER_CMD etc.
    """
    from llmstack.commands.runtime_cmd import run_runtime

    if verbose:
        Logger.set_level("DEBUG")

    run_runtime(runtime=runtime, fmt=fmt.lower())


@llmstack.command()
@click.option(
    "--secret-file",
    default=None,
    help="Secrets file holding MONGODB_URI. Defaults to $MONGODB_URI_FILE.",
)
@click.option(
    "--env-file",
    default=DEFAULT_DOTENV_FILE,
    show_default=True,
    help="KEY=VALUE file consulted last",
)
@click.option(
    "--default-secret-file",
    default=DEFAULT_SECRET_FILE,
    show_default=True,
    help="Canonical secrets file the value is written to",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Resolve and validate without writing the secrets file",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def secret(secret_file, env_file, default_secret_file, dry_run, verbose):
    r"""Resolve MONGODB_URI and materialize the secrets file.

    Priority: secrets file > environment variable > .env file.
    """
    from llmstack.commands.secret_cmd import run_secret

    if verbose:
        Logger.set_level("DEBUG")

    run_secret(
        secret_file=secret_file,
        env_file=env_file,
        default_secret_file=default_secret_file,
        dry_run=dry_run,
    )


@llmstack.group()
def baseline():
    """Validate benchmark baselines and check results for regressions."""


baselines_option = click.option(
    "--baselines",
    "-b",
    default=DEFAULT_BASELINES_FILE,
    show_default=True,
    help="Path to the baselines JSON file",
)


@baseline.command("validate")
@baselines_option
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Output format",
)
def baseline_validate(baselines, fmt):
    """Validate the baselines file only (no comparison)."""
    from llmstack.commands.baseline_cmd import validate_baselines

    validate_baselines(baselines, fmt=fmt.lower())


@baseline.command("compare")
@click.argument("results", type=click.Path())
@baselines_option
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["text", "json", "yaml"], case_sensitive=False),
    default="text",
    help="Report format",
)
@click.option("--output", "-o", default=None, help="Write the report to a file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def baseline_compare(results, baselines, fmt, output, verbose):
    r"""Compare a results file against the baselines.

    \b
    Exit status:
      0  no regressions, or no baseline for the model (warning)
      1  regression detected, or invalid baselines/results
    """
    from llmstack.commands.baseline_cmd import compare_results

    if verbose:
        Logger.set_level("DEBUG")

    compare_results(results, baselines, fmt=fmt.lower(), output=output)


@llmstack.group()
def benchmark():
    """Work with inference benchmark measurements."""


@benchmark.command("record")
@click.argument("response", type=click.Path(exists=True, dir_okay=False))
@click.option("--model", "-m", default=None, help="Model name (defaults to response's)")
@click.option(
    "--environment",
    "-e",
    type=click.Choice(["gpu", "cpu"], case_sensitive=False),
    default="cpu",
    show_default=True,
    help="Where the inference ran",
)
@click.option("--output", "-o", default=None, help="Write the measurement record here")
def benchmark_record(response, model, environment, output):
    """Build a measurement record from a saved Ollama /api/generate response."""
    from llmstack.commands.benchmark_cmd import record_measurement

    record_measurement(response, model=model, environment=environment.lower(), output=output)


@llmstack.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display llmstack version information."""
    from llmstack.commands.version_cmd import run_version

    run_version(verbose=verbose)


if __name__ == "__main__":
    llmstack()
