"""Version command - displays llmstack version information."""

import click

from llmstack.version import LLMSTACK_VERSION


def run_version(verbose: bool = False) -> None:
    """Display llmstack version information.

    Args:
        verbose: If True, show the build date and package hash as well.
    """
    if not verbose:
        click.echo(f"llmstack {LLMSTACK_VERSION}")
        return

    major, minor, patch = LLMSTACK_VERSION.semver()
    click.echo(f"llmstack version {LLMSTACK_VERSION.full_version()}")
    click.echo("\nDetailed version information:")
    click.echo(f"  Semantic Version: {major}.{minor}.{patch}")
    click.echo(f"  Build Date:       {LLMSTACK_VERSION.date_string()}")
    click.echo(f"  Package Hash:     {LLMSTACK_VERSION.hash}")
