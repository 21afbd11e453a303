"""Runtime command - resolve the container backend for the stack.

CLI Examples:
    llmstack runtime                       # Auto-detect (Podman first)
    llmstack runtime --runtime docker      # Force Docker
    eval "$(llmstack runtime --format env)"  # Export CONTAINER_CMD etc.
"""

import json
import shlex
import sys

import click

from llmstack.backends.probe import HostCapabilityProbe
from llmstack.config.runtime import resolve_runtime
from llmstack.errors import ConfigurationError
from llmstack.models.constants import RUNTIME_ENV_VAR
from llmstack.models.runtime_models import ResolvedRuntime
from llmstack.utils.env import get_nonempty_env


def _print_text(runtime: ResolvedRuntime) -> None:
    click.echo(f"Runtime:         {runtime.display_name} ({runtime.source.value})")
    click.echo(f"Container:       {runtime.container_command}")
    click.echo(f"Compose:         {' '.join(runtime.compose_command)}")
    click.echo(f"Compose file:    {runtime.compose_file}")
    click.echo(f"GPU passthrough: {'yes' if runtime.has_gpu_passthrough else 'no'}")
    if not runtime.has_gpu_passthrough:
        click.echo()
        click.echo(f"NOTE: {runtime.display_name} does not support GPU passthrough.")
        click.echo("Ollama will run in CPU-only mode (expect 10-15 tokens/sec).")
        click.echo("For GPU acceleration, use Podman: brew install podman podman-compose")


def run_runtime(runtime: str | None = None, fmt: str = "text") -> None:
    """Resolve and print the container runtime.

    Args:
        runtime: Explicit backend; falls back to CONTAINER_RUNTIME.
        fmt: "text", "json" or "env" (shell export lines).
    """
    override = runtime or get_nonempty_env(RUNTIME_ENV_VAR, log=True)

    try:
        resolved = resolve_runtime(override, HostCapabilityProbe())
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if fmt == "env":
        for name, value in resolved.as_env().items():
            click.echo(f"export {name}={shlex.quote(value)}")
    elif fmt == "json":
        data = {
            "backend": resolved.backend.value,
            "source": resolved.source.value,
            "containerCommand": resolved.container_command,
            "composeCommand": list(resolved.compose_command),
            "composeFile": resolved.compose_file,
            "hasGpuPassthrough": resolved.has_gpu_passthrough,
        }
        click.echo(json.dumps(data, indent=2))
    else:
        _print_text(resolved)
