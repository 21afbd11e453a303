"""Immutable results of runtime and secret resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from llmstack.models.constants import Backend, RuntimeSource, SecretSource


@dataclass(frozen=True)
class ResolvedRuntime:
    """Container backend chosen for this process."""

    backend: Backend
    container_command: str
    compose_command: tuple[str, ...]
    compose_file: str
    display_name: str
    has_gpu_passthrough: bool
    source: RuntimeSource = RuntimeSource.DETECTED

    def compose_invocation(self, *args: str) -> list[str]:
        """Build a compose command line, e.g. ``compose_invocation("up", "-d")``."""
        return [*self.compose_command, "-f", self.compose_file, *args]

    def as_env(self) -> dict[str, str]:
        """Return the variables the stack's shell scripts expect."""
        return {
            "CONTAINER_CMD": self.container_command,
            "COMPOSE_CMD": " ".join(self.compose_command),
            "COMPOSE_FILE": self.compose_file,
            "RUNTIME_NAME": self.display_name,
            "RUNTIME_HAS_GPU": "true" if self.has_gpu_passthrough else "false",
        }


@dataclass(frozen=True)
class Advisory:
    """Non-fatal diagnostic produced during resolution."""

    code: str
    message: str


@dataclass(frozen=True)
class ResolvedSecret:
    """MongoDB credential chosen for this process."""

    value: str = field(repr=False)
    source: SecretSource
    materialized_path: Path
    warnings: tuple[Advisory, ...] = ()
