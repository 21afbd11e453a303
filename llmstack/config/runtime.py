"""Container runtime resolution.

Priority order: explicit override → Podman (with podman-compose) → Docker.
"""

from __future__ import annotations

from llmstack.backends.probe import CapabilityProbe
from llmstack.errors import ConfigurationError
from llmstack.models.constants import Backend, RuntimeSource
from llmstack.models.runtime_models import ResolvedRuntime
from llmstack.utils.logger import Logger

# GPU passthrough is a static property of the backend, never probed.
_RUNTIME_TABLE: dict[Backend, dict] = {
    Backend.PODMAN: {
        "container_command": "podman",
        "compose_command": ("podman-compose",),
        "compose_file": "podman-compose.yml",
        "display_name": "Podman",
        "has_gpu_passthrough": True,
    },
    Backend.DOCKER: {
        "container_command": "docker",
        "compose_command": ("docker", "compose"),
        "compose_file": "docker-compose.yml",
        "display_name": "Docker",
        "has_gpu_passthrough": False,
    },
}

NO_RUNTIME_HINT = (
    "No container runtime found. Please install one of:\n"
    "  Podman (recommended): brew install podman podman-compose\n"
    "  Docker: https://docs.docker.com/get-docker/"
)


def runtime_for(
    backend: Backend, source: RuntimeSource = RuntimeSource.DETECTED
) -> ResolvedRuntime:
    """Build the resolved runtime for ``backend``."""
    return ResolvedRuntime(backend=backend, source=source, **_RUNTIME_TABLE[backend])


def parse_backend(value: str | Backend) -> Backend:
    """Parse an explicit backend selection.

    Raises:
        ConfigurationError: If ``value`` is not 'podman' or 'docker'.
    """
    if isinstance(value, Backend):
        return value
    try:
        return Backend(value.strip().lower())
    except ValueError:
        valid = " or ".join(f"'{b.value}'" for b in Backend)
        raise ConfigurationError(
            f"CONTAINER_RUNTIME must be {valid}, got '{value}'"
        ) from None


def resolve_runtime(
    explicit_override: str | Backend | None, probe: CapabilityProbe
) -> ResolvedRuntime:
    """Pick the container backend for this process.

    Args:
        explicit_override: Backend requested by the operator (usually the
            CONTAINER_RUNTIME variable). Empty strings count as unset.
        probe: Host capability probe.

    Returns:
        The resolved runtime. An override is returned without probing.

    Raises:
        ConfigurationError: If the override is invalid or no backend is
            available.
    """
    log = Logger.get("config.runtime")

    if explicit_override:
        backend = parse_backend(explicit_override)
        log.debug(f"Using {backend.value} from explicit override")
        return runtime_for(backend, RuntimeSource.OVERRIDE)

    if probe.is_available(Backend.PODMAN) and probe.is_compose_helper_available(
        Backend.PODMAN
    ):
        log.debug("Detected podman with podman-compose")
        return runtime_for(Backend.PODMAN)

    if probe.is_available(Backend.DOCKER):
        log.debug("Detected docker")
        return runtime_for(Backend.DOCKER)

    raise ConfigurationError(NO_RUNTIME_HINT)


__all__ = ["NO_RUNTIME_HINT", "parse_backend", "resolve_runtime", "runtime_for"]
