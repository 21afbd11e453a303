"""Podman detection utilities."""

from __future__ import annotations

from llmstack.backends.software.base import ContainerToolDetector
from llmstack.models.constants import Backend
from llmstack.models.tool_models import ComposeHelperInfo


class PodmanDetector(ContainerToolDetector):
    """Detect the Podman CLI and the standalone ``podman-compose`` helper.

    Podman is only usable for the stack when ``podman-compose`` is on PATH
    as well; the built-in ``podman compose`` shim delegates to an external
    provider and is not relied upon.
    """

    _EXECUTABLE = Backend.PODMAN.value
    _COMPOSE_EXECUTABLE = "podman-compose"

    def _detect_compose(self, executable_path: str) -> ComposeHelperInfo | None:
        """Locate ``podman-compose`` on PATH."""
        compose_path = self._which(self._COMPOSE_EXECUTABLE)
        if compose_path is None:
            return None

        return ComposeHelperInfo(
            command=[self._COMPOSE_EXECUTABLE],
            version=self._read_version([compose_path, "--version"]),
        )


__all__ = ["PodmanDetector"]
