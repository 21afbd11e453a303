"""Docker detection utilities."""

from __future__ import annotations

import re

from llmstack.backends.software.base import ContainerToolDetector
from llmstack.models.constants import Backend
from llmstack.models.tool_models import ComposeHelperInfo

_DOCKER_VERSION = re.compile(r"Docker version ([^,\s]+)")
_COMPOSE_VERSION = re.compile(r"version v?([0-9]+(?:\.[0-9]+)+)")


class DockerDetector(ContainerToolDetector):
    """Detect the Docker CLI and its ``docker compose`` plugin."""

    _EXECUTABLE = Backend.DOCKER.value
    _VERSION_PATTERN = _DOCKER_VERSION

    def _detect_compose(self, executable_path: str) -> ComposeHelperInfo | None:
        """Check the compose plugin via ``docker compose version``."""
        version = self._read_version(
            [executable_path, "compose", "version"], _COMPOSE_VERSION
        )
        if version is None:
            return None
        return ComposeHelperInfo(command=[self._EXECUTABLE, "compose"], version=version)


__all__ = ["DockerDetector"]
