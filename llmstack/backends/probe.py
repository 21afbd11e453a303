"""Capability probes consumed by the runtime resolver.

The resolver only asks two yes/no questions per backend. How the answer is
obtained (PATH lookups, ``--version`` calls) stays behind this interface so
the precedence logic can be tested with a fake probe.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from llmstack.backends.software.base import ContainerToolDetector
from llmstack.backends.software.docker import DockerDetector
from llmstack.backends.software.podman import PodmanDetector
from llmstack.models.constants import Backend
from llmstack.models.tool_models import ContainerToolInfo
from llmstack.utils.logger import Logger


class CapabilityProbe(ABC):
    """Answers whether a container backend can be used on this host."""

    @abstractmethod
    def is_available(self, backend: Backend) -> bool:
        """Return True when the backend's executable is present."""
        pass

    @abstractmethod
    def is_compose_helper_available(self, backend: Backend) -> bool:
        """Return True when the backend's compose helper is present."""
        pass


class HostCapabilityProbe(CapabilityProbe):
    """Probe the local host using the software detectors.

    Each backend is detected at most once per probe instance.

    Parameters
    ----------
    detectors : dict[Backend, ContainerToolDetector] | None
        Detector per backend. Defaults to PodmanDetector and DockerDetector.
    """

    def __init__(
        self, detectors: dict[Backend, ContainerToolDetector] | None = None
    ) -> None:
        self._detectors = detectors or {
            Backend.PODMAN: PodmanDetector(),
            Backend.DOCKER: DockerDetector(),
        }
        self._cache: dict[Backend, ContainerToolInfo | None] = {}

    def info(self, backend: Backend) -> ContainerToolInfo | None:
        """Return (and cache) the detection result for ``backend``."""
        if backend not in self._cache:
            detector = self._detectors.get(backend)
            info = detector.detect() if detector is not None else None
            Logger.get("backends.probe").debug(
                f"{backend.value}: {'found at ' + info.path if info else 'not found'}"
            )
            self._cache[backend] = info
        return self._cache[backend]

    def is_available(self, backend: Backend) -> bool:
        """Return True when the backend's executable is on PATH."""
        return self.info(backend) is not None

    def is_compose_helper_available(self, backend: Backend) -> bool:
        """Return True when the backend's compose helper is usable."""
        info = self.info(backend)
        return info is not None and info.compose is not None


__all__ = ["CapabilityProbe", "HostCapabilityProbe"]
