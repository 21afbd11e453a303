"""Container tool detection backends."""

from llmstack.backends.software.base import ContainerToolDetector, SoftwareDetector
from llmstack.backends.software.docker import DockerDetector
from llmstack.backends.software.podman import PodmanDetector
from llmstack.models.tool_models import ComposeHelperInfo, ContainerToolInfo

__all__ = [
    "ComposeHelperInfo",
    "ContainerToolDetector",
    "ContainerToolInfo",
    "DockerDetector",
    "PodmanDetector",
    "SoftwareDetector",
]
