"""llmstack - runtime resolution and benchmark regression checks for a local LLM stack."""

from llmstack.version.llmstack_version import LLMSTACK_VERSION, Version

__version__ = str(LLMSTACK_VERSION)
__version_info__ = LLMSTACK_VERSION

__all__ = [
    "LLMSTACK_VERSION",
    "Version",
    "__version__",
    "__version_info__",
]
