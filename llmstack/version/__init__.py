"""llmstack version information."""

from llmstack.version.llmstack_version import LLMSTACK_VERSION, Version

__all__ = ["LLMSTACK_VERSION", "Version"]
