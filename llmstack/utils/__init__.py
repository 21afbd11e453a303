"""llmstack utilities - environment access and logging."""

from llmstack.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
    get_nonempty_env,
)
from llmstack.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "get_env",
    "get_nonempty_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]
