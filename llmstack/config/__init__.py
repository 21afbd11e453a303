"""Runtime and secret resolution."""

from llmstack.config.runtime import parse_backend, resolve_runtime, runtime_for
from llmstack.config.secrets import (
    read_dotenv_value,
    resolve_secret,
    resolve_secret_from_environment,
    write_secret_file,
)

__all__ = [
    "parse_backend",
    "read_dotenv_value",
    "resolve_runtime",
    "resolve_secret",
    "resolve_secret_from_environment",
    "runtime_for",
    "write_secret_file",
]
