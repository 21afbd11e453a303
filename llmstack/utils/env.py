"""Environment variable helpers with type coercion and masked logging.

The resolver never reads ``os.environ`` directly; the CLI collects values
through these helpers and passes them in as explicit parameters.

Usage:
    from llmstack.utils.env import get_env, get_nonempty_env

    level = get_env("LLMSTACK_LOG_LEVEL", default="INFO")
    override = get_nonempty_env("CONTAINER_RUNTIME")
    uri = get_nonempty_env("MONGODB_URI", log=True, mask_in_log=True)
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.lower() not in ("false", "0", "", "no", "off")
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value
        return as_type(value)
    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None, masked: bool = False) -> None:
    """Log environment variable access if the logger is configured."""
    from llmstack.utils.logger import Logger

    if not Logger.is_configured():
        return

    if value is None:
        display_value = "(unset)"
    elif masked:
        display_value = "***"
    else:
        display_value = value
    Logger.get("env").debug(f"ENV GET {name}={display_value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
    mask_in_log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is not set.
        as_type: Type to convert the value to (bool, int, float, str).
        log: If True, log the access (uses Logger if configured).
        mask_in_log: If True, mask the value in logs (for secrets).

    Returns:
        The environment variable value, converted to as_type if specified,
        or default if not set.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value, masked=mask_in_log)

    if value is None:
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


def get_nonempty_env(
    name: str, *, log: bool = False, mask_in_log: bool = False
) -> str | None:
    """Get an environment variable, treating an empty string as unset.

    Shell users clear variables with ``export NAME=``; such values must not
    win over lower-precedence sources.
    """
    value = get_env(name, log=log, mask_in_log=mask_in_log)
    if value is None or value == "":
        return None
    return value

