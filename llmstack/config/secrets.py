"""MongoDB credential resolution.

Priority order: secrets file > environment variable > .env file.

Whatever channel supplies the value, it ends up in the default secrets file
(mode 0600) so the compose ``secrets:`` stanza always has a file to mount.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from dotenv import dotenv_values

from llmstack.errors import ConfigurationError, PlaceholderCredentialError
from llmstack.models.constants import (
    CREDENTIAL_PLACEHOLDER,
    DEFAULT_DOTENV_FILE,
    DEFAULT_SECRET_FILE,
    LIVE_URI_PATTERN,
    SECRET_ENV_VAR,
    SECRET_FILE_ENV_VAR,
    TEMPLATE_MARKERS,
    SecretSource,
)
from llmstack.models.runtime_models import Advisory, ResolvedSecret
from llmstack.utils.env import get_nonempty_env
from llmstack.utils.logger import Logger

NOT_CONFIGURED_HINT = (
    "MONGODB_URI not configured. Provide your MongoDB connection string "
    "via one of:\n"
    "  1. Secrets file:  mkdir -p secrets && echo 'your-uri' > secrets/mongodb_uri\n"
    "     (or point MONGODB_URI_FILE at another file)\n"
    "  2. Environment:   export MONGODB_URI='your-uri'\n"
    "  3. .env file:     set MONGODB_URI in .env"
)

DOTENV_MIGRATION_ADVICE = (
    ".env appears to contain real MongoDB credentials. Consider removing "
    "MONGODB_URI from .env; the secrets file already provides it."
)

_LIVE_URI = re.compile(LIVE_URI_PATTERN)


def read_dotenv_value(
    path: str | Path = DEFAULT_DOTENV_FILE, key: str = SECRET_ENV_VAR
) -> str | None:
    """Return ``key`` from a ``KEY=VALUE`` file, or None if absent or empty."""
    path = Path(path)
    if not path.is_file():
        return None
    value = dotenv_values(path).get(key)
    return value or None


def is_placeholder(value: str) -> bool:
    """True when ``value`` still carries the template credentials."""
    return CREDENTIAL_PLACEHOLDER in value


def looks_live(value: str) -> bool:
    """True when ``value`` looks like a real, edited connection string."""
    if any(marker in value for marker in TEMPLATE_MARKERS):
        return False
    return _LIVE_URI.search(value) is not None


def write_secret_file(path: str | Path, value: str) -> Path:
    """Write ``value`` to ``path`` readable by the owner only.

    Parent directories are created as needed. An existing file is truncated.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(value)
    # os.open only applies the mode when it creates the file
    os.chmod(path, 0o600)
    return path


def _read_secret_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read secrets file {path}: {e}") from e


def resolve_secret(
    explicit_file_path: str | Path | None,
    env_value: str | None,
    dotenv_value: str | None,
    default_file_path: str | Path = DEFAULT_SECRET_FILE,
    *,
    materialize: bool = True,
) -> ResolvedSecret:
    """Resolve the MongoDB credential from competing sources.

    Args:
        explicit_file_path: Secrets file override (MONGODB_URI_FILE).
        env_value: MONGODB_URI from the process environment.
        dotenv_value: MONGODB_URI parsed from the .env file.
        default_file_path: Canonical secrets file location.
        materialize: Write non-file values to ``default_file_path``.

    Returns:
        The resolved secret with any advisories.

    Raises:
        ConfigurationError: If no channel provides a value, the value is
            empty, or the secrets file cannot be read or written.
        PlaceholderCredentialError: If the value is the template
            placeholder.
    """
    log = Logger.get("config.secrets")
    default_path = Path(default_file_path)
    secret_path = Path(explicit_file_path) if explicit_file_path else default_path

    if secret_path.is_file():
        value = _read_secret_file(secret_path)
        source = SecretSource.SECRET_FILE
        materialized_path = secret_path
    elif env_value:
        value = env_value
        source = SecretSource.ENVIRONMENT
        materialized_path = default_path
    elif dotenv_value:
        value = dotenv_value
        source = SecretSource.DOTENV_FILE
        materialized_path = default_path
    else:
        raise ConfigurationError(NOT_CONFIGURED_HINT)

    if not value:
        raise ConfigurationError(f"MONGODB_URI from {source.value} is empty")
    if is_placeholder(value):
        raise PlaceholderCredentialError(CREDENTIAL_PLACEHOLDER)

    log.info(f"Loaded MONGODB_URI from {source.value} ({materialized_path})")

    warnings: list[Advisory] = []
    if source == SecretSource.SECRET_FILE and dotenv_value and looks_live(dotenv_value):
        log.warning(DOTENV_MIGRATION_ADVICE)
        warnings.append(Advisory(code="dotenv-credentials", message=DOTENV_MIGRATION_ADVICE))

    if source != SecretSource.SECRET_FILE and materialize:
        try:
            write_secret_file(materialized_path, value)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write secrets file {materialized_path}: {e}"
            ) from e
        log.debug(f"Wrote MONGODB_URI to {materialized_path}")

    return ResolvedSecret(
        value=value,
        source=source,
        materialized_path=materialized_path,
        warnings=tuple(warnings),
    )


def resolve_secret_from_environment(
    dotenv_file: str | Path = DEFAULT_DOTENV_FILE,
    default_file_path: str | Path = DEFAULT_SECRET_FILE,
    *,
    explicit_file_path: str | Path | None = None,
    materialize: bool = True,
) -> ResolvedSecret:
    """Collect the three channels from the process and resolve the secret.

    ``explicit_file_path`` takes the place of MONGODB_URI_FILE when given.
    """
    return resolve_secret(
        explicit_file_path=explicit_file_path
        or get_nonempty_env(SECRET_FILE_ENV_VAR, log=True),
        env_value=get_nonempty_env(SECRET_ENV_VAR, log=True, mask_in_log=True),
        dotenv_value=read_dotenv_value(dotenv_file),
        default_file_path=default_file_path,
        materialize=materialize,
    )


__all__ = [
    "NOT_CONFIGURED_HINT",
    "is_placeholder",
    "looks_live",
    "read_dotenv_value",
    "resolve_secret",
    "resolve_secret_from_environment",
    "write_secret_file",
]
