"""Base classes for container tool detection."""

import json
import re
import shutil
import subprocess
from abc import ABC, abstractmethod

from llmstack.models.tool_models import ComposeHelperInfo, ContainerToolInfo

_VERSION_PATTERN = re.compile(r"v?([0-9]+(?:\.[0-9]+)+)")


class SoftwareDetector(ABC):
    """Base class for detecting software installations.

    Subclasses implement detect() to check for the software and return a
    Pydantic model describing it, or None when it is absent.
    """

    @abstractmethod
    def detect(self) -> ContainerToolInfo | None:
        """Detect if the software is installed and gather its information.

        Returns
        -------
            Pydantic model with software info if installed, None otherwise.
        """
        pass

    @property
    @abstractmethod
    def software_name(self) -> str:
        """Return the canonical name of the software (e.g. 'podman')."""
        pass

    def is_installed(self) -> bool:
        """Check if the software is installed."""
        return self.detect() is not None

    def to_dict(self) -> dict | None:
        """Convert software info to dictionary format.

        Returns
        -------
            Dictionary with software info, or None if not installed.
        """
        info = self.detect()
        if info is None:
            return None
        return info.model_dump()

    def to_json(self, indent: int | None = 2) -> str | None:
        """Convert software info to JSON string.

        Returns
        -------
            JSON string with software info, or None if not installed.
        """
        data = self.to_dict()
        if data is None:
            return None
        return json.dumps(data, indent=indent)

    @staticmethod
    def _run_command(
        args: list[str],
        timeout: float = 5.0,
    ) -> tuple[int, str, str] | None:
        """Run a command and return its output.

        Args:
            args: Command and arguments to run
            timeout: Maximum time to wait for command (seconds)

        Returns
        -------
            Tuple of (return_code, stdout, stderr) if command ran,
            None if command failed to execute.
        """
        try:
            result = subprocess.run(
                args,
                check=False,
                capture_output=True,
                text=True,
                timeout=timeout,
            )
            return (result.returncode, result.stdout or "", result.stderr or "")
        except (OSError, subprocess.TimeoutExpired):
            return None

    @staticmethod
    def _which(executable: str) -> str | None:
        """Find executable in PATH."""
        return shutil.which(executable)

    @classmethod
    def _read_version(
        cls, args: list[str], pattern: re.Pattern[str] = _VERSION_PATTERN
    ) -> str | None:
        """Run a ``--version`` style command and parse the version string.

        Returns
        -------
            Parsed version if the command succeeded, the raw output when the
            pattern does not match, otherwise None.
        """
        result = cls._run_command(args)
        if result is None:
            return None

        returncode, stdout, stderr = result
        if returncode != 0:
            return None

        output = (stdout or stderr).strip()
        if not output:
            return None

        match = pattern.search(output)
        if match:
            return match.group(1)
        return output


class ContainerToolDetector(SoftwareDetector):
    """Detect a container backend executable and its compose helper.

    Subclasses set ``_EXECUTABLE`` and implement ``_detect_compose``.
    """

    _EXECUTABLE: str = ""
    _VERSION_PATTERN: re.Pattern[str] = _VERSION_PATTERN

    def __init__(self, executable: str | None = None) -> None:
        """Initialize the detector.

        Args:
            executable: Name or absolute path of the backend executable.
        """
        self._executable = executable or self._EXECUTABLE

    @property
    def software_name(self) -> str:
        """Return the canonical name of the backend."""
        return self._EXECUTABLE

    def detect(self) -> ContainerToolInfo | None:
        """Detect the backend and collect path, version and compose details.

        Returns
        -------
            ContainerToolInfo when the executable is on PATH, None otherwise.
        """
        path = self._which(self._executable)
        if path is None:
            return None

        return ContainerToolInfo(
            installed=True,
            name=self.software_name,
            path=path,
            version=self._read_version([path, "--version"], self._VERSION_PATTERN),
            compose=self._detect_compose(path),
        )

    def has_compose_helper(self) -> bool:
        """Return True when the backend's compose helper is usable."""
        info = self.detect()
        return info is not None and info.compose is not None

    @abstractmethod
    def _detect_compose(self, executable_path: str) -> ComposeHelperInfo | None:
        """Locate the compose helper for this backend."""
        pass


__all__ = ["ContainerToolDetector", "SoftwareDetector"]
