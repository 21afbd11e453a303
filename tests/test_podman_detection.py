"""Tests for Podman detection utilities."""

from __future__ import annotations

import types

import pytest

from llmstack.backends.software.podman import PodmanDetector

PATHS = {
    "podman": "/opt/homebrew/bin/podman",
    "podman-compose": "/opt/homebrew/bin/podman-compose",
}


def _fake_run(args, **_kwargs):
    if args[0].endswith("podman-compose"):
        output = "podman-compose version 1.0.6\npodman version 4.9.3"
    else:
        output = "podman version 4.9.3"
    return types.SimpleNamespace(returncode=0, stdout=output, stderr="")


def test_detect_with_podman_compose(monkeypatch: pytest.MonkeyPatch):
    """Podman and podman-compose on PATH are both reported."""
    monkeypatch.setattr("shutil.which", PATHS.get)
    monkeypatch.setattr("subprocess.run", _fake_run)

    detector = PodmanDetector()
    result = detector.detect()

    assert result is not None
    assert result.name == "podman"
    assert result.path == PATHS["podman"]
    assert result.version == "4.9.3"
    assert result.compose is not None
    assert result.compose.command == ["podman-compose"]
    assert result.compose.version == "1.0.6"
    assert detector.has_compose_helper() is True


def test_detect_without_podman_compose(monkeypatch: pytest.MonkeyPatch):
    """Podman alone is detected but has no compose helper."""
    monkeypatch.setattr("shutil.which", {"podman": PATHS["podman"]}.get)
    monkeypatch.setattr("subprocess.run", _fake_run)

    detector = PodmanDetector()
    result = detector.detect()

    assert result is not None
    assert result.compose is None
    assert detector.has_compose_helper() is False


def test_detect_returns_none_when_podman_missing(monkeypatch: pytest.MonkeyPatch):
    """podman-compose without podman does not count as podman."""
    monkeypatch.setattr("shutil.which", {"podman-compose": PATHS["podman-compose"]}.get)

    assert PodmanDetector().detect() is None


def test_version_none_when_command_fails(monkeypatch: pytest.MonkeyPatch):
    """An unrunnable binary is still reported as present."""

    def broken_run(*_args, **_kwargs):
        raise OSError("exec format error")

    monkeypatch.setattr("shutil.which", PATHS.get)
    monkeypatch.setattr("subprocess.run", broken_run)

    result = PodmanDetector().detect()

    assert result is not None
    assert result.version is None
    assert result.compose is not None
    assert result.compose.version is None


def test_custom_executable(monkeypatch: pytest.MonkeyPatch):
    """An explicit executable path is looked up instead of 'podman'."""
    seen = []

    def fake_which(name):
        seen.append(name)
        return None

    monkeypatch.setattr("shutil.which", fake_which)

    assert PodmanDetector(executable="/usr/local/bin/podman-remote").detect() is None
    assert seen == ["/usr/local/bin/podman-remote"]


def test_software_name():
    """software_name property should return 'podman'."""
    assert PodmanDetector().software_name == "podman"
