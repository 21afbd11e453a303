"""Pydantic models describing container tooling found on the host."""

from pydantic import BaseModel, Field


class ComposeHelperInfo(BaseModel):
    """Compose helper paired with a container backend."""

    command: list[str] = Field(
        ..., description="Invocation prefix (e.g. ['docker', 'compose'])"
    )
    version: str | None = Field(None, description="Reported helper version")


class ContainerToolInfo(BaseModel):
    """Detected container backend executable."""

    installed: bool = Field(True, description="Whether the executable was found")
    name: str = Field(..., description="Canonical tool name ('podman' or 'docker')")
    path: str = Field(..., description="Resolved executable path")
    version: str | None = Field(None, description="Reported tool version")
    compose: ComposeHelperInfo | None = Field(
        None, description="Compose helper, when one is usable"
    )
