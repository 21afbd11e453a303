"""Exception hierarchy for llmstack.

Configuration, schema and malformed-input failures are terminal and never
retried. Regression findings and advisories are not exceptions; they are
returned as data by the baseline engine and the resolver.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from llmstack.models.baseline_models import SchemaIssue


class LlmStackError(Exception):
    """Base exception for llmstack errors."""

    pass


class ConfigurationError(LlmStackError):
    """Raised for an invalid runtime override, missing runtime or credential."""

    pass


class PlaceholderCredentialError(ConfigurationError):
    """Raised when the resolved credential is still the template placeholder."""

    def __init__(self, placeholder: str) -> None:
        self.placeholder = placeholder
        super().__init__(
            f"MONGODB_URI still contains the template placeholder '{placeholder}'. "
            "Edit it with your real connection string."
        )


class SchemaError(LlmStackError):
    """Raised when a baseline document fails validation.

    Carries every issue found, not just the first one.
    """

    def __init__(self, issues: list[SchemaIssue], source: str | None = None) -> None:
        self.issues = list(issues)
        self.source = source
        where = f" in {source}" if source else ""
        count = len(self.issues)
        super().__init__(f"{count} baseline validation error(s){where}")


class MalformedInputError(LlmStackError):
    """Raised when a measurement record cannot be compared at all."""

    pass


__all__ = [
    "ConfigurationError",
    "LlmStackError",
    "MalformedInputError",
    "PlaceholderCredentialError",
    "SchemaError",
]
