"""Pydantic models for benchmark baseline documents.

Documents are written with camelCase keys and accepted with either
camelCase or snake_case keys::

    {
      "version": "1",
      "models": {
        "llama3.2:3b": {
          "tokenGeneration": {
            "gpu": {"minTokensPerSec": 50, "maxTokensPerSec": 90},
            "cpu": {"minTokensPerSec": 10, "maxTokensPerSec": 20}
          },
          "promptProcessing": {...}
        }
      },
      "thresholds": {"regressionTolerancePct": 10}
    }
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from llmstack.models.constants import Environment, Metric


class CamelModel(BaseModel):
    """Base model that reads both key styles and writes camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ThroughputRange(CamelModel):
    """Acceptable tokens/sec envelope for one metric in one environment."""

    min_tokens_per_sec: float = Field(..., description="Lowest acceptable rate")
    max_tokens_per_sec: float = Field(..., description="Highest expected rate")


class EnvironmentRanges(CamelModel):
    """Throughput ranges split by execution environment."""

    gpu: ThroughputRange
    cpu: ThroughputRange

    def for_environment(self, environment: Environment) -> ThroughputRange:
        """Return the range for ``environment``."""
        if environment == Environment.GPU:
            return self.gpu
        return self.cpu


class ModelBaseline(CamelModel):
    """Expected throughput envelope for a single model."""

    token_generation: EnvironmentRanges = Field(
        ..., description="Output token generation rate"
    )
    prompt_processing: EnvironmentRanges = Field(
        ..., description="Prompt evaluation rate"
    )

    def ranges(self, metric: Metric) -> EnvironmentRanges:
        """Return the per-environment ranges for ``metric``."""
        if metric == Metric.TOKEN_GENERATION:
            return self.token_generation
        return self.prompt_processing


class Thresholds(CamelModel):
    """Document-wide comparison settings."""

    regression_tolerance_pct: float = Field(
        ...,
        ge=0,
        description="Percentage shaved off each baseline minimum before comparing",
    )


class BaselineDocument(CamelModel):
    """Versioned set of per-model baselines."""

    version: str = Field(..., description="Schema version")
    models: dict[str, ModelBaseline] = Field(
        ..., description="Baselines keyed by model identifier (e.g. 'llama3.2:3b')"
    )
    thresholds: Thresholds


class SchemaIssue(BaseModel):
    """A single baseline validation failure."""

    path: str = Field(..., description="Dotted location, e.g. 'models.m1.tokenGeneration.gpu'")
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class BaselineValidation(BaseModel):
    """Outcome of validating a baseline document."""

    issues: list[SchemaIssue] = Field(default_factory=list)
    model_count: int = Field(0, ge=0, description="Number of model entries examined")
    tolerance_pct: float | None = Field(
        None, description="Regression tolerance, when present and valid"
    )

    @property
    def is_valid(self) -> bool:
        """True when no issues were found."""
        return not self.issues
