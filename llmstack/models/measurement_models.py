"""Pydantic models for benchmark measurements and comparison reports."""

from typing import Any

from pydantic import Field, field_validator

from llmstack.models.baseline_models import CamelModel
from llmstack.models.constants import Environment, FindingStatus, Metric, Verdict


class MetricMeasurement(CamelModel):
    """Observed throughput for one metric.

    ``tokens_per_sec`` is None when the harness could not compute a rate,
    e.g. a zero-duration evaluation.
    """

    tokens_per_sec: float | None = Field(None, ge=0)
    token_count: int | None = Field(None, ge=0)
    duration_sec: float | None = Field(None, ge=0)


class MeasurementRecord(CamelModel):
    """Result of one benchmark run for a model/environment pair."""

    model: str | None = Field(None, description="Model identifier")
    environment: Environment = Field(
        Environment.CPU, description="Where the benchmark ran"
    )
    token_generation: MetricMeasurement | None = None
    prompt_processing: MetricMeasurement | None = None
    total_duration_sec: float | None = Field(None, ge=0)
    load_duration_sec: float | None = Field(None, ge=0)
    timestamp: str | None = Field(None, description="ISO 8601 timestamp")

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, value: Any) -> Any:
        if value is None or value == "":
            return Environment.CPU
        if isinstance(value, str):
            return value.lower()
        return value

    def rate(self, metric: Metric) -> float | None:
        """Return the measured tokens/sec for ``metric``, if any."""
        if metric == Metric.TOKEN_GENERATION:
            measurement = self.token_generation
        else:
            measurement = self.prompt_processing
        if measurement is None:
            return None
        return measurement.tokens_per_sec


class MetricFinding(CamelModel):
    """Comparison outcome for a single metric, with the arithmetic shown."""

    metric: Metric
    status: FindingStatus
    actual_tokens_per_sec: float | None = None
    baseline_min_tokens_per_sec: float | None = None
    threshold_tokens_per_sec: float | None = None
    tolerance_pct: float | None = None
    message: str


class ComparisonReport(CamelModel):
    """Aggregate verdict of comparing one measurement against the baselines."""

    model: str
    environment: Environment
    verdict: Verdict
    findings: list[MetricFinding] = Field(default_factory=list)
    message: str | None = None

    @property
    def regressions(self) -> list[MetricFinding]:
        """Findings that fell below their threshold."""
        return [f for f in self.findings if f.status == FindingStatus.REGRESSION]

    @property
    def failed(self) -> bool:
        """True when the verdict should fail a pipeline."""
        return self.verdict == Verdict.FAIL
