"""Pydantic models and immutable results for structured output."""

from llmstack.models.baseline_models import (
    BaselineDocument,
    BaselineValidation,
    EnvironmentRanges,
    ModelBaseline,
    SchemaIssue,
    Thresholds,
    ThroughputRange,
)
from llmstack.models.measurement_models import (
    ComparisonReport,
    MeasurementRecord,
    MetricFinding,
    MetricMeasurement,
)
from llmstack.models.runtime_models import Advisory, ResolvedRuntime, ResolvedSecret

__all__ = [
    "Advisory",
    "BaselineDocument",
    "BaselineValidation",
    "ComparisonReport",
    "EnvironmentRanges",
    "MeasurementRecord",
    "MetricFinding",
    "MetricMeasurement",
    "ModelBaseline",
    "ResolvedRuntime",
    "ResolvedSecret",
    "SchemaIssue",
    "Thresholds",
    "ThroughputRange",
]
