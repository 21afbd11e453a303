"""Regression comparison of a measurement against the baselines.

Threshold arithmetic mirrors the original ``bc`` pipeline: the baseline
minimum is shrunk by the tolerance and truncated to two decimal places,
then the measured rate must not be strictly below it.
"""

from __future__ import annotations

from decimal import ROUND_DOWN, Decimal

from llmstack.errors import MalformedInputError
from llmstack.models.baseline_models import BaselineDocument, ModelBaseline
from llmstack.models.constants import FindingStatus, Metric, Verdict
from llmstack.models.measurement_models import (
    ComparisonReport,
    MeasurementRecord,
    MetricFinding,
)
from llmstack.utils.logger import Logger

_TWO_PLACES = Decimal("0.01")
_HUNDRED = Decimal(100)

METRIC_LABELS = {
    Metric.TOKEN_GENERATION: "Token generation",
    Metric.PROMPT_PROCESSING: "Prompt processing",
}


def _decimal(value: float) -> Decimal:
    # str() keeps 44.9 as 44.9 instead of its binary expansion
    return Decimal(str(value))


def regression_threshold(baseline_min: float, tolerance_pct: float) -> Decimal:
    """Return ``baseline_min * (100 - tolerance_pct) / 100`` truncated to 0.01."""
    threshold = _decimal(baseline_min) * (_HUNDRED - _decimal(tolerance_pct)) / _HUNDRED
    return threshold.quantize(_TWO_PLACES, rounding=ROUND_DOWN)


def _compare_metric(
    metric: Metric,
    record: MeasurementRecord,
    baseline: ModelBaseline,
    tolerance_pct: float,
) -> MetricFinding:
    label = METRIC_LABELS[metric]
    actual = record.rate(metric)
    baseline_min = baseline.ranges(metric).for_environment(record.environment).min_tokens_per_sec

    if actual is None or baseline_min is None:
        return MetricFinding(
            metric=metric,
            status=FindingStatus.WARN,
            actual_tokens_per_sec=actual,
            baseline_min_tokens_per_sec=baseline_min,
            tolerance_pct=tolerance_pct,
            message=f"Could not compare {label.lower()}: insufficient data to compare",
        )

    threshold = regression_threshold(baseline_min, tolerance_pct)
    details = (
        f"baseline min {baseline_min} t/s, threshold {threshold} t/s "
        f"with {tolerance_pct:g}% tolerance"
    )
    if _decimal(actual) < threshold:
        status = FindingStatus.REGRESSION
        message = f"{label} {actual} t/s is below threshold {threshold} t/s ({details})"
    else:
        status = FindingStatus.OK
        message = f"{label} {actual} t/s OK ({details})"

    return MetricFinding(
        metric=metric,
        status=status,
        actual_tokens_per_sec=actual,
        baseline_min_tokens_per_sec=baseline_min,
        threshold_tokens_per_sec=float(threshold),
        tolerance_pct=tolerance_pct,
        message=message,
    )


def compare(document: BaselineDocument, record: MeasurementRecord) -> ComparisonReport:
    """Classify a measurement against a validated baseline document.

    Args:
        document: Baselines that already passed validation.
        record: Measurement to check.

    Returns:
        WARN when the model has no baseline, FAIL when any metric regressed,
        OK otherwise. Metrics missing a rate are reported as WARN findings
        without affecting the verdict.

    Raises:
        MalformedInputError: If the record has no model identifier.
    """
    log = Logger.get("baselines.compare")

    if not record.model:
        raise MalformedInputError("Results file missing 'model' field")

    baseline = document.models.get(record.model)
    if baseline is None:
        message = (
            f"No baseline defined for model '{record.model}'; "
            "skipping regression check"
        )
        log.warning(message)
        return ComparisonReport(
            model=record.model,
            environment=record.environment,
            verdict=Verdict.WARN,
            message=message,
        )

    tolerance_pct = document.thresholds.regression_tolerance_pct
    findings = [
        _compare_metric(metric, record, baseline, tolerance_pct) for metric in Metric
    ]
    for finding in findings:
        log.debug(f"{finding.metric.value}: {finding.status.value}")

    regressions = sum(1 for f in findings if f.status == FindingStatus.REGRESSION)
    if regressions:
        verdict = Verdict.FAIL
        message = f"{regressions} regression(s) detected"
    else:
        verdict = Verdict.OK
        message = "No regressions detected"

    return ComparisonReport(
        model=record.model,
        environment=record.environment,
        verdict=verdict,
        findings=findings,
        message=message,
    )


__all__ = ["METRIC_LABELS", "compare", "regression_threshold"]
