"""Structural validation of baseline documents.

Every check runs and every failure is collected; a document with one bad
model is reported together with problems in all the others.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from llmstack.models.baseline_models import BaselineValidation, SchemaIssue
from llmstack.models.constants import Environment, Metric
from llmstack.utils.logger import Logger

# (camelCase, snake_case) spellings accepted for each key
_VERSION = ("version", "version")
_MODELS = ("models", "models")
_THRESHOLDS = ("thresholds", "thresholds")
_TOLERANCE = ("regressionTolerancePct", "regression_tolerance_pct")
_MIN = ("minTokensPerSec", "min_tokens_per_sec")
_MAX = ("maxTokensPerSec", "max_tokens_per_sec")
_METRIC_KEYS = {
    Metric.TOKEN_GENERATION: ("tokenGeneration", "token_generation"),
    Metric.PROMPT_PROCESSING: ("promptProcessing", "prompt_processing"),
}


def _get(mapping: Mapping[str, Any], keys: tuple[str, str]) -> Any:
    """Return the value under either spelling; JSON null counts as absent."""
    camel, snake = keys
    if mapping.get(camel) is not None:
        return mapping[camel]
    return mapping.get(snake)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # integer too large for a float
        return False


def _validate_range(path: str, entry: Any) -> list[SchemaIssue]:
    if not isinstance(entry, Mapping):
        return [SchemaIssue(path=path, message="missing min/max throughput range")]

    issues: list[SchemaIssue] = []
    bounds = {}
    for keys in (_MIN, _MAX):
        value = _get(entry, keys)
        if value is None:
            issues.append(SchemaIssue(path=f"{path}.{keys[0]}", message="missing"))
        elif not _is_number(value):
            issues.append(
                SchemaIssue(
                    path=f"{path}.{keys[0]}", message=f"must be a number, got {value!r}"
                )
            )
        else:
            bounds[keys[0]] = value

    if len(bounds) == 2 and bounds[_MIN[0]] > bounds[_MAX[0]]:
        issues.append(
            SchemaIssue(
                path=path,
                message=f"min ({bounds[_MIN[0]]}) > max ({bounds[_MAX[0]]})",
            )
        )
    return issues


def _validate_model(model_id: str, entry: Any) -> list[SchemaIssue]:
    path = f"models.{model_id}"
    if not isinstance(entry, Mapping):
        return [SchemaIssue(path=path, message="model baseline must be an object")]

    issues: list[SchemaIssue] = []
    for metric, keys in _METRIC_KEYS.items():
        metric_path = f"{path}.{metric.value}"
        ranges = _get(entry, keys)
        if not isinstance(ranges, Mapping):
            issues.append(
                SchemaIssue(
                    path=metric_path,
                    message=f"missing {metric.value} ranges for gpu and cpu",
                )
            )
            continue
        for env in Environment:
            issues.extend(_validate_range(f"{metric_path}.{env.value}", ranges.get(env.value)))
    return issues


def validate_baseline(document: Any) -> BaselineValidation:
    """Validate a parsed baseline document.

    Args:
        document: JSON-decoded baseline document.

    Returns:
        All issues found (empty when valid), the number of model entries
        examined and the tolerance when it is usable.
    """
    log = Logger.get("baselines.validate")

    if not isinstance(document, Mapping):
        return BaselineValidation(
            issues=[SchemaIssue(path="$", message="baseline document must be a JSON object")]
        )

    issues: list[SchemaIssue] = []

    version = _get(document, _VERSION)
    if version is None or version == "":
        issues.append(SchemaIssue(path="version", message="missing 'version' field"))
    elif not isinstance(version, str):
        issues.append(
            SchemaIssue(path="version", message=f"must be a string, got {version!r}")
        )

    models = _get(document, _MODELS)
    model_entries: Mapping[str, Any] = {}
    if models is None:
        issues.append(SchemaIssue(path="models", message="missing 'models' field"))
    elif not isinstance(models, Mapping):
        issues.append(
            SchemaIssue(path="models", message="must be an object keyed by model identifier")
        )
    elif not models:
        issues.append(SchemaIssue(path="models", message="must define at least one model"))
    else:
        model_entries = models

    tolerance_path = f"thresholds.{_TOLERANCE[0]}"
    thresholds = _get(document, _THRESHOLDS)
    tolerance = _get(thresholds, _TOLERANCE) if isinstance(thresholds, Mapping) else None
    tolerance_pct: float | None = None
    if tolerance is None:
        issues.append(SchemaIssue(path=tolerance_path, message="missing regression tolerance"))
    elif not _is_number(tolerance):
        issues.append(
            SchemaIssue(path=tolerance_path, message=f"must be a number, got {tolerance!r}")
        )
    elif tolerance < 0:
        issues.append(SchemaIssue(path=tolerance_path, message=f"must be >= 0, got {tolerance}"))
    else:
        tolerance_pct = float(tolerance)

    for model_id, entry in model_entries.items():
        model_issues = _validate_model(model_id, entry)
        log.debug(f"{model_id}: {'OK' if not model_issues else f'{len(model_issues)} issue(s)'}")
        issues.extend(model_issues)

    return BaselineValidation(
        issues=issues, model_count=len(model_entries), tolerance_pct=tolerance_pct
    )


__all__ = ["validate_baseline"]
