"""Measurement records from Ollama ``/api/generate`` responses.

Ollama reports token counts and nanosecond durations for a non-streaming
generation, e.g.::

    {"model": "llama3.2:3b", "total_duration": 5043500667,
     "load_duration": 5025959, "prompt_eval_count": 26,
     "prompt_eval_duration": 325953000, "eval_count": 290,
     "eval_duration": 4709213000, ...}
"""

from __future__ import annotations

import math
from datetime import datetime, timezone
from decimal import ROUND_DOWN, Decimal
from typing import Any

from llmstack.models.constants import (
    EXCELLENT_TOKENS_PER_SEC,
    GOOD_TOKENS_PER_SEC,
    MODERATE_TOKENS_PER_SEC,
    Environment,
    PerformanceProfile,
)
from llmstack.models.measurement_models import MeasurementRecord, MetricMeasurement

NANOSECONDS = 1_000_000_000
_TWO_PLACES = Decimal("0.01")


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def _truncate(value: Decimal) -> float:
    # two decimals, cut rather than rounded
    return float(value.quantize(_TWO_PLACES, rounding=ROUND_DOWN))


def _seconds(nanoseconds: int | None) -> float | None:
    if nanoseconds is None:
        return None
    return _truncate(Decimal(nanoseconds) / NANOSECONDS)


def tokens_per_sec(count: int | None, duration_ns: int | None) -> float | None:
    """Return ``count`` tokens over ``duration_ns`` as tokens/sec.

    Truncated to two decimals. None when either value is missing or the
    duration is zero.
    """
    if count is None or not duration_ns:
        return None
    return _truncate(Decimal(count * NANOSECONDS) / duration_ns)


def _metric(response: dict[str, Any], count_key: str, duration_key: str) -> MetricMeasurement:
    count = _as_int(response.get(count_key))
    duration = _as_int(response.get(duration_key))
    return MetricMeasurement(
        tokens_per_sec=tokens_per_sec(count, duration),
        token_count=count,
        duration_sec=_seconds(duration),
    )


def measurement_from_ollama(
    response: dict[str, Any],
    model: str | None = None,
    environment: Environment | str = Environment.CPU,
) -> MeasurementRecord:
    """Build a measurement record from an Ollama generate response.

    Args:
        response: Decoded JSON body of ``POST /api/generate`` with
            ``"stream": false``.
        model: Model identifier; defaults to the response's ``model``.
        environment: Where the inference ran.
    """
    return MeasurementRecord(
        model=model or response.get("model"),
        environment=environment,
        token_generation=_metric(response, "eval_count", "eval_duration"),
        prompt_processing=_metric(response, "prompt_eval_count", "prompt_eval_duration"),
        total_duration_sec=_seconds(_as_int(response.get("total_duration"))),
        load_duration_sec=_seconds(_as_int(response.get("load_duration"))),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


def classify_generation_speed(rate: float) -> PerformanceProfile:
    """Place a token generation rate in a rough performance band."""
    if rate > EXCELLENT_TOKENS_PER_SEC:
        return PerformanceProfile.EXCELLENT
    if rate > GOOD_TOKENS_PER_SEC:
        return PerformanceProfile.GOOD
    if rate > MODERATE_TOKENS_PER_SEC:
        return PerformanceProfile.MODERATE
    return PerformanceProfile.SLOW


PROFILE_DESCRIPTIONS = {
    PerformanceProfile.EXCELLENT: "Excellent - likely using GPU acceleration",
    PerformanceProfile.GOOD: "Good - GPU acceleration active with some overhead",
    PerformanceProfile.MODERATE: "Moderate - may be CPU-only or suboptimal GPU setup",
    PerformanceProfile.SLOW: "Slow - likely CPU-only mode",
}


__all__ = [
    "PROFILE_DESCRIPTIONS",
    "classify_generation_speed",
    "measurement_from_ollama",
    "tokens_per_sec",
]
