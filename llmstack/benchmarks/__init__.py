"""Benchmark measurement helpers."""

from llmstack.benchmarks.measurement import (
    PROFILE_DESCRIPTIONS,
    classify_generation_speed,
    measurement_from_ollama,
    tokens_per_sec,
)

__all__ = [
    "PROFILE_DESCRIPTIONS",
    "classify_generation_speed",
    "measurement_from_ollama",
    "tokens_per_sec",
]
