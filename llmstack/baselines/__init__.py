"""Benchmark baseline engine - validation, comparison and reporting."""

from llmstack.baselines.compare import compare, regression_threshold
from llmstack.baselines.report import OutputFormat, render_comparison, render_validation
from llmstack.baselines.store import (
    dump_baseline,
    load_baseline,
    load_measurement,
    parse_baseline,
    parse_measurement,
    save_measurement,
)
from llmstack.baselines.validator import validate_baseline

__all__ = [
    "OutputFormat",
    "compare",
    "dump_baseline",
    "load_baseline",
    "load_measurement",
    "parse_baseline",
    "parse_measurement",
    "regression_threshold",
    "render_comparison",
    "render_validation",
    "save_measurement",
    "validate_baseline",
]
