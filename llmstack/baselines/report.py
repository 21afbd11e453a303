"""Rendering of validation and comparison results.

Supports JSON, YAML and human-readable text:

    content = render_comparison(report, OutputFormat.TEXT)
    emit(content, sys.stdout)
    emit(render_comparison(report, OutputFormat.JSON), "report.json")
"""

import json
from enum import Enum
from io import StringIO
from pathlib import Path
from typing import Any, TextIO

import yaml  # type: ignore[import-untyped, unused-ignore]

from llmstack.models.baseline_models import BaselineValidation
from llmstack.models.constants import FindingStatus, Verdict
from llmstack.models.measurement_models import ComparisonReport

_BANNER = "=" * 42


class OutputFormat(Enum):
    """Supported output formats for reports."""

    JSON = "json"
    YAML = "yaml"
    TEXT = "text"


def _serialize(data: dict[str, Any], fmt: OutputFormat) -> str:
    if fmt == OutputFormat.JSON:
        return json.dumps(data, indent=2) + "\n"
    result: str = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    return result


def validation_to_dict(validation: BaselineValidation, source: str | None = None) -> dict[str, Any]:
    """Convert a validation result to a serializable dictionary."""
    return {
        "source": source,
        "valid": validation.is_valid,
        "modelCount": validation.model_count,
        "regressionTolerancePct": validation.tolerance_pct,
        "errors": [str(issue) for issue in validation.issues],
    }


def render_validation(
    validation: BaselineValidation,
    fmt: OutputFormat = OutputFormat.TEXT,
    source: str | None = None,
) -> str:
    """Render a baseline validation result."""
    if fmt != OutputFormat.TEXT:
        return _serialize(validation_to_dict(validation, source), fmt)

    output = StringIO()
    if source:
        output.write(f"Validating baselines: {source}\n")
    output.write(f"  Found {validation.model_count} model baseline(s)\n")
    if validation.tolerance_pct is not None:
        output.write(f"  Regression tolerance: {validation.tolerance_pct:g}%\n")
    for issue in validation.issues:
        output.write(f"  FAIL: {issue}\n")
    output.write("\n")
    if validation.is_valid:
        output.write("OK: Baselines validation passed\n")
    else:
        output.write(f"FAIL: {len(validation.issues)} validation error(s) found\n")
    return output.getvalue()


def render_comparison(
    report: ComparisonReport, fmt: OutputFormat = OutputFormat.TEXT
) -> str:
    """Render a comparison report."""
    if fmt != OutputFormat.TEXT:
        return _serialize(report.model_dump(mode="json", by_alias=True), fmt)

    output = StringIO()
    output.write(f"Model: {report.model}\n")
    output.write(f"Environment: {report.environment.value}\n\n")

    if report.verdict == Verdict.WARN and not report.findings:
        output.write(f"WARN: {report.message}\n")
        return output.getvalue()

    for finding in report.findings:
        if finding.status == FindingStatus.WARN:
            output.write(f"WARN: {finding.message}\n")
        else:
            output.write(f"{finding.status.value}: {finding.message}\n")

    output.write(f"\n{_BANNER}\n")
    output.write(f"{report.verdict.value}: {report.message}\n")
    output.write(f"{_BANNER}\n")
    return output.getvalue()


def emit(content: str, output: str | Path | TextIO) -> None:
    """Write rendered content to a file path or stream."""
    if isinstance(output, str | Path):
        path = Path(output)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    else:
        output.write(content)


__all__ = [
    "OutputFormat",
    "emit",
    "render_comparison",
    "render_validation",
    "validation_to_dict",
]
