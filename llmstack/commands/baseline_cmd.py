"""Baseline command - validate baselines and check results for regressions.

CLI Examples:
    llmstack baseline validate                       # Validate default baselines
    llmstack baseline validate --baselines b.json    # Validate a specific file
    llmstack baseline compare results.json           # Compare one run
    llmstack baseline compare results.json -f json   # Structured report
"""

import sys

import click

from llmstack.baselines.compare import compare
from llmstack.baselines.report import (
    OutputFormat,
    emit,
    render_comparison,
    render_validation,
)
from llmstack.baselines.store import load_baseline, load_measurement, read_baseline_data
from llmstack.baselines.validator import validate_baseline
from llmstack.errors import MalformedInputError, SchemaError


def _fail_schema(error: SchemaError) -> None:
    click.echo(f"FAIL: {error}", err=True)
    for issue in error.issues:
        click.echo(f"  {issue}", err=True)
    sys.exit(1)


def validate_baselines(baselines: str, fmt: str = "text") -> None:
    """Validate a baselines file; exit 1 with itemized errors when invalid."""
    try:
        data = read_baseline_data(baselines)
    except SchemaError as e:
        _fail_schema(e)

    validation = validate_baseline(data)
    click.echo(render_validation(validation, OutputFormat(fmt), source=baselines), nl=False)
    if not validation.is_valid:
        sys.exit(1)


def compare_results(
    results: str,
    baselines: str,
    fmt: str = "text",
    output: str | None = None,
) -> None:
    """Compare a results file against the baselines.

    Exits 0 on OK or WARN, 1 on a regression or malformed input.
    """
    try:
        document = load_baseline(baselines)
        record = load_measurement(results)
        report = compare(document, record)
    except SchemaError as e:
        _fail_schema(e)
    except MalformedInputError as e:
        click.echo(f"FAIL: {e}", err=True)
        sys.exit(1)

    content = render_comparison(report, OutputFormat(fmt))
    if output:
        emit(content, output)
        click.echo(f"Report saved to: {output}")
    else:
        click.echo(content, nl=False)

    if report.failed:
        sys.exit(1)
