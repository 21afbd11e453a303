"""Benchmark command - turn an inference timing into a measurement record.

CLI Examples:
    curl -s localhost:11434/api/generate -d '{"model": "llama3.2:3b",
        "prompt": "Write a haiku about containers", "stream": false}' > resp.json
    llmstack benchmark record resp.json --environment gpu -o results.json
    llmstack baseline compare results.json
"""

import json
import sys
from pathlib import Path

import click

from llmstack.baselines.store import save_measurement
from llmstack.benchmarks.measurement import (
    PROFILE_DESCRIPTIONS,
    classify_generation_speed,
    measurement_from_ollama,
)
from llmstack.models.constants import Metric
from llmstack.models.measurement_models import MeasurementRecord


def _load_response(response_file: str) -> dict:
    path = Path(response_file)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        click.echo(f"Error: Failed to read Ollama response {response_file}: {e}", err=True)
        sys.exit(1)

    if not isinstance(data, dict):
        click.echo(f"Error: {response_file} must contain a JSON object", err=True)
        sys.exit(1)
    if "error" in data:
        click.echo(f"Error: Ollama returned an error: {data['error']}", err=True)
        sys.exit(1)
    return data


def _print_summary(record: MeasurementRecord) -> None:
    click.echo("Benchmark Results")
    click.echo("-" * 40)
    click.echo(f"Model:       {record.model}")
    click.echo(f"Environment: {record.environment.value}")
    if record.total_duration_sec is not None:
        click.echo(f"Total duration:  {record.total_duration_sec:.2f}s")
    if record.load_duration_sec is not None:
        click.echo(f"Model load time: {record.load_duration_sec:.2f}s")

    rows = [
        (record.prompt_processing, "Prompt processing"),
        (record.token_generation, "Token generation"),
    ]
    for measurement, label in rows:
        if measurement is None or measurement.tokens_per_sec is None:
            click.echo(f"{label}: rate unavailable")
        else:
            click.echo(
                f"{label}: {measurement.token_count} tokens at "
                f"{measurement.tokens_per_sec:.2f} tokens/sec"
            )

    generation = record.rate(Metric.TOKEN_GENERATION)
    if generation is not None:
        profile = classify_generation_speed(generation)
        click.echo()
        click.echo(f"Performance profile: {PROFILE_DESCRIPTIONS[profile]}")


def record_measurement(
    response_file: str,
    model: str | None,
    environment: str,
    output: str | None = None,
) -> None:
    """Convert a saved Ollama generate response into a measurement record."""
    response = _load_response(response_file)
    record = measurement_from_ollama(response, model=model, environment=environment)

    if not record.model:
        click.echo("Error: Model not found in response; pass --model", err=True)
        sys.exit(1)

    if output:
        _print_summary(record)
        save_measurement(record, output)
        click.echo(f"\nResults saved to: {output}")
    else:
        data = record.model_dump(mode="json", by_alias=True, exclude_none=True)
        click.echo(json.dumps(data, indent=2))
