"""Loading and saving baseline documents and measurement records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from llmstack.baselines.validator import validate_baseline
from llmstack.errors import MalformedInputError, SchemaError
from llmstack.models.baseline_models import BaselineDocument, SchemaIssue
from llmstack.models.measurement_models import MeasurementRecord


def _issues_from(error: ValidationError) -> list[SchemaIssue]:
    return [
        SchemaIssue(
            path=".".join(str(part) for part in err["loc"]) or "$",
            message=err["msg"],
        )
        for err in error.errors()
    ]


def read_baseline_data(path: str | Path) -> Any:
    """Read a baseline file as raw JSON.

    Raises:
        SchemaError: If the file is missing or is not valid JSON.
    """
    path = Path(path)
    if not path.is_file():
        raise SchemaError(
            [SchemaIssue(path="$", message=f"baselines file not found: {path}")],
            source=str(path),
        )
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except ValueError as e:
        raise SchemaError(
            [SchemaIssue(path="$", message=f"baselines file is not valid JSON: {e}")],
            source=str(path),
        ) from e


def parse_baseline(data: Any, source: str | None = None) -> BaselineDocument:
    """Validate raw baseline data and build the typed document.

    Raises:
        SchemaError: With every issue found, if the document is invalid.
    """
    validation = validate_baseline(data)
    if not validation.is_valid:
        raise SchemaError(validation.issues, source=source)
    try:
        return BaselineDocument.model_validate(data)
    except ValidationError as e:
        raise SchemaError(_issues_from(e), source=source) from e


def load_baseline(path: str | Path) -> BaselineDocument:
    """Read, validate and parse a baseline file.

    Raises:
        SchemaError: If the file is unreadable or fails validation.
    """
    return parse_baseline(read_baseline_data(path), source=str(path))


def dump_baseline(document: BaselineDocument, indent: int | None = 2) -> str:
    """Serialize a baseline document with camelCase keys."""
    return json.dumps(document.model_dump(mode="json", by_alias=True), indent=indent)


def parse_measurement(data: Any) -> MeasurementRecord:
    """Build a measurement record from raw JSON data.

    Raises:
        MalformedInputError: If the data is not a valid measurement record.
    """
    if not isinstance(data, dict):
        raise MalformedInputError("Results file must contain a JSON object")
    try:
        return MeasurementRecord.model_validate(data)
    except ValidationError as e:
        details = "; ".join(str(issue) for issue in _issues_from(e))
        raise MalformedInputError(f"Invalid results file: {details}") from e


def load_measurement(path: str | Path) -> MeasurementRecord:
    """Read a measurement record from a JSON results file.

    Raises:
        MalformedInputError: If the file is missing, not JSON, or invalid.
    """
    path = Path(path)
    if not path.is_file():
        raise MalformedInputError(f"Results file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as e:
        raise MalformedInputError(f"Results file is not valid JSON: {e}") from e
    return parse_measurement(data)


def save_measurement(record: MeasurementRecord, path: str | Path) -> Path:
    """Write a measurement record as camelCase JSON, omitting unset fields."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(record.model_dump(mode="json", by_alias=True, exclude_none=True), f, indent=2)
    return path


__all__ = [
    "dump_baseline",
    "load_baseline",
    "load_measurement",
    "parse_baseline",
    "parse_measurement",
    "read_baseline_data",
    "save_measurement",
]
