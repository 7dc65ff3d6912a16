"""Validate inspection reports against the bundled JSON Schema."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from ..config import DEFAULT_SCHEMA_PATH


class ReportValidationError(ValueError):
    """Raised when a report does not conform to the schema."""


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_report(report: dict[str, Any], schema_path: Path = DEFAULT_SCHEMA_PATH) -> None:
    """Raise ReportValidationError listing every schema violation in ``report``."""
    schema = _load_json(schema_path)
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(report), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ReportValidationError("\n" + _format_errors(errors))
