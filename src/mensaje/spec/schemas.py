"""Bundled JSON Schemas for action metadata and execution responses."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import FormatChecker

SCHEMA_ROOT = Path(__file__).resolve().parent / "v1"

METADATA_SCHEMA = "action.metadata.schema.json"
EXECUTION_RESPONSE_SCHEMA = "execution.response.schema.json"


class SchemaValidationError(ValueError):
    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


@lru_cache(maxsize=8)
def _validator(schema_filename: str) -> jsonschema.Validator:
    with (SCHEMA_ROOT / schema_filename).open("r", encoding="utf-8") as f:
        schema = json.load(f)
    validator_cls = jsonschema.validators.validator_for(schema)
    validator_cls.check_schema(schema)
    # "uri" is only checked when jsonschema[format-nongpl] is installed
    return validator_cls(schema, format_checker=FormatChecker())


def schema_errors(instance: dict[str, Any], schema_filename: str) -> list[str]:
    """Return ``location: message`` strings for every violation, in path order."""
    found = _validator(schema_filename).iter_errors(instance)
    errors = []
    for error in sorted(found, key=lambda e: [str(p) for p in e.path]):
        location = "/".join(str(part) for part in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")
    return errors


def validate_instance(instance: dict[str, Any], schema_filename: str) -> None:
    errors = schema_errors(instance, schema_filename)
    if errors:
        raise SchemaValidationError(
            f"Schema validation failed for {schema_filename}.",
            errors=errors,
        )
