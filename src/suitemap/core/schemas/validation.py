"""Shared schema validation utilities.

suitemap validates configuration payloads using JSON Schema. Schemas are
stored as YAML files under ``suitemap.data/schemas/`` and loaded in a single,
consistent way across the codebase.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

import jsonschema
from jsonschema import Draft202012Validator

from suitemap.core.utils.io import read_yaml
from suitemap.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""

    def __init__(self, message: str, errors: List[str] | None = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])


def _normalize_schema_name(schema_name: str) -> str:
    lowered = schema_name.lower()
    if lowered.endswith(".json"):
        raise ValueError(
            f"JSON schemas are not supported: {schema_name}. "
            "Use YAML schemas (e.g., *.schema.yaml)."
        )
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"
    return schema_name


@lru_cache(maxsize=8)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema dict.

    Automatically appends ``.yaml`` if no extension is present.

    Args:
        schema_name: Schema file name under the bundled schemas directory
            (e.g., "suite-config.schema").

    Raises:
        FileNotFoundError: If the schema file doesn't exist.
        ValueError: If the schema is not a YAML mapping.
    """
    schema_name = _normalize_schema_name(schema_name)
    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name} (searched {schema_path.parent})")

    schema = read_yaml(schema_path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def _format_error(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(p) for p in error.absolute_path)
    return f"{location}: {error.message}" if location else error.message


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate a payload against a bundled schema.

    Raises:
        SchemaValidationError: If validation fails; ``errors`` lists every
            violation, not only the first.
        FileNotFoundError: If the schema doesn't exist.
    """
    errors = validate_payload_safe(payload, schema_name)
    if errors:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': " + "; ".join(errors),
            errors,
        )


def validate_payload_safe(payload: Any, schema_name: str) -> List[str]:
    """Validate a payload and return a list of error messages (empty if valid)."""
    schema = load_schema(schema_name)
    validator = Draft202012Validator(schema)
    return [
        _format_error(err)
        for err in sorted(validator.iter_errors(payload), key=lambda e: [str(p) for p in e.absolute_path])
    ]


__all__ = [
    "SchemaValidationError",
    "load_schema",
    "validate_payload",
    "validate_payload_safe",
]
