"""Schema check shared by generated and hand-written requirement documents."""

from pathlib import Path
from typing import Any, Iterable

from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError, best_match

from reqgen.requirements.errors import SchemaValidationFailed

_NAMED_OBJECT = {
    "type": "object",
    "required": ["name"],
    "properties": {"name": {"type": "string", "minLength": 1}},
    "additionalProperties": False,
}

REQUIREMENTS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "RequirementDocument",
    "type": "object",
    "required": ["requirements"],
    "properties": {
        "requirements": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["name", "checks"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "labels": {"type": "array", "items": {"type": "string"}},
                    "description": {"type": "string"},
                    "links": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "url"],
                            "properties": {
                                "name": {"type": "string"},
                                "url": {"type": "string"},
                            },
                            "additionalProperties": False,
                        },
                    },
                    "checks": {"type": "array", "items": _NAMED_OBJECT},
                },
                "additionalProperties": False,
            },
        }
    },
}

_VALIDATOR = Draft202012Validator(REQUIREMENTS_SCHEMA)


def format_error_path(path: Iterable[Any]) -> str:
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else str(part)
    return rendered or "<document>"


def describe_error(error: ValidationError) -> str:
    return f"{format_error_path(error.absolute_path)}: {error.message}"


def find_schema_error(value: Any) -> str | None:
    """Return a diagnostic for the most relevant violation, or ``None`` when valid."""
    error = best_match(_VALIDATOR.iter_errors(value))
    if error is None:
        return None
    return describe_error(error)


def validate_requirements(value: Any, source: str | Path | None = None) -> None:
    detail = find_schema_error(value)
    if detail is not None:
        raise SchemaValidationFailed(detail, source=source)
