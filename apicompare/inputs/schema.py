"""JSON schemas for supported request file encodings."""

from __future__ import annotations

from typing import Any, Literal

from jsonschema import Draft202012Validator

from apicompare.inputs.exceptions import RequestSourceFormatError

InputFileType = Literal["generic", "restfox"]
INPUT_FILE_TYPES: tuple[str, ...] = ("generic", "restfox")

_STRING_MAP = {"type": "object", "additionalProperties": {"type": "string"}}

GENERIC_REQUESTS_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Generic request list",
    "type": "array",
    "items": {
        "type": "object",
        "additionalProperties": True,
        "anyOf": [
            {"required": ["url"]},
            {"required": ["referenceUrl"]},
            {"required": ["targetUrl"]},
        ],
        "properties": {
            "url": {"type": "string"},
            "referenceUrl": {"type": "string"},
            "targetUrl": {"type": "string"},
            "method": {"type": "string"},
            "body": {"type": ["string", "object", "array", "null"]},
            "headers": _STRING_MAP,
            "name": {"type": "string"},
        },
    },
}

RESTFOX_EXPORT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "Restfox export",
    "type": "object",
    "required": ["collection"],
    "additionalProperties": True,
    "properties": {
        "exportedFrom": {"type": "string"},
        "collection": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["_type"],
                "additionalProperties": True,
                "if": {"properties": {"_type": {"const": "request"}}},
                "then": {
                    "required": ["url"],
                    "properties": {
                        "name": {"type": "string"},
                        "method": {"type": "string"},
                        "url": {"type": "string"},
                        "body": {
                            "type": "object",
                            "properties": {
                                "mimeType": {"type": "string"},
                                "text": {"type": "string"},
                            },
                        },
                        "headers": {
                            "type": "array",
                            "items": {
                                "type": "object",
                                "required": ["name"],
                                "properties": {
                                    "name": {"type": "string"},
                                    "value": {"type": "string"},
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}

_SCHEMAS: dict[str, dict[str, Any]] = {
    "generic": GENERIC_REQUESTS_SCHEMA,
    "restfox": RESTFOX_EXPORT_SCHEMA,
}


def validate_request_document(document: Any, input_file_type: str) -> None:
    """Validate a decoded request file against the schema for its encoding."""
    schema = _SCHEMAS.get(input_file_type)
    if schema is None:
        raise RequestSourceFormatError(
            f"Unsupported input file type: {input_file_type}. "
            f"Expected one of: {', '.join(INPUT_FILE_TYPES)}"
        )

    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "$"
        raise RequestSourceFormatError(
            f"Invalid {input_file_type} request file at {location}: {first.message}"
        )
