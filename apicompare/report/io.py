"""JSON persistence for comparison reports."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

from apicompare.report.exceptions import ReportValidationError
from apicompare.report.models import ComparisonReport

logger = logging.getLogger(__name__)

_RESPONSE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["status_code", "status_text", "body_kind", "body", "duration_ms", "error"],
    "properties": {
        "status_code": {"type": "integer"},
        "status_text": {"type": "string"},
        "body_kind": {"enum": ["structured", "textual"]},
        "duration_ms": {"type": "number"},
        "error": {"type": ["string", "null"]},
    },
}

_DIFF_LINE_SCHEMA: dict[str, Any] = {
    "type": ["object", "null"],
    "required": ["kind", "text", "line_number"],
    "properties": {
        "kind": {"enum": ["added", "removed", "unchanged"]},
        "text": {"type": "string"},
        "line_number": {"type": "integer", "minimum": 1},
    },
}

REPORT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "apicompare comparison report",
    "type": "object",
    "required": ["timestamp", "command_line", "options", "summary", "results"],
    "additionalProperties": True,
    "properties": {
        "version": {"type": "string", "pattern": r"^\d+\.\d+$"},
        "timestamp": {"type": "string"},
        "command_line": {"type": "string"},
        "options": {"type": "object"},
        "input_requests": {"type": "array", "items": {"type": "object"}},
        "summary": {
            "type": "object",
            "required": ["total", "passed", "failed"],
            "properties": {
                "total": {"type": "integer", "minimum": 0},
                "passed": {"type": "integer", "minimum": 0},
                "failed": {"type": "integer", "minimum": 0},
            },
        },
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "required": [
                    "name",
                    "method",
                    "url",
                    "reference_url",
                    "target_url",
                    "reference_base_url",
                    "target_base_url",
                    "reference",
                    "target",
                    "differences",
                ],
                "properties": {
                    "reference": _RESPONSE_SCHEMA,
                    "target": _RESPONSE_SCHEMA,
                    "differences": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["type", "message"],
                            "properties": {
                                "type": {"enum": ["status_code", "body"]},
                                "message": {"type": "string"},
                                "diff_blocks": {
                                    "type": "array",
                                    "items": {
                                        "type": "object",
                                        "required": ["lines", "skipped"],
                                        "properties": {
                                            "skipped": {"type": "boolean"},
                                            "lines": {
                                                "type": "array",
                                                "items": {
                                                    "type": "object",
                                                    "required": ["left", "right"],
                                                    "properties": {
                                                        "left": _DIFF_LINE_SCHEMA,
                                                        "right": _DIFF_LINE_SCHEMA,
                                                    },
                                                },
                                            },
                                        },
                                    },
                                },
                            },
                        },
                    },
                },
            },
        },
    },
}


def validate_report(document: Any) -> None:
    validator = Draft202012Validator(REPORT_SCHEMA)
    errors = sorted(validator.iter_errors(document), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "$"
        raise ReportValidationError(f"Invalid report at {location}: {first.message}")


def dump_report(report: ComparisonReport) -> str:
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False) + "\n"


def write_report(report: ComparisonReport, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dump_report(report), encoding="utf-8")
    logger.debug("wrote JSON report: %s", target)
    return target


def read_report(path: str | Path) -> ComparisonReport:
    """Rehydrate a report written by `write_report`."""
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise ReportValidationError(f"Report is not valid UTF-8 text: {target}") from error

    try:
        document = json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise ReportValidationError(f"Report is not valid JSON: {target} ({error})") from error

    validate_report(document)
    try:
        return ComparisonReport.from_dict(document)
    except (KeyError, TypeError, ValueError) as error:
        raise ReportValidationError(f"Report could not be loaded: {target} ({error})") from error
