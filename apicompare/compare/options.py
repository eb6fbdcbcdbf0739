"""Resolved options for a comparison run."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from apicompare.compare.exceptions import CompareConfigError
from apicompare.inputs.schema import INPUT_FILE_TYPES

DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(slots=True)
class CompareOptions:
    """Configuration for one `compare` run, stored verbatim in the report."""

    input_file: str
    reference_base_url: str
    target_base_url: str
    input_file_type: str = "generic"
    reference_headers: dict[str, str] = field(default_factory=dict)
    target_headers: dict[str, str] = field(default_factory=dict)
    limit: int | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    output_file: str | None = None
    output_dir: str | None = None
    no_timestamp_in_report_filenames: bool = False
    normalized_json_comparison: bool = False

    def __post_init__(self) -> None:
        self.input_file_type = (self.input_file_type or "").strip().lower()
        if self.input_file_type not in INPUT_FILE_TYPES:
            raise CompareConfigError(
                f"Invalid input file type '{self.input_file_type}'. "
                f"Must be one of: {', '.join(INPUT_FILE_TYPES)}"
            )
        if not self.reference_base_url:
            raise CompareConfigError("reference base URL is required for 'compare'")
        if not self.target_base_url:
            raise CompareConfigError("target base URL is required for 'compare'")
        if self.limit is not None and self.limit <= 0:
            raise CompareConfigError("limit must be a positive integer")
        if self.timeout_seconds <= 0:
            raise CompareConfigError("timeout must be greater than zero")

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": "compare",
            "input_file": self.input_file,
            "input_file_type": self.input_file_type,
            "reference_base_url": self.reference_base_url,
            "target_base_url": self.target_base_url,
            "reference_headers": dict(self.reference_headers),
            "target_headers": dict(self.target_headers),
            "limit": self.limit,
            "timeout_seconds": self.timeout_seconds,
            "output_file": self.output_file,
            "output_dir": self.output_dir,
            "no_timestamp_in_report_filenames": self.no_timestamp_in_report_filenames,
            "normalized_json_comparison": self.normalized_json_comparison,
        }


def parse_header_option(raw: str) -> tuple[str, str]:
    """Parse a `Name: value` header string."""
    name, separator, value = raw.partition(":")
    name = name.strip()
    if not separator or not name:
        raise CompareConfigError(f"Invalid header '{raw}'. Expected format 'Name: value'.")
    if any(char.isspace() for char in name):
        raise CompareConfigError(f"Invalid header name in '{raw}': whitespace is not allowed.")
    return name, value.strip()


def parse_header_options(values: Iterable[str] | None) -> dict[str, str]:
    headers: dict[str, str] = {}
    for raw in values or ():
        name, value = parse_header_option(raw)
        headers[name] = value
    return headers
