"""Output file naming for JSON and HTML reports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import re

REPORT_FILE_PREFIX = "comparison-report"

_OUTPUT_SUFFIX_RE = re.compile(r"\.(json|html)$")


@dataclass(frozen=True, slots=True)
class ReportPaths:
    json_path: Path
    html_path: Path


def filename_timestamp(timestamp: str) -> str:
    """Make an ISO timestamp safe for filenames (`:` and `.` become `-`)."""
    return timestamp.replace(":", "-").replace(".", "-")


def resolve_compare_output_paths(
    input_file: str | Path,
    *,
    timestamp: str,
    output_file: str | None = None,
    output_dir: str | None = None,
    include_timestamp: bool = True,
) -> ReportPaths:
    if output_file:
        base_name = _OUTPUT_SUFFIX_RE.sub("", output_file)
        directory = Path(output_dir or ".")
    else:
        base_name = f"{REPORT_FILE_PREFIX}-{Path(input_file).stem or 'report'}"
        if include_timestamp:
            base_name = f"{base_name}-{filename_timestamp(timestamp)}"
        directory = Path(output_dir) if output_dir else Path(".")

    return ReportPaths(
        json_path=directory / f"{base_name}.json",
        html_path=directory / f"{base_name}.html",
    )


def resolve_report_html_path(
    input_file: str | Path,
    *,
    output_file: str | None = None,
    output_dir: str | None = None,
) -> Path:
    """HTML path for the `report` action; defaults to the JSON's name and folder."""
    if output_file:
        file_name = output_file if output_file.endswith(".html") else f"{output_file}.html"
        return Path(output_dir or ".") / file_name

    source = Path(input_file)
    directory = Path(output_dir) if output_dir else source.parent
    base_name = source.name[: -len(".json")] if source.name.endswith(".json") else source.name
    return directory / f"{base_name}.html"
