"""Report persistence and rendering for apicompare."""

from apicompare.report.exceptions import ReportError, ReportValidationError
from apicompare.report.formatting import render_report_summary
from apicompare.report.html import (
    build_report_view,
    render_html_report,
    render_report_view,
    result_status,
    write_html_report,
)
from apicompare.report.io import REPORT_SCHEMA, dump_report, read_report, validate_report, write_report
from apicompare.report.models import (
    REPORT_FORMAT_VERSION,
    ComparisonReport,
    ComparisonResult,
    iso_timestamp,
)
from apicompare.report.paths import (
    ReportPaths,
    filename_timestamp,
    resolve_compare_output_paths,
    resolve_report_html_path,
)

__all__ = [
    "ReportError",
    "ReportValidationError",
    "REPORT_FORMAT_VERSION",
    "REPORT_SCHEMA",
    "ComparisonResult",
    "ComparisonReport",
    "iso_timestamp",
    "dump_report",
    "write_report",
    "read_report",
    "validate_report",
    "result_status",
    "build_report_view",
    "render_report_view",
    "render_html_report",
    "write_html_report",
    "render_report_summary",
    "ReportPaths",
    "filename_timestamp",
    "resolve_compare_output_paths",
    "resolve_report_html_path",
]
