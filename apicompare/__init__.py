"""Compare API responses between a reference and a target environment."""

from __future__ import annotations

from apicompare.compare import CompareOptions, compare_request, run_comparisons
from apicompare.core.models import Request, ResponseBody, ResponseRecord
from apicompare.diff import (
    AlignedLine,
    DiffBlock,
    DiffLine,
    Difference,
    calculate_diff_blocks,
    compare_responses,
)
from apicompare.inputs import load_requests
from apicompare.report import ComparisonReport, ComparisonResult, read_report, write_report

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Request",
    "ResponseBody",
    "ResponseRecord",
    "DiffLine",
    "AlignedLine",
    "DiffBlock",
    "Difference",
    "ComparisonResult",
    "ComparisonReport",
    "CompareOptions",
    "calculate_diff_blocks",
    "compare_responses",
    "compare_request",
    "run_comparisons",
    "load_requests",
    "read_report",
    "write_report",
]
