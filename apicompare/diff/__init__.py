"""Diff subsystem for apicompare."""

from apicompare.diff.aligner import (
    CONTEXT_LINES,
    align_lines,
    calculate_diff_blocks,
    render_body_text,
    window_lines,
)
from apicompare.diff.engine import compare_bodies, compare_responses
from apicompare.diff.models import AlignedLine, DiffBlock, DiffLine, Difference, DifferenceType

__all__ = [
    "CONTEXT_LINES",
    "DiffLine",
    "AlignedLine",
    "DiffBlock",
    "Difference",
    "DifferenceType",
    "render_body_text",
    "align_lines",
    "window_lines",
    "calculate_diff_blocks",
    "compare_bodies",
    "compare_responses",
]
