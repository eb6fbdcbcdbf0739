"""CLI-friendly rendering for comparison reports."""

from __future__ import annotations

from apicompare.report.models import ComparisonReport

_RULE = "=" * 80


def render_report_summary(report: ComparisonReport) -> str:
    lines = [
        _RULE,
        "COMPARISON SUMMARY",
        _RULE,
        f"Total requests:   {report.total}",
        f"Passed:           {report.passed}",
        f"Failed:           {report.failed}",
        _RULE,
    ]

    failed = [result for result in report.results if not result.passed]
    if failed:
        lines.append("")
        lines.append("Failed requests:")
        for result in failed:
            lines.append("")
            lines.append(f"  x {result.name}")
            lines.append(f"    URL: {result.url}")
            for difference in result.differences:
                lines.append(f"    - {difference.message}")

    return "\n".join(lines)
