from pathlib import Path

from apicompare.core.models import ResponseBody
from apicompare.report import (
    build_report_view,
    render_html_report,
    render_report_summary,
    result_status,
    write_html_report,
)


def test_result_status_distinguishes_transport_errors(sample_report) -> None:
    assert [result_status(result) for result in sample_report.results] == [
        "passed",
        "failed",
        "passed-with-errors",
        "failed",
    ]


def test_view_model_summarizes_run(sample_report) -> None:
    view = build_report_view(sample_report)

    assert view["title"] == "API Comparison Report"
    assert view["summary"] == {"total": 4, "passed": 2, "failed": 2, "passed_with_errors": 1}
    assert {"name": "limit", "value": "null"} in view["options"]
    changed = view["results"][1]
    assert [side["label"] for side in changed["sides"]] == ["Reference", "Target"]
    assert changed["sides"][1]["status_code"] == 500
    assert changed["differences"][1]["blocks"][0]["rows"]


def test_html_escapes_body_text_and_lists_every_result(sample_report) -> None:
    html = render_html_report(sample_report)

    assert html.startswith("<!doctype html>")
    assert html.count('class="result-item ') == 4
    assert "&lt;b&gt;old&lt;/b&gt;" in html
    assert "new &amp; shiny" in html
    assert "<b>old</b>" not in html
    assert 'data-filter="passed-with-errors"' in html
    assert "connection refused" in html


def test_long_diffs_render_skipped_markers(sample_report, record_factory, result_factory) -> None:
    left = {f"key{index:02d}": index for index in range(40)}
    right = dict(left, key02=-1, key37=-1)
    sample_report.results.append(
        result_factory(
            "long",
            record_factory(ResponseBody.structured(left)),
            record_factory(ResponseBody.structured(right)),
        )
    )

    html = render_html_report(sample_report)

    assert html.count('<tr class="skipped">') == 1


def test_write_html_report_creates_parent_directories(tmp_path: Path, sample_report) -> None:
    path = write_html_report(sample_report, tmp_path / "site" / "report.html")

    assert path.read_text(encoding="utf-8") == render_html_report(sample_report)


def test_console_summary_lists_failed_requests(sample_report) -> None:
    summary = render_report_summary(sample_report)

    assert "COMPARISON SUMMARY" in summary
    assert "Total requests:   4" in summary
    assert "Failed:           2" in summary
    assert "  x changed" in summary
    assert "    URL: {{baseUrl}}/changed" in summary
    assert "    - Status code mismatch: expected 200, got 500" in summary
    assert "  x same" not in summary


def test_status_differences_show_expected_and_actual(sample_report) -> None:
    html = render_html_report(sample_report)

    assert '<span class="removed">Expected: 200</span>' in html
    assert '<span class="added">Actual: 500</span>' in html
    assert html.count('<div class="values">') == 1
