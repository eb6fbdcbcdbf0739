"""Static HTML rendering for comparison reports."""

from __future__ import annotations

from html import escape
import json
import logging
from pathlib import Path
from typing import Any, Literal

from apicompare.core.models import ResponseRecord
from apicompare.report.models import ComparisonReport, ComparisonResult

logger = logging.getLogger(__name__)

ResultStatus = Literal["passed", "passed-with-errors", "failed"]


def result_status(result: ComparisonResult) -> ResultStatus:
    if not result.passed:
        return "failed"
    if result.has_errors:
        return "passed-with-errors"
    return "passed"


def build_report_view(report: ComparisonReport) -> dict[str, Any]:
    """Flatten a report into plain data the HTML renderer consumes."""
    results = [_result_view(index, result) for index, result in enumerate(report.results)]
    return {
        "title": "API Comparison Report",
        "timestamp": report.timestamp,
        "command_line": report.command_line,
        "options": [
            {"name": key, "value": _option_text(value)}
            for key, value in report.options.items()
        ],
        "summary": {
            **report.summary(),
            "passed_with_errors": sum(
                1 for item in results if item["status"] == "passed-with-errors"
            ),
        },
        "results": results,
    }


def _result_view(index: int, result: ComparisonResult) -> dict[str, Any]:
    return {
        "index": index,
        "name": result.name,
        "method": result.method,
        "url": result.url,
        "reference_url": result.reference_url,
        "target_url": result.target_url,
        "status": result_status(result),
        "sides": [
            _side_view("Reference", result.reference_base_url, result.reference),
            _side_view("Target", result.target_base_url, result.target),
        ],
        "differences": [
            {
                "type": difference.type,
                "message": difference.message,
                "expected": _option_text(difference.expected),
                "actual": _option_text(difference.actual),
                "blocks": [
                    {
                        "skipped": block.skipped,
                        "rows": [line.to_dict() for line in block.lines],
                    }
                    for block in difference.diff_blocks
                ],
            }
            for difference in result.differences
        ],
    }


def _side_view(label: str, base_url: str, record: ResponseRecord) -> dict[str, Any]:
    return {
        "label": label,
        "base_url": base_url,
        "status_code": record.status_code,
        "status_text": record.status_text,
        "duration_ms": round(record.duration_ms, 1),
        "error": record.error,
    }


def _option_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def render_html_report(report: ComparisonReport) -> str:
    return render_report_view(build_report_view(report))


def render_report_view(view: dict[str, Any]) -> str:
    summary = view["summary"]
    parts: list[str] = [
        "<!doctype html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="utf-8" />',
        '  <meta name="viewport" content="width=device-width, initial-scale=1" />',
        f"  <title>{escape(view['title'])}</title>",
        f"  <style>{_STYLES}</style>",
        "</head>",
        "<body>",
        "<header>",
        f"  <h1>{escape(view['title'])}</h1>",
        f'  <div class="sub">Generated {escape(view["timestamp"])}</div>',
        f'  <pre class="command">{escape(view["command_line"])}</pre>',
        "</header>",
        "<main>",
        '  <section class="config">',
        '    <h2 onclick="toggleSection(\'options\')"><span id="options-toggle">&#9654;</span> Options</h2>',
        '    <table id="options-section" class="options collapsed">',
    ]
    for option in view["options"]:
        parts.append(
            f"      <tr><th>{escape(option['name'])}</th><td>{escape(option['value'])}</td></tr>"
        )
    parts.extend(
        [
            "    </table>",
            "  </section>",
            '  <section class="summary">',
            f'    <div class="count">Total <strong>{summary["total"]}</strong></div>',
            f'    <div class="count passed">Passed <strong>{summary["passed"]}</strong></div>',
            f'    <div class="count warn">Passed with errors <strong>{summary["passed_with_errors"]}</strong></div>',
            f'    <div class="count failed">Failed <strong>{summary["failed"]}</strong></div>',
            "  </section>",
            '  <nav class="filters">',
        ]
    )
    for key, label in (
        ("all", "All"),
        ("passed", "Passed"),
        ("passed-with-errors", "Passed with errors"),
        ("failed", "Failed"),
    ):
        active = " active" if key == "all" else ""
        parts.append(
            f'    <button class="filter-tab{active}" data-filter="{key}" '
            f"onclick=\"filterResults('{key}')\">{label}</button>"
        )
    parts.append("  </nav>")
    parts.append('  <ul class="results">')
    for result in view["results"]:
        parts.extend(_render_result(result))
    parts.extend(["  </ul>", "</main>", f"<script>{_SCRIPT}</script>", "</body>", "</html>"])
    return "\n".join(parts) + "\n"


def _render_result(result: dict[str, Any]) -> list[str]:
    index = result["index"]
    lines = [
        f'    <li id="result-{index}" class="result-item {result["status"]}">',
        f'      <div class="result-head" onclick="toggleResult({index})">',
        f'        <span class="badge {result["status"]}">{escape(result["status"])}</span>',
        f'        <span class="method">{escape(result["method"])}</span>',
        f'        <span class="name">{escape(result["name"])}</span>',
        "      </div>",
        '      <div class="result-body">',
        '        <div class="sides">',
    ]
    for side, url in zip(result["sides"], (result["reference_url"], result["target_url"])):
        lines.append('          <div class="side">')
        lines.append(f"            <h3>{escape(side['label'])}</h3>")
        lines.append(f'            <div class="url">{escape(url)}</div>')
        lines.append(
            f"            <div>{side['status_code']} {escape(side['status_text'])} "
            f"&middot; {side['duration_ms']} ms</div>"
        )
        if side["error"]:
            lines.append(f'            <div class="error">{escape(side["error"])}</div>')
        lines.append("          </div>")
    lines.append("        </div>")

    for difference in result["differences"]:
        lines.append(f'        <div class="difference {difference["type"]}">')
        lines.append(f'          <p class="message">{escape(difference["message"])}</p>')
        if difference["blocks"]:
            lines.extend(_render_diff_table(difference["blocks"]))
        else:
            lines.append(
                '          <div class="values">'
                f'<span class="removed">Expected: {escape(difference["expected"])}</span> '
                f'<span class="added">Actual: {escape(difference["actual"])}</span>'
                "</div>"
            )
        lines.append("        </div>")
    lines.extend(["      </div>", "    </li>"])
    return lines


def _render_diff_table(blocks: list[dict[str, Any]]) -> list[str]:
    lines = ['          <table class="diff">']
    for block in blocks:
        if block["skipped"]:
            lines.append('            <tr class="skipped"><td colspan="4">&#8942;</td></tr>')
            continue
        for row in block["rows"]:
            lines.append(f"            <tr>{_render_cell(row['left'])}{_render_cell(row['right'])}</tr>")
    lines.append("          </table>")
    return lines


def _render_cell(line: dict[str, Any] | None) -> str:
    if line is None:
        return '<td class="num empty"></td><td class="code empty"></td>'
    kind = escape(line["kind"])
    return (
        f'<td class="num {kind}">{line["line_number"]}</td>'
        f'<td class="code {kind}">{escape(line["text"])}</td>'
    )


def write_html_report(report: ComparisonReport, path: str | Path) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_html_report(report), encoding="utf-8")
    logger.debug("wrote HTML report: %s", target)
    return target


_STYLES = """
    :root {
      --bg: #f7f4ed;
      --panel: #fffdfa;
      --ink: #1f2933;
      --accent: #0f766e;
      --passed: #047857;
      --warn: #b45309;
      --failed: #b91c1c;
      --muted: #6b7280;
      --border: #d6d3d1;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      font-family: "Avenir Next", "Trebuchet MS", "Segoe UI", sans-serif;
      color: var(--ink);
      background: var(--bg);
    }
    header, main { padding: 16px 24px; }
    header { border-bottom: 1px solid var(--border); background: var(--panel); }
    h1 { margin: 0; font-size: 1.5rem; }
    .sub { margin-top: 6px; color: var(--muted); }
    pre.command { white-space: pre-wrap; background: #f1efe9; padding: 8px; border-radius: 6px; }
    .config h2 { cursor: pointer; font-size: 1rem; }
    .options.collapsed { display: none; }
    .options th { text-align: left; padding-right: 16px; color: var(--muted); }
    .summary { display: flex; gap: 16px; margin: 12px 0; }
    .count { padding: 8px 14px; border: 1px solid var(--border); border-radius: 8px; background: var(--panel); }
    .count.passed strong { color: var(--passed); }
    .count.warn strong { color: var(--warn); }
    .count.failed strong { color: var(--failed); }
    .filter-tab { border: 1px solid var(--border); background: var(--panel); padding: 6px 12px; border-radius: 6px; cursor: pointer; }
    .filter-tab.active { background: var(--accent); color: #fff; }
    .results { list-style: none; padding: 0; }
    .result-item { border: 1px solid var(--border); border-radius: 8px; margin: 8px 0; background: var(--panel); }
    .result-head { padding: 10px 14px; cursor: pointer; display: flex; gap: 10px; align-items: center; }
    .result-body { display: none; padding: 0 14px 14px; }
    .result-item.expanded .result-body { display: block; }
    .badge { font-size: 0.75rem; padding: 2px 8px; border-radius: 999px; color: #fff; }
    .badge.passed { background: var(--passed); }
    .badge.passed-with-errors { background: var(--warn); }
    .badge.failed { background: var(--failed); }
    .method { font-weight: 700; }
    .sides { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
    .url { font-family: monospace; word-break: break-all; color: var(--muted); }
    .error { color: var(--failed); }
    table.diff { width: 100%; border-collapse: collapse; font-family: monospace; font-size: 0.85rem; }
    table.diff td { padding: 1px 6px; vertical-align: top; white-space: pre-wrap; }
    td.num { width: 3em; text-align: right; color: var(--muted); }
    td.removed { background: #fde2e2; }
    td.added { background: #dcfce7; }
    td.empty { background: #f1efe9; }
    tr.skipped td { text-align: center; color: var(--muted); background: #f1efe9; }
    .values span { display: inline-block; font-family: monospace; padding: 2px 8px; border-radius: 4px; }
    .values .removed { background: #fde2e2; }
    .values .added { background: #dcfce7; }
"""

_SCRIPT = """
function toggleResult(index) {
  const selection = window.getSelection();
  if (selection && selection.toString().length > 0) {
    return;
  }
  document.getElementById('result-' + index).classList.toggle('expanded');
}

function toggleSection(section) {
  const content = document.getElementById(section + '-section');
  const toggle = document.getElementById(section + '-toggle');
  content.classList.toggle('collapsed');
  toggle.innerHTML = content.classList.contains('collapsed') ? '&#9654;' : '&#9660;';
}

function filterResults(filter) {
  document.querySelectorAll('.filter-tab').forEach(tab => {
    tab.classList.toggle('active', tab.dataset.filter === filter);
  });
  document.querySelectorAll('.result-item').forEach(item => {
    const visible = filter === 'all' || item.classList.contains(filter);
    item.style.display = visible ? 'block' : 'none';
  });
}
"""
