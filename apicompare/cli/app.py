from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
import json
import logging
from pathlib import Path
import shlex
import sys
from typing import Any

import typer

from apicompare.compare import (
    DEFAULT_TIMEOUT_SECONDS,
    CompareConfigError,
    CompareError,
    CompareOptions,
    parse_header_options,
    run_comparisons,
)
from apicompare.core.models import Request
from apicompare.inputs import RequestSourceError, load_requests
from apicompare.report import (
    ComparisonResult,
    ReportError,
    read_report,
    render_report_summary,
    resolve_compare_output_paths,
    resolve_report_html_path,
    write_html_report,
    write_report,
)

app = typer.Typer(help="Compare API responses between a reference and a target environment.")

INTERRUPTED_EXIT_CODE = 130
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("apicompare")
    except PackageNotFoundError:
        from apicompare import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


def _configure_logging(log_level: str) -> None:
    level = getattr(logging, log_level.strip().upper(), None)
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level '{log_level}'", param_hint="--log-level")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("apicompare").setLevel(level)


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show apicompare version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="APICOMPARE_LOG_LEVEL",
        help="Diagnostic log level (DEBUG, INFO, WARNING, ERROR).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    _configure_logging(log_level)


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _command_line() -> str:
    return shlex.join(["apicompare", *sys.argv[1:]])


def _render_configuration(options: CompareOptions) -> str:
    lines = [
        "Configuration:",
        f"  Input file:        {options.input_file}",
        f"  Input file type:   {options.input_file_type}",
        f"  Reference URL:     {options.reference_base_url}",
        f"  Target URL:        {options.target_base_url}",
    ]
    if options.reference_headers:
        lines.append(f"  Reference headers: {json.dumps(options.reference_headers)}")
    if options.target_headers:
        lines.append(f"  Target headers:    {json.dumps(options.target_headers)}")
    if options.limit:
        lines.append(f"  Limit:             {options.limit}")
    if options.normalized_json_comparison:
        lines.append("  JSON comparison:   normalized")
    return "\n".join(lines)


def _print_progress(index: int, total: int, request: Request) -> None:
    _echo(f"[{index}/{total}] {request.method} {request.display_url}")


@app.command()
def compare(
    input_file: Path = typer.Option(
        ...,
        "--input-file",
        help="Path to the JSON request file.",
    ),
    input_file_type: str = typer.Option(
        "generic",
        "--input-file-type",
        help="Request file encoding: generic or restfox.",
    ),
    reference_base_url: str | None = typer.Option(
        None,
        "--reference-base-url",
        envvar="APICOMPARE_REFERENCE_BASE_URL",
        help="Base URL for the reference (current) API.",
    ),
    target_base_url: str | None = typer.Option(
        None,
        "--target-base-url",
        envvar="APICOMPARE_TARGET_BASE_URL",
        help="Base URL for the target (next) API.",
    ),
    reference_header: list[str] | None = typer.Option(
        None,
        "--reference-header",
        help="Repeatable 'Name: value' header sent to the reference API.",
    ),
    target_header: list[str] | None = typer.Option(
        None,
        "--target-header",
        help="Repeatable 'Name: value' header sent to the target API.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        help="Compare only the first N requests.",
    ),
    timeout: float = typer.Option(
        DEFAULT_TIMEOUT_SECONDS,
        "--timeout",
        envvar="APICOMPARE_TIMEOUT",
        help="Per-request transport timeout in seconds.",
    ),
    output_file: str | None = typer.Option(
        None,
        "--output-file",
        help="Base name for the JSON and HTML reports.",
    ),
    output_dir: str | None = typer.Option(
        None,
        "--output-dir",
        help="Directory for the generated reports.",
    ),
    no_timestamp_in_report_filenames: bool = typer.Option(
        False,
        "--no-timestamp-in-report-filenames",
        help="Omit the timestamp from generated report filenames.",
    ),
    normalized_json_comparison: bool = typer.Option(
        False,
        "--normalized-json-comparison",
        help="Ignore JSON object key order when comparing bodies.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit a machine-readable run summary.",
    ),
) -> None:
    """Compare API responses and generate JSON + HTML reports."""
    try:
        options = CompareOptions(
            input_file=str(input_file),
            input_file_type=input_file_type,
            reference_base_url=reference_base_url or "",
            target_base_url=target_base_url or "",
            reference_headers=parse_header_options(reference_header),
            target_headers=parse_header_options(target_header),
            limit=limit,
            timeout_seconds=timeout,
            output_file=output_file,
            output_dir=output_dir,
            no_timestamp_in_report_filenames=no_timestamp_in_report_filenames,
            normalized_json_comparison=normalized_json_comparison,
        )
    except CompareConfigError as error:
        _echo(f"compare failed: {error}", err=True)
        raise typer.Exit(code=2) from error

    try:
        requests = load_requests(
            input_file,
            input_file_type=options.input_file_type,
            limit=options.limit,
        )
    except (RequestSourceError, FileNotFoundError) as error:
        _echo(f"compare failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    if not json_output:
        _echo(_render_configuration(options))
        _echo("")
        _echo(f"Processing {len(requests)} requests...")

    completed: list[ComparisonResult] = []
    try:
        report = run_comparisons(
            requests,
            options,
            command_line=_command_line(),
            progress=None if json_output else _print_progress,
            results=completed,
        )
    except CompareError as error:
        _echo(f"compare failed: {error}", err=True)
        raise typer.Exit(code=1) from error
    except KeyboardInterrupt as error:
        _echo(
            f"compare interrupted after {len(completed)} of {len(requests)} requests",
            err=True,
        )
        raise typer.Exit(code=INTERRUPTED_EXIT_CODE) from error

    paths = resolve_compare_output_paths(
        options.input_file,
        timestamp=report.timestamp,
        output_file=options.output_file,
        output_dir=options.output_dir,
        include_timestamp=not options.no_timestamp_in_report_filenames,
    )
    try:
        write_report(report, paths.json_path)
        write_html_report(report, paths.html_path)
    except OSError as error:
        _echo(f"compare failed: could not write reports: {error}", err=True)
        raise typer.Exit(code=1) from error

    if json_output:
        _echo_json(
            {
                "status": "pass" if report.exit_code == 0 else "fail",
                "exit_code": report.exit_code,
                "summary": report.summary(),
                "json_report": str(paths.json_path),
                "html_report": str(paths.html_path),
                "failed_requests": [
                    {
                        "name": result.name,
                        "url": result.url,
                        "differences": [difference.message for difference in result.differences],
                    }
                    for result in report.results
                    if not result.passed
                ],
            }
        )
    else:
        _echo("")
        _echo(f"Report saved to: {paths.json_path}")
        _echo(f"HTML report saved to: {paths.html_path}")
        _echo("")
        _echo(render_report_summary(report))

    if report.exit_code != 0:
        raise typer.Exit(code=report.exit_code)


@app.command()
def report(
    input_file: Path = typer.Option(
        ...,
        "--input-file",
        help="Path to an existing JSON comparison report.",
    ),
    output_file: str | None = typer.Option(
        None,
        "--output-file",
        help="HTML file name (.html is appended when missing).",
    ),
    output_dir: str | None = typer.Option(
        None,
        "--output-dir",
        help="Directory for the HTML report (defaults to the JSON's directory).",
    ),
) -> None:
    """Regenerate the HTML report from an existing JSON comparison report."""
    try:
        loaded = read_report(input_file)
    except (ReportError, FileNotFoundError) as error:
        _echo(f"report failed: {error}", err=True)
        raise typer.Exit(code=1) from error

    html_path = resolve_report_html_path(
        input_file,
        output_file=output_file,
        output_dir=output_dir,
    )
    try:
        write_html_report(loaded, html_path)
    except OSError as error:
        _echo(f"report failed: could not write HTML report: {error}", err=True)
        raise typer.Exit(code=1) from error

    _echo(f"HTML report saved to: {html_path}")


def main() -> None:
    app()
