"""Sequential comparison orchestrator."""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from apicompare.compare.options import CompareOptions
from apicompare.compare.requester import make_request, resolve_request_url
from apicompare.core.models import Request
from apicompare.diff.engine import compare_responses
from apicompare.report.models import ComparisonReport, ComparisonResult, iso_timestamp

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Request], None]


def compare_request(
    request: Request,
    options: CompareOptions,
    *,
    request_fn: Callable[..., Any] | None = None,
) -> ComparisonResult:
    """Call reference then target for one request and diff the responses."""
    reference_url = resolve_request_url(request, options.reference_base_url, "reference")
    target_url = resolve_request_url(request, options.target_base_url, "target")

    # Reference must complete before target starts; both may share a backend.
    reference = make_request(
        request,
        options.reference_base_url,
        side="reference",
        additional_headers=options.reference_headers,
        timeout_seconds=options.timeout_seconds,
        request_fn=request_fn,
    )
    target = make_request(
        request,
        options.target_base_url,
        side="target",
        additional_headers=options.target_headers,
        timeout_seconds=options.timeout_seconds,
        request_fn=request_fn,
    )

    differences = compare_responses(
        reference,
        target,
        normalized=options.normalized_json_comparison,
    )
    return ComparisonResult(
        name=request.display_name,
        method=request.method,
        url=request.display_url,
        reference_url=reference_url,
        target_url=target_url,
        reference_base_url=options.reference_base_url,
        target_base_url=options.target_base_url,
        reference=reference,
        target=target,
        differences=differences,
    )


def run_comparisons(
    requests: Sequence[Request],
    options: CompareOptions,
    *,
    command_line: str,
    request_fn: Callable[..., Any] | None = None,
    progress: ProgressCallback | None = None,
    results: list[ComparisonResult] | None = None,
) -> ComparisonReport:
    """Compare every request in order and build the run report.

    Results are appended to `results` as they complete, so a caller that
    passes its own list keeps whatever finished before an interruption.
    """
    collected = results if results is not None else []
    total = len(requests)

    for index, request in enumerate(requests, start=1):
        if progress is not None:
            progress(index, total, request)
        result = compare_request(request, options, request_fn=request_fn)
        if not result.passed:
            logger.info(
                "%s differs: %s",
                result.name,
                "; ".join(difference.message for difference in result.differences),
            )
        collected.append(result)

    return ComparisonReport(
        timestamp=iso_timestamp(),
        command_line=command_line,
        options=options.to_dict(),
        input_requests=[request.to_dict() for request in requests],
        results=list(collected),
    )
