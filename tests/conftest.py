from __future__ import annotations

import json
from typing import Any, Callable

import pytest
from requests.structures import CaseInsensitiveDict

from apicompare.core.models import ResponseBody, ResponseRecord
from apicompare.diff import compare_responses
from apicompare.report import ComparisonReport, ComparisonResult


class FakeResponse:
    """Minimal stand-in for `requests.Response`."""

    def __init__(
        self,
        status_code: int = 200,
        body: Any = None,
        *,
        text: str | None = None,
        content_type: str = "application/json",
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.headers = CaseInsensitiveDict({"Content-Type": content_type})
        self.text = text if text is not None else json.dumps(body)


class RecordingTransport:
    """Callable matching `requests.request` that serves canned responses by URL."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.calls: list[dict[str, Any]] = []

    def __call__(self, method: str, url: str, **kwargs: Any) -> Any:
        self.calls.append({"method": method, "url": url, **kwargs})
        route = self.routes[url]
        if isinstance(route, BaseException):
            raise route
        if callable(route):
            return route()
        return route


@pytest.fixture()
def fake_response() -> Callable[..., FakeResponse]:
    return FakeResponse


@pytest.fixture()
def transport_factory() -> Callable[[dict[str, Any]], RecordingTransport]:
    return RecordingTransport


def make_record(
    body: ResponseBody,
    *,
    status_code: int = 200,
    error: str | None = None,
) -> ResponseRecord:
    return ResponseRecord(
        status_code=status_code,
        status_text="OK" if status_code == 200 else "Error",
        body=body,
        duration_ms=12.5,
        error=error,
    )


def make_result(name: str, reference: ResponseRecord, target: ResponseRecord) -> ComparisonResult:
    return ComparisonResult(
        name=name,
        method="GET",
        url="{{baseUrl}}/" + name,
        reference_url=f"http://ref/{name}",
        target_url=f"http://target/{name}",
        reference_base_url="http://ref",
        target_base_url="http://target",
        reference=reference,
        target=target,
        differences=compare_responses(reference, target),
    )


@pytest.fixture()
def sample_report() -> ComparisonReport:
    """Four results: passed, failed, passed with transport errors, failed text."""
    passing = make_result(
        "same",
        make_record(ResponseBody.structured({"id": 1})),
        make_record(ResponseBody.structured({"id": 1})),
    )
    failing = make_result(
        "changed",
        make_record(ResponseBody.structured({"name": "<b>old</b>", "items": [1, 2]})),
        make_record(
            ResponseBody.structured({"name": "new & shiny", "items": [1, 2]}),
            status_code=500,
        ),
    )
    errored = make_result(
        "down",
        make_record(ResponseBody.empty(), status_code=0, error="connection refused"),
        make_record(ResponseBody.empty(), status_code=0, error="connection refused"),
    )
    textual = make_result(
        "text",
        make_record(ResponseBody.textual("plain")),
        make_record(ResponseBody.textual(None)),
    )
    return ComparisonReport(
        timestamp="2026-01-01T10:30:45.123Z",
        command_line="apicompare compare --input-file requests.json",
        options={"action": "compare", "input_file": "requests.json", "limit": None},
        input_requests=[{"method": "GET", "url": "{{baseUrl}}/same"}],
        results=[passing, failing, errored, textual],
    )


@pytest.fixture()
def record_factory() -> Callable[..., ResponseRecord]:
    return make_record


@pytest.fixture()
def result_factory() -> Callable[..., ComparisonResult]:
    return make_result
