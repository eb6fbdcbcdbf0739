import pytest
import requests

from apicompare.compare import (
    CompareOptions,
    MissingRequestURLError,
    compare_request,
    run_comparisons,
)
from apicompare.core.models import Request

REF = "http://ref.local"
TARGET = "http://target.local"


def _options(**overrides) -> CompareOptions:
    values = {
        "input_file": "requests.json",
        "reference_base_url": REF,
        "target_base_url": TARGET,
    }
    values.update(overrides)
    return CompareOptions(**values)


def test_reference_is_called_before_target(fake_response, transport_factory) -> None:
    transport = transport_factory(
        {
            f"{REF}/users": fake_response(200, [{"id": 1}]),
            f"{TARGET}/users": fake_response(200, [{"id": 1}]),
        }
    )

    result = compare_request(
        Request(url="{{baseUrl}}/users", name="users"),
        _options(reference_headers={"X-Side": "ref"}, target_headers={"X-Side": "next"}),
        request_fn=transport,
    )

    assert [call["url"] for call in transport.calls] == [f"{REF}/users", f"{TARGET}/users"]
    assert [call["headers"]["X-Side"] for call in transport.calls] == ["ref", "next"]
    assert result.passed
    assert result.name == "users"
    assert result.url == "{{baseUrl}}/users"
    assert result.reference_url == f"{REF}/users"
    assert result.target_url == f"{TARGET}/users"


def test_run_summarizes_passes_and_failures(fake_response, transport_factory) -> None:
    transport = transport_factory(
        {
            f"{REF}/same": fake_response(200, {"a": 1, "b": 2}),
            f"{TARGET}/same": fake_response(200, {"b": 2, "a": 1}),
            f"{REF}/gone": fake_response(200, {"ok": True}),
            f"{TARGET}/gone": fake_response(404, {"ok": True}, reason="Not Found"),
        }
    )
    requests_to_run = [Request(url="{{baseUrl}}/same"), Request(url="{{baseUrl}}/gone")]

    report = run_comparisons(
        requests_to_run,
        _options(normalized_json_comparison=True),
        command_line="apicompare compare --normalized-json-comparison",
        request_fn=transport,
    )

    assert report.summary() == {"total": 2, "passed": 1, "failed": 1}
    assert report.exit_code == 1
    assert [result.passed for result in report.results] == [True, False]
    assert report.results[1].differences[0].type == "status_code"
    assert report.command_line == "apicompare compare --normalized-json-comparison"
    assert report.options["normalized_json_comparison"] is True
    assert report.input_requests == [request.to_dict() for request in requests_to_run]


def test_empty_request_list_passes() -> None:
    report = run_comparisons([], _options(), command_line="apicompare compare")

    assert report.summary() == {"total": 0, "passed": 0, "failed": 0}
    assert report.exit_code == 0


def test_progress_reports_each_request(fake_response, transport_factory) -> None:
    transport = transport_factory(
        {
            f"{REF}/a": fake_response(200, {}),
            f"{TARGET}/a": fake_response(200, {}),
            f"{REF}/b": fake_response(200, {}),
            f"{TARGET}/b": fake_response(200, {}),
        }
    )
    seen = []

    run_comparisons(
        [Request(url="{{baseUrl}}/a"), Request(url="{{baseUrl}}/b")],
        _options(),
        command_line="apicompare compare",
        request_fn=transport,
        progress=lambda index, total, request: seen.append((index, total, request.url)),
    )

    assert seen == [(1, 2, "{{baseUrl}}/a"), (2, 2, "{{baseUrl}}/b")]


def test_transport_failure_is_recorded_not_raised(fake_response, transport_factory) -> None:
    transport = transport_factory(
        {
            f"{REF}/x": fake_response(200, {"id": 1}),
            f"{TARGET}/x": requests.ConnectionError("connection refused"),
        }
    )

    report = run_comparisons(
        [Request(url="{{baseUrl}}/x")],
        _options(),
        command_line="apicompare compare",
        request_fn=transport,
    )

    result = report.results[0]
    assert result.target.status_code == 0
    assert result.target.error == "connection refused"
    assert result.has_errors
    assert [difference.type for difference in result.differences] == ["status_code", "body"]


def test_missing_side_url_fails_before_any_call(transport_factory) -> None:
    transport = transport_factory({})

    with pytest.raises(MissingRequestURLError):
        compare_request(
            Request(reference_url="{{baseUrl}}/only"),
            _options(),
            request_fn=transport,
        )

    assert transport.calls == []


def test_interrupted_run_keeps_completed_results(fake_response, transport_factory) -> None:
    def _interrupt():
        raise KeyboardInterrupt

    transport = transport_factory(
        {
            f"{REF}/first": fake_response(200, {}),
            f"{TARGET}/first": fake_response(200, {}),
            f"{REF}/second": _interrupt,
        }
    )
    completed = []

    with pytest.raises(KeyboardInterrupt):
        run_comparisons(
            [Request(url="{{baseUrl}}/first"), Request(url="{{baseUrl}}/second")],
            _options(),
            command_line="apicompare compare",
            request_fn=transport,
            results=completed,
        )

    assert len(completed) == 1
    assert completed[0].passed
