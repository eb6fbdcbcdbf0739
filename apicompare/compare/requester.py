"""Blocking HTTP requester that turns calls into `ResponseRecord`s."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Mapping

import requests

from apicompare.compare.exceptions import MissingRequestURLError
from apicompare.core.canonical import compact_json
from apicompare.core.models import Request, ResponseBody, ResponseRecord, Side
from apicompare.core.placeholders import replace_base_url, replace_header_placeholders
from apicompare.core.status import status_text_for

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def resolve_request_url(request: Request, base_url: str, side: Side) -> str:
    template = request.url_for(side)
    if not template:
        raise MissingRequestURLError(
            f"No URL specified for {side} side of request '{request.display_name or '<unnamed>'}'"
        )
    return replace_base_url(template, base_url)


def build_request_headers(
    request: Request,
    header_replacements: Mapping[str, str],
    additional_headers: Mapping[str, str],
) -> dict[str, str]:
    headers = replace_header_placeholders(request.headers, header_replacements)
    headers.update(additional_headers)
    return headers


def encode_request_body(
    body: str | dict[str, Any] | list[Any] | None,
    headers: dict[str, str],
) -> str | None:
    """Return the payload text; structured bodies also get a JSON content type."""
    if body is None or body == "":
        return None
    if isinstance(body, str):
        return body
    if not any(name.lower() == "content-type" for name in headers):
        headers["Content-Type"] = JSON_CONTENT_TYPE
    return compact_json(body)


def _reject_constant(token: str) -> Any:
    raise ValueError(f"non-standard JSON constant: {token}")


def decode_response_body(response: Any) -> ResponseBody:
    """Parse JSON payloads; bodies containing `NaN` or `Infinity` stay textual."""
    content_type = (response.headers.get("content-type") or "").lower()
    if JSON_CONTENT_TYPE in content_type:
        try:
            decoded = json.loads(response.text, parse_constant=_reject_constant)
        except ValueError:
            return ResponseBody.textual(response.text)
        if isinstance(decoded, (dict, list)):
            return ResponseBody.structured(decoded)
    return ResponseBody.textual(response.text)


def make_request(
    request: Request,
    base_url: str,
    *,
    side: Side = "reference",
    header_replacements: Mapping[str, str] | None = None,
    additional_headers: Mapping[str, str] | None = None,
    timeout_seconds: float = 30.0,
    request_fn: Callable[..., Any] | None = None,
) -> ResponseRecord:
    """Issue one call; transport failures come back as status-0 records."""
    url = resolve_request_url(request, base_url, side)
    headers = build_request_headers(
        request,
        header_replacements or {},
        additional_headers or {},
    )
    payload = encode_request_body(request.body, headers)
    send = request_fn or requests.request

    logger.debug("%s %s %s", side, request.method, url)
    started = time.perf_counter()
    try:
        response = send(
            request.method,
            url,
            headers=headers,
            data=payload.encode("utf-8") if payload is not None else None,
            timeout=timeout_seconds,
        )
        body = decode_response_body(response)
    except (requests.RequestException, ValueError) as error:
        # ValueError covers header values http.client cannot encode as latin-1.
        duration_ms = (time.perf_counter() - started) * 1000.0
        logger.warning("%s request failed: %s %s (%s)", side, request.method, url, error)
        return ResponseRecord(
            status_code=0,
            status_text="Error",
            body=ResponseBody.empty(),
            duration_ms=duration_ms,
            error=str(error) or error.__class__.__name__,
        )

    duration_ms = (time.perf_counter() - started) * 1000.0
    status_code = int(response.status_code)
    return ResponseRecord(
        status_code=status_code,
        status_text=response.reason or status_text_for(status_code),
        body=body,
        duration_ms=duration_ms,
    )
