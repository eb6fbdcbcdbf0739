"""Load request files into generic `Request` records."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from apicompare.core.models import Request
from apicompare.inputs.exceptions import RequestSourceFormatError
from apicompare.inputs.schema import validate_request_document

RESTFOX_NO_BODY = "No Body"


def read_request_document(path: str | Path) -> Any:
    target = Path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise RequestSourceFormatError(f"Request file is not valid UTF-8 text: {target}") from error

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as error:
        raise RequestSourceFormatError(
            f"Request file is not valid JSON: {target} ({error})"
        ) from error


def parse_generic_requests(document: Any) -> list[Request]:
    validate_request_document(document, "generic")
    return [Request.from_dict(item) for item in document]


def parse_restfox_requests(document: Any) -> list[Request]:
    """Map Restfox `request` entries to requests, dropping request groups."""
    validate_request_document(document, "restfox")
    requests: list[Request] = []
    for item in document["collection"]:
        if item.get("_type") != "request":
            continue
        requests.append(_restfox_to_request(item))
    return requests


def _restfox_to_request(item: dict[str, Any]) -> Request:
    body = item.get("body") or {}
    body_text = None
    if body.get("mimeType") != RESTFOX_NO_BODY and body.get("text"):
        body_text = body["text"]

    headers: dict[str, str] = {}
    for header in item.get("headers") or []:
        headers[header["name"]] = header.get("value", "")

    return Request(
        url=item["url"],
        method=item.get("method") or "GET",
        body=body_text,
        headers=headers,
        name=item.get("name"),
    )


def load_requests(
    path: str | Path,
    *,
    input_file_type: str = "generic",
    limit: int | None = None,
) -> list[Request]:
    """Read, validate and convert a request file; `limit` keeps the first N."""
    document = read_request_document(path)
    if input_file_type == "restfox":
        requests = parse_restfox_requests(document)
    else:
        requests = parse_generic_requests(document)

    if limit is not None and limit > 0:
        requests = requests[:limit]
    return requests
