"""Core models and pure helpers for apicompare."""

from apicompare.core.canonical import (
    canonicalize,
    compact_json,
    json_equal,
    pretty_json,
    strict_json_equal,
)
from apicompare.core.models import BodyKind, Request, ResponseBody, ResponseRecord, Side
from apicompare.core.placeholders import (
    BASE_URL_TOKEN,
    replace_base_url,
    replace_header_placeholders,
    substitute,
)
from apicompare.core.status import STATUS_TEXTS, status_text_for

__all__ = [
    "BodyKind",
    "Side",
    "Request",
    "ResponseBody",
    "ResponseRecord",
    "canonicalize",
    "compact_json",
    "pretty_json",
    "json_equal",
    "strict_json_equal",
    "BASE_URL_TOKEN",
    "substitute",
    "replace_base_url",
    "replace_header_placeholders",
    "STATUS_TEXTS",
    "status_text_for",
]
