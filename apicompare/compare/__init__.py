"""Comparison orchestration for apicompare."""

from apicompare.compare.engine import ProgressCallback, compare_request, run_comparisons
from apicompare.compare.exceptions import CompareConfigError, CompareError, MissingRequestURLError
from apicompare.compare.options import (
    DEFAULT_TIMEOUT_SECONDS,
    CompareOptions,
    parse_header_option,
    parse_header_options,
)
from apicompare.compare.requester import (
    build_request_headers,
    decode_response_body,
    encode_request_body,
    make_request,
    resolve_request_url,
)

__all__ = [
    "CompareError",
    "CompareConfigError",
    "MissingRequestURLError",
    "DEFAULT_TIMEOUT_SECONDS",
    "CompareOptions",
    "parse_header_option",
    "parse_header_options",
    "resolve_request_url",
    "build_request_headers",
    "encode_request_body",
    "decode_response_body",
    "make_request",
    "ProgressCallback",
    "compare_request",
    "run_comparisons",
]
