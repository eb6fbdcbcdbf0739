"""Request source loading for apicompare."""

from apicompare.inputs.exceptions import RequestSourceError, RequestSourceFormatError
from apicompare.inputs.loader import (
    load_requests,
    parse_generic_requests,
    parse_restfox_requests,
    read_request_document,
)
from apicompare.inputs.schema import (
    GENERIC_REQUESTS_SCHEMA,
    INPUT_FILE_TYPES,
    RESTFOX_EXPORT_SCHEMA,
    InputFileType,
    validate_request_document,
)

__all__ = [
    "RequestSourceError",
    "RequestSourceFormatError",
    "InputFileType",
    "INPUT_FILE_TYPES",
    "GENERIC_REQUESTS_SCHEMA",
    "RESTFOX_EXPORT_SCHEMA",
    "validate_request_document",
    "read_request_document",
    "parse_generic_requests",
    "parse_restfox_requests",
    "load_requests",
]
