"""Request source exceptions."""


class RequestSourceError(Exception):
    """Base class for request source errors."""


class RequestSourceFormatError(RequestSourceError):
    """Request file is not valid JSON or does not match its declared shape."""
