"""Comparison subsystem exceptions."""


class CompareError(Exception):
    """Base class for comparison errors."""


class CompareConfigError(CompareError):
    """Invalid comparison configuration."""


class MissingRequestURLError(CompareError):
    """No URL resolves for one side of a request."""
