"""Report subsystem exceptions."""


class ReportError(Exception):
    """Base class for report errors."""


class ReportValidationError(ReportError):
    """Report JSON is unreadable or does not match the report schema."""
