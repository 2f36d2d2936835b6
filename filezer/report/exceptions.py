class ReportError(Exception):
    """Base exception for report errors."""


class ReportWriteError(ReportError):
    """Raised when the transient report cannot be written, read or removed."""


class ReportParseError(ReportError):
    """Raised when a rendered report cannot be parsed back."""
