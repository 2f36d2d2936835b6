class AnalysisError(Exception):
    """Base exception for text analysis errors."""


class EmptyInputError(AnalysisError):
    """Raised when an average is requested over zero words or sentences."""
