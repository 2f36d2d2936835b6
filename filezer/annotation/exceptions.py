class AnnotationError(Exception):
    """Raised when annotation fails."""


class AnnotationResponseError(AnnotationError):
    """Raised when the annotation payload does not have the expected shape."""


class AnnotationNetworkError(AnnotationError):
    """Raised when the annotation provider call fails due to network/infrastructure issues."""
