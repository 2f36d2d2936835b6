class InvalidUploadError(Exception):
    """Raised when an upload is rejected before analysis."""
