class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class UnreadableFileError(ProcessorError):
    """Raised when uploaded content cannot be read."""
