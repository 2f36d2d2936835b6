from pathlib import PurePath

from filezer.processor.models import UploadedFile
from filezer.upload.exceptions import InvalidUploadError

ACCEPTED_MEDIA_TYPE = "text/plain"
ACCEPTED_EXTENSION = ".txt"

INVALID_UPLOAD_MESSAGE = "Invalid file or upload error."
INVALID_EXTENSION_MESSAGE = "Invalid file extension. Only .txt files are allowed."


def rejection_reason(upload: UploadedFile | None) -> str | None:
    """Return why an upload is rejected, or None when it may be analyzed."""
    if upload is None or upload.error or upload.media_type != ACCEPTED_MEDIA_TYPE:
        return INVALID_UPLOAD_MESSAGE
    if PurePath(upload.filename).suffix.lower() != ACCEPTED_EXTENSION:
        return INVALID_EXTENSION_MESSAGE
    return None


def validate_upload(upload: UploadedFile | None) -> UploadedFile:
    """Raises InvalidUploadError for anything but a text/plain .txt upload."""
    reason = rejection_reason(upload)
    if reason is not None or upload is None:
        raise InvalidUploadError(reason or INVALID_UPLOAD_MESSAGE)
    return upload
