from filezer.processor.exceptions import UnreadableFileError
from filezer.processor.models import RawDocument, UploadedFile


class FileLoader:
    """Reads the bytes of an accepted upload."""

    def load(self, upload: UploadedFile) -> RawDocument:
        """Return the upload as a RawDocument.

        Raises:
            UnreadableFileError: if neither content nor a readable path is available.
        """
        content = upload.content
        if content is None:
            if upload.path is None:
                raise UnreadableFileError("Failed to read file content.")
            try:
                content = upload.path.read_bytes()
            except OSError as exc:
                raise UnreadableFileError(f"Failed to read file content: {exc}") from exc
        return RawDocument(
            content=content,
            media_type=upload.media_type,
            filename=upload.filename,
        )
