from filezer.config.settings import Settings
from filezer.logging.logger import Log
from filezer.processor.exceptions import ProcessorError
from filezer.processor.models import UploadedFile
from filezer.processor.processor import Processor, build_processor
from filezer.report.exceptions import ReportError
from filezer.upload.exceptions import InvalidUploadError
from filezer.upload.models import ReportDownload, UploadOutcome
from filezer.upload.validator import validate_upload


class UploadHandler:
    """Validate one upload, run the processor and package the report."""

    def __init__(self, processor: Processor) -> None:
        self._processor = processor

    def handle(self, upload: UploadedFile | None) -> UploadOutcome:
        try:
            accepted = validate_upload(upload)
        except InvalidUploadError as exc:
            Log.warning(f"Upload rejected: {exc}")
            return UploadOutcome(message=str(exc))

        Log.info(f"File {accepted.filename} uploaded successfully")
        try:
            output = self._processor.process(accepted)
        except (ProcessorError, ReportError) as exc:
            return UploadOutcome(message=str(exc))

        download = ReportDownload(body=output.report_bytes)
        try:
            output.cleanup()
        except ReportError as exc:
            Log.warning(f"Transient report was not removed: {exc}")
        return UploadOutcome(
            message="File analyzed successfully.",
            result=output.result,
            download=download,
            warnings=output.warnings,
        )

    def close(self) -> None:
        self._processor.close()


def build_upload_handler(settings: Settings) -> UploadHandler:
    return UploadHandler(build_processor(settings))
