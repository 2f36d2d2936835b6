from dataclasses import dataclass, field

from filezer.report.models import AnalysisResult
from filezer.report.writer import REPORT_FILENAME


@dataclass(frozen=True)
class ReportDownload:
    """Report bytes plus the headers used to send them as an attachment."""

    body: bytes
    filename: str = REPORT_FILENAME
    content_type: str = "application/octet-stream"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": self.content_type,
            "Content-Disposition": f'attachment; filename="{self.filename}"',
            "Content-Length": str(len(self.body)),
        }


@dataclass(frozen=True)
class UploadOutcome:
    """What the caller shows or sends back for one upload."""

    message: str
    result: AnalysisResult | None = None
    download: ReportDownload | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def succeeded(self) -> bool:
        return self.download is not None
