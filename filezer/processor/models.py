from dataclasses import dataclass, field
from pathlib import Path

from filezer.report.models import AnalysisResult
from filezer.report.writer import TransientReport


@dataclass(frozen=True)
class UploadedFile:
    """What the upload collaborator hands over: content or a path to it."""

    filename: str
    media_type: str
    content: bytes | None = None
    path: Path | None = None
    error: bool = False


@dataclass(frozen=True)
class RawDocument:
    """Uploaded bytes with their declared media type and filename."""

    content: bytes
    media_type: str
    filename: str


@dataclass(frozen=True)
class PipelineOutput:
    """Result of one pipeline run.

    The caller sends ``report_bytes`` and then calls ``cleanup`` to delete the
    transient report file.
    """

    result: AnalysisResult
    report_bytes: bytes
    report: TransientReport
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def cleanup(self) -> None:
        self.report.delete()
