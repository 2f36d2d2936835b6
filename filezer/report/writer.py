import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from filezer.logging.logger import Log
from filezer.report.exceptions import ReportWriteError

REPORT_FILENAME = "file_analysis_report.txt"


@dataclass(frozen=True)
class TransientReport:
    """A report written to a unique temporary file, deleted after sending."""

    path: Path

    def read_bytes(self) -> bytes:
        try:
            return self.path.read_bytes()
        except OSError as exc:
            raise ReportWriteError(f"Failed to read report {self.path}: {exc}") from exc

    def delete(self) -> None:
        """Remove the report file; a file that is already gone is fine."""
        try:
            self.path.unlink(missing_ok=True)
        except OSError as exc:
            raise ReportWriteError(f"Failed to delete report {self.path}: {exc}") from exc
        Log.debug(f"Deleted transient report {self.path}")


class ReportWriter:
    """Writes rendered reports to invocation-scoped temporary files."""

    def __init__(self, report_dir: Path | None = None, encoding: str = "utf-8") -> None:
        self._report_dir = report_dir
        self._encoding = encoding

    def write(self, report: str) -> TransientReport:
        """Write report text to a new unique file.

        Raises:
            ReportWriteError: if the file cannot be created or written.
        """
        stem, suffix = os.path.splitext(REPORT_FILENAME)
        try:
            data = report.encode(self._encoding)
            fd, name = tempfile.mkstemp(
                prefix=f"{stem}_",
                suffix=suffix,
                dir=self._report_dir,
            )
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
        except (OSError, UnicodeEncodeError) as exc:
            raise ReportWriteError(f"Error generating text report: {exc}") from exc
        Log.debug(f"Wrote transient report {name}")
        return TransientReport(path=Path(name))
