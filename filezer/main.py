import argparse
import mimetypes
import sys
from pathlib import Path

from filezer.config.settings import Settings
from filezer.logging.logger import Log
from filezer.processor.models import UploadedFile
from filezer.report.assembler import format_analysis_summary
from filezer.report.writer import REPORT_FILENAME
from filezer.upload.handler import build_upload_handler


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="filezer",
        description="Analyze a plain-text file and write a text report.",
    )
    parser.add_argument("file", type=Path, help="path to the .txt file to analyze")
    parser.add_argument(
        "--media-type",
        help="declared media type (guessed from the file name when omitted)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path(REPORT_FILENAME),
        help=f"where to write the report (default: {REPORT_FILENAME})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Entry point: settings -> logging -> upload handler -> report file."""
    args = parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    media_type = args.media_type or mimetypes.guess_type(args.file.name)[0] or ""
    upload = UploadedFile(filename=args.file.name, media_type=media_type, path=args.file)

    try:
        handler = build_upload_handler(settings)
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    try:
        outcome = handler.handle(upload)
    finally:
        handler.close()

    for warning in outcome.warnings:
        print(warning, file=sys.stderr)
    if outcome.download is None or outcome.result is None:
        print(outcome.message, file=sys.stderr)
        return 1

    try:
        args.output.write_bytes(outcome.download.body)
    except OSError as exc:
        print(f"Error generating text report: {exc}", file=sys.stderr)
        return 1
    print(format_analysis_summary(outcome.result))
    print(f"Report written to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
