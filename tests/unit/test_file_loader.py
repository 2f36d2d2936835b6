from pathlib import Path

import pytest

from filezer.processor.exceptions import UnreadableFileError
from filezer.processor.file_loader import FileLoader
from filezer.processor.models import UploadedFile


class TestLoadReturnsDocument:
    def test_reads_bytes_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "a.txt"
        path.write_bytes(b"some text")
        upload = UploadedFile(filename="a.txt", media_type="text/plain", path=path)

        document = FileLoader().load(upload)

        assert document.content == b"some text"
        assert document.filename == "a.txt"
        assert document.media_type == "text/plain"

    def test_prefers_in_memory_content(self, tmp_path: Path) -> None:
        upload = UploadedFile(
            filename="a.txt",
            media_type="text/plain",
            content=b"in memory",
            path=tmp_path / "does-not-exist.txt",
        )

        assert FileLoader().load(upload).content == b"in memory"

    def test_empty_content_is_readable(self) -> None:
        upload = UploadedFile(filename="a.txt", media_type="text/plain", content=b"")
        assert FileLoader().load(upload).content == b""


class TestLoadRaisesUnreadable:
    def test_missing_file(self, tmp_path: Path) -> None:
        upload = UploadedFile(filename="a.txt", media_type="text/plain", path=tmp_path / "nope.txt")

        with pytest.raises(UnreadableFileError, match="Failed to read file content"):
            FileLoader().load(upload)

    def test_no_source(self) -> None:
        upload = UploadedFile(filename="a.txt", media_type="text/plain")

        with pytest.raises(UnreadableFileError):
            FileLoader().load(upload)
