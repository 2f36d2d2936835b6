from pathlib import Path

import pytest

from filezer.processor.models import UploadedFile


@pytest.fixture()
def sample_text_bytes() -> bytes:
    """Two short lines, four sentences, a repeated word."""
    return b"Hello, world! This is a test.\nThe test is short? Yes.\n"


@pytest.fixture()
def sample_upload(tmp_path: Path, sample_text_bytes: bytes) -> UploadedFile:
    path = tmp_path / "notes.txt"
    path.write_bytes(sample_text_bytes)
    return UploadedFile(filename="notes.txt", media_type="text/plain", path=path)
