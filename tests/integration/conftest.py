from pathlib import Path

import pytest

from filezer.config.settings import Settings


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    report_dir = tmp_path / "reports"
    report_dir.mkdir()
    return Settings(annotation_provider="example", report_dir=str(report_dir))
