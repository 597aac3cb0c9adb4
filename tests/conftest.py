"""Shared pytest fixtures."""

from pathlib import Path
from typing import Any, Callable
from unittest.mock import Mock

import pytest

from drive_export.common.constants import FORM_MIME_TYPE, PDF_MIME_TYPE
from drive_export.exporter.models import FileRecord

DOC_MIME_TYPE = "application/vnd.google-apps.document"


class FakeDownloader:
    """Stand-in for MediaIoBaseDownload that writes a canned payload."""

    payload = b"payload"

    def __init__(self, fh: Any, request: Any) -> None:
        self.fh = fh
        self.request = request

    def next_chunk(self) -> tuple[None, bool]:
        self.fh.write(self.payload)
        return None, True


@pytest.fixture
def form_file() -> FileRecord:
    """A Google Form, never exported."""
    return FileRecord(file_id="A-id", name="A", mime_type=FORM_MIME_TYPE, parents=["folder1"])


@pytest.fixture
def pdf_file() -> FileRecord:
    """A file already stored as PDF."""
    return FileRecord(file_id="B-id", name="B", mime_type=PDF_MIME_TYPE, parents=["folder1"])


@pytest.fixture
def doc_file() -> FileRecord:
    """A native Google document."""
    return FileRecord(file_id="C-id", name="C", mime_type=DOC_MIME_TYPE, parents=["folder1"])


@pytest.fixture
def sample_files(
    form_file: FileRecord, pdf_file: FileRecord, doc_file: FileRecord
) -> list[FileRecord]:
    """A folder holding a form, a PDF and a document."""
    return [form_file, pdf_file, doc_file]


@pytest.fixture
def mock_drive_service() -> Mock:
    """Create a mock Drive API service."""
    service = Mock()
    files_resource = Mock()
    service.files.return_value = files_resource
    return service


@pytest.fixture
def service_factory(mock_drive_service: Mock) -> Mock:
    """Create a mock service factory returning the mock service."""
    factory = Mock()
    factory.create_service.return_value = mock_drive_service
    return factory


@pytest.fixture
def api_listing(sample_files: list[FileRecord]) -> dict[str, Any]:
    """files.list response for the sample folder."""
    return {
        "files": [
            {"id": f.file_id, "name": f.name, "mimeType": f.mime_type, "parents": f.parents}
            for f in sample_files
        ]
    }


@pytest.fixture
def fake_downloader(monkeypatch: pytest.MonkeyPatch) -> Callable[[bytes], type]:
    """Patch MediaIoBaseDownload in the export engine."""

    def install(payload: bytes = b"payload") -> type:
        downloader = type("Downloader", (FakeDownloader,), {"payload": payload})
        monkeypatch.setattr("drive_export.exporter.engine.MediaIoBaseDownload", downloader)
        return downloader

    return install


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Directory receiving exported files."""
    return tmp_path / "site" / "content" / "pdf"
