"""Tests for data models."""

from pathlib import Path

from drive_export.common.constants import PDF_MIME_TYPE, SVG_MIME_TYPE
from drive_export.exporter.models import ExportMode, ExportReport, FileRecord


def test_file_record_from_api() -> None:
    """Test building a FileRecord from a files.list entry."""
    record = FileRecord.from_api(
        {"id": "abc", "name": "Deck", "mimeType": PDF_MIME_TYPE, "parents": ["p1", "p2"]}
    )

    assert record.file_id == "abc"
    assert record.name == "Deck"
    assert record.is_pdf
    assert not record.is_form
    assert record.parent_id == "p1"


def test_file_record_without_parents() -> None:
    """Test a record with no parents."""
    record = FileRecord.from_api({"id": "abc", "name": "Orphan"})

    assert record.parents == []
    assert record.parent_id is None
    assert record.mime_type == ""


def test_export_mode_mime_types() -> None:
    """Test export mode MIME types and extensions."""
    assert ExportMode.PDF.mime_type == PDF_MIME_TYPE
    assert ExportMode.SVG.mime_type == SVG_MIME_TYPE
    assert ExportMode.PDF.extension == ".pdf"
    assert ExportMode.SVG.extension == ".svg"


def test_export_report_merge(form_file: FileRecord) -> None:
    """Test merging reports keeps write order."""
    first = ExportReport(written=[Path("/a/x.pdf")], categories=["slides"])
    second = ExportReport(
        written=[Path("/b/y.svg")], skipped=[form_file], categories=["images"]
    )

    first.merge(second)

    assert first.filenames == ["x.pdf", "y.svg"]
    assert first.count == 2
    assert first.skipped == [form_file]
    assert first.categories == ["slides", "images"]


def test_export_report_groups_by_category() -> None:
    first = ExportReport()
    first.add_written("slides", Path("/pdf/deck.pdf"))
    second = ExportReport()
    second.add_written("images", Path("/images/logo.svg"))
    second.add_written("images", Path("/images/icon.svg"))

    first.merge(second)

    assert first.filenames == ["deck.pdf", "logo.svg", "icon.svg"]
    assert first.written_by_category == {
        "slides": [Path("/pdf/deck.pdf")],
        "images": [Path("/images/logo.svg"), Path("/images/icon.svg")],
    }
