"""Tests for the local writer."""

from pathlib import Path

import pytest

from drive_export.common.exceptions import WriteError
from drive_export.exporter.writer import LocalWriter


def test_write_creates_file_and_parents(tmp_path: Path) -> None:
    """Test writing into a directory that does not exist yet."""
    path = tmp_path / "static" / "images" / "logo.svg"

    written = LocalWriter().write(path, b"<svg/>")

    assert written == 6
    assert path.read_bytes() == b"<svg/>"


def test_write_truncates_existing_file(tmp_path: Path) -> None:
    """Test that an existing file is replaced, not appended to."""
    path = tmp_path / "deck.pdf"
    path.write_bytes(b"old content that is longer")

    LocalWriter().write(path, b"new")

    assert path.read_bytes() == b"new"


def test_write_failure_raises(tmp_path: Path) -> None:
    """Test that filesystem errors become WriteError."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(WriteError, match="Unable to create file"):
        LocalWriter().write(blocker / "deck.pdf", b"data")
