"""Data models for Drive files, export decisions and run results."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from ..common.constants import (
    FOLDER_MIME_TYPE,
    FORM_MIME_TYPE,
    PDF_MIME_TYPE,
    SVG_MIME_TYPE,
)


class ExportMode(Enum):
    """Target format for a folder export."""

    PDF = "pdf"
    SVG = "svg"

    @property
    def mime_type(self) -> str:
        """MIME type requested from the export endpoint."""
        return PDF_MIME_TYPE if self is ExportMode.PDF else SVG_MIME_TYPE

    @property
    def extension(self) -> str:
        """File extension appended to converted files."""
        return f".{self.value}"


class ExportAction(Enum):
    """What to do with a single Drive file."""

    SKIP = "skip"
    DOWNLOAD = "download"
    EXPORT = "export"


@dataclass(frozen=True)
class FileRecord:
    """Represents a file in Google Drive."""

    file_id: str
    name: str
    mime_type: str
    parents: list[str] = field(default_factory=list)
    trashed: bool = False

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "FileRecord":
        """Build a record from a files.list entry."""
        return cls(
            file_id=data["id"],
            name=data["name"],
            mime_type=data.get("mimeType", ""),
            parents=list(data.get("parents", [])),
            trashed=data.get("trashed", False),
        )

    @property
    def is_form(self) -> bool:
        return self.mime_type == FORM_MIME_TYPE

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME_TYPE

    @property
    def is_folder(self) -> bool:
        return self.mime_type == FOLDER_MIME_TYPE

    @property
    def parent_id(self) -> Optional[str]:
        """First parent folder ID, if any."""
        return self.parents[0] if self.parents else None


@dataclass(frozen=True)
class ExportPlan:
    """Decision for one file under a given export mode."""

    action: ExportAction
    output_name: Optional[str] = None
    export_mime_type: Optional[str] = None

    @property
    def skipped(self) -> bool:
        return self.action is ExportAction.SKIP


@dataclass
class FetchResult:
    """Bytes fetched for a file, with the local name to store them under."""

    record: FileRecord
    output_name: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ExportCategory:
    """A Drive folder exported to a local directory in one format."""

    name: str
    folder_id: str
    mode: ExportMode
    target_dir: Path
    url_prefix: str = ""


@dataclass
class ExportReport:
    """Outcome of an export run."""

    written: list[Path] = field(default_factory=list)
    skipped: list[FileRecord] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    written_by_category: dict[str, list[Path]] = field(default_factory=dict)

    @property
    def filenames(self) -> list[str]:
        """Names of the written files, in the order they were written."""
        return [path.name for path in self.written]

    def add_written(self, category: str, path: Path) -> None:
        """Record a file written (or planned) for a category."""
        self.written.append(path)
        self.written_by_category.setdefault(category, []).append(path)

    @property
    def count(self) -> int:
        return len(self.written)

    def merge(self, other: "ExportReport") -> None:
        """Append another report's results to this one."""
        self.written.extend(other.written)
        self.skipped.extend(other.skipped)
        self.categories.extend(other.categories)
        for category, paths in other.written_by_category.items():
            self.written_by_category.setdefault(category, []).extend(paths)
