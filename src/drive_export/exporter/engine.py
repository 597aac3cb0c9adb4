"""Export and download of Drive files."""

import io
from typing import Any, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseDownload

from ..auth.service import DriveServiceFactory
from ..common.exceptions import ExportError
from ..common.logging import get_logger
from .models import ExportAction, ExportMode, ExportPlan, FetchResult, FileRecord

logger = get_logger(__name__)


def plan_export(record: FileRecord, mode: ExportMode) -> ExportPlan:
    """Decide how a file is fetched and what it is called locally.

    Forms are always skipped. In PDF mode, PDFs are downloaded as-is and
    everything else is converted to ``<name>.pdf``. In SVG mode, everything
    else is converted to ``<name>.svg``.

    Args:
        record: File to plan
        mode: Target export mode

    Returns:
        The export plan
    """
    if record.is_form:
        return ExportPlan(action=ExportAction.SKIP)

    if mode is ExportMode.PDF and record.is_pdf:
        return ExportPlan(action=ExportAction.DOWNLOAD, output_name=record.name)

    return ExportPlan(
        action=ExportAction.EXPORT,
        output_name=f"{record.name}{mode.extension}",
        export_mime_type=mode.mime_type,
    )


class ExportEngine:
    """Fetches file contents, converting server-side where needed."""

    def __init__(self, service_factory: DriveServiceFactory) -> None:
        """Initialize export engine.

        Args:
            service_factory: Factory for creating Drive API service
        """
        self.service_factory = service_factory

    def plan(self, record: FileRecord, mode: ExportMode) -> ExportPlan:
        return plan_export(record, mode)

    def fetch(self, record: FileRecord, mode: ExportMode) -> Optional[FetchResult]:
        """Fetch a file in the format required by the export mode.

        Args:
            record: File to fetch
            mode: Target export mode

        Returns:
            The fetched bytes and output name, or None if the file is excluded

        Raises:
            ExportError: If the export or download fails
        """
        plan = self.plan(record, mode)
        if plan.skipped:
            logger.info(f"Excluding filename={record.name}, MimeType={record.mime_type}")
            return None

        service = self.service_factory.create_service()
        if plan.action is ExportAction.EXPORT:
            request = service.files().export_media(
                fileId=record.file_id, mimeType=plan.export_mime_type
            )
        else:
            request = service.files().get_media(fileId=record.file_id)

        try:
            data = self._download(request)
        except (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError) as e:
            raise ExportError(f"Failed to {plan.action.value} {record.name}: {e}") from e

        return FetchResult(record=record, output_name=plan.output_name, data=data)

    def _download(self, request: Any) -> bytes:
        fh = io.BytesIO()
        downloader = MediaIoBaseDownload(fh, request)
        done = False

        while not done:
            status, done = downloader.next_chunk()
            if status:
                logger.debug(f"Download progress: {int(status.progress() * 100)}%")

        return fh.getvalue()
