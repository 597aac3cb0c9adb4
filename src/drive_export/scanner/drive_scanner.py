"""Google Drive folder listing."""

from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

from ..auth.service import DriveServiceFactory
from ..common.constants import FOLDER_MIME_TYPE, PAGE_SIZE
from ..common.exceptions import ScanError
from ..common.logging import get_logger
from ..exporter.models import FileRecord

logger = get_logger(__name__)

LIST_FIELDS = "nextPageToken, files(id, name, parents, mimeType)"


def build_query(parent_id: str) -> str:
    """Build the files.list query for the direct, non-folder children of a folder.

    Args:
        parent_id: Parent folder ID

    Returns:
        Drive query string
    """
    return (
        f'"{parent_id}" in parents and trashed=false '
        f"and mimeType != '{FOLDER_MIME_TYPE}'"
    )


class DriveScanner:
    """Lists files in Google Drive folders."""

    def __init__(
        self,
        service_factory: DriveServiceFactory,
        page_size: int = PAGE_SIZE,
    ) -> None:
        """Initialize drive scanner.

        Args:
            service_factory: Factory for creating Drive API service
            page_size: Number of files to fetch per page
        """
        self.service_factory = service_factory
        self.page_size = page_size
        self._folder_cache: dict[str, str] = {}

    def list_files(self, parent_id: str) -> list[FileRecord]:
        """List the files directly under a folder.

        Trashed files and sub-folders are excluded. The listing is complete
        or the call fails; partial results are never returned.

        Args:
            parent_id: Parent folder ID

        Returns:
            FileRecord instances in API order

        Raises:
            ScanError: If listing fails
        """
        service = self.service_factory.create_service()
        query = build_query(parent_id)
        records: list[FileRecord] = []
        page_token = None

        try:
            while True:
                response = (
                    service.files()
                    .list(
                        q=query,
                        pageSize=self.page_size,
                        pageToken=page_token,
                        fields=LIST_FIELDS,
                    )
                    .execute()
                )

                records.extend(
                    FileRecord.from_api(file_data) for file_data in response.get("files", [])
                )

                page_token = response.get("nextPageToken")
                if not page_token:
                    break
        except (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError, KeyError) as e:
            raise ScanError(f"Failed to list folder {parent_id}: {e}") from e

        logger.info(f"Found {len(records)} files in folder {parent_id}")
        return records

    def get_folder_name(self, folder_id: str) -> str:
        """Fetch a folder name by ID.

        Args:
            folder_id: Folder ID

        Returns:
            Folder name

        Raises:
            ScanError: If the lookup fails
        """
        if folder_id in self._folder_cache:
            return self._folder_cache[folder_id]

        service = self.service_factory.create_service()
        try:
            folder: dict[str, Any] = (
                service.files().get(fileId=folder_id, fields="name").execute()
            )
        except (HttpError, httplib2.HttpLib2Error, GoogleAuthError, OSError) as e:
            raise ScanError(f"Failed to fetch folder name for {folder_id}: {e}") from e

        name = folder.get("name", "")
        self._folder_cache[folder_id] = name
        return name
