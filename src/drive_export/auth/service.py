"""Google Drive API service factory."""

from typing import Any, Optional

from googleapiclient.discovery import build

from ..common.exceptions import AuthenticationError
from ..common.logging import get_logger
from .oauth import OAuthManager

logger = get_logger(__name__)


class DriveServiceFactory:
    """Builds the Drive API client once and reuses it for the run."""

    def __init__(self, oauth_manager: OAuthManager) -> None:
        """Initialize service factory.

        Args:
            oauth_manager: OAuth manager for authentication
        """
        self.oauth_manager = oauth_manager
        self._service: Optional[Any] = None

    def create_service(self) -> Any:
        """Return the authenticated Drive API service.

        Returns:
            Google Drive API service instance

        Raises:
            AuthenticationError: If credentials cannot be obtained or the
                client cannot be built
        """
        if self._service is not None:
            return self._service

        creds = self.oauth_manager.get_credentials()

        try:
            self._service = build("drive", "v3", credentials=creds, cache_discovery=False)
        except Exception as e:
            raise AuthenticationError(f"Unable to retrieve Drive client: {e}") from e

        logger.debug("Created Drive API service")
        return self._service
