"""OAuth2 authentication flow and token cache."""

import json
import os
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import parse_qs, urlparse

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from ..common.constants import AUTH_STATE, DEFAULT_REDIRECT_URI, SCOPES
from ..common.exceptions import AuthenticationError
from ..common.logging import get_logger

logger = get_logger(__name__)

# Receives the authorization URL, returns the code typed by the operator
CodePrompt = Callable[[str], str]


def extract_auth_code(response: str) -> str:
    """Extract an authorization code from operator input.

    The operator may paste either the bare code or the whole URL the browser
    was redirected to.

    Args:
        response: Line entered by the operator

    Returns:
        Authorization code

    Raises:
        AuthenticationError: If no code could be found
    """
    response = response.strip()
    if response.startswith(("http://", "https://")):
        codes = parse_qs(urlparse(response).query).get("code")
        if not codes:
            raise AuthenticationError(f"No authorization code found in URL: {response}")
        return codes[0]

    if not response:
        raise AuthenticationError("Unable to read authorization code: empty input")
    return response


class OAuthManager:
    """Manages OAuth2 authentication flow and token storage."""

    def __init__(
        self,
        token_path: Path,
        credentials_path: Path,
        scopes: Optional[list[str]] = None,
        code_prompt: Optional[CodePrompt] = None,
        redirect_uri: str = DEFAULT_REDIRECT_URI,
    ) -> None:
        """Initialize OAuth manager.

        Args:
            token_path: Path to store/load access token
            credentials_path: Path to OAuth client credentials
            scopes: OAuth scopes to request
            code_prompt: Callable that shows the authorization URL and
                returns the code entered by the operator
            redirect_uri: Redirect URI registered for the OAuth client
        """
        self.token_path = token_path
        self.credentials_path = credentials_path
        self.scopes = scopes or list(SCOPES)
        self.code_prompt = code_prompt
        self.redirect_uri = redirect_uri
        self._creds: Optional[Credentials] = None

    def get_credentials(self) -> Credentials:
        """Get cached credentials, authorizing interactively if there are none.

        Returns:
            Valid credentials

        Raises:
            AuthenticationError: If authorization fails
        """
        if self._creds is not None:
            return self._creds

        creds = self.load_token()
        if creds is None:
            logger.info(f"No usable token at {self.token_path}, starting authorization")
            creds = self.acquire_via_interactive_flow()
            self.save_token(creds)

        self._creds = creds
        return creds

    def load_token(self) -> Optional[Credentials]:
        """Load credentials from the token cache.

        Returns:
            Credentials, or None if the cache is absent or cannot be decoded

        Raises:
            AuthenticationError: If an expired token cannot be refreshed
        """
        if not self.token_path.exists():
            return None

        try:
            creds = Credentials.from_authorized_user_file(str(self.token_path), self.scopes)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable token file {self.token_path}: {e}")
            return None

        if creds.expired and creds.refresh_token:
            logger.info("Refreshing expired token...")
            try:
                creds.refresh(Request())
            except RefreshError as e:
                raise AuthenticationError(f"Unable to refresh token: {e}") from e
            self.save_token(creds)

        return creds

    def acquire_via_interactive_flow(self) -> Credentials:
        """Obtain credentials through the console authorization-code flow.

        Returns:
            Newly issued credentials

        Raises:
            AuthenticationError: If credentials file not found or the code
                exchange fails
        """
        if not self.credentials_path.exists():
            raise AuthenticationError(
                f"Unable to read client secret file: {self.credentials_path}\n"
                "Please download OAuth credentials from Google Cloud Console:\n"
                "1. Go to https://console.cloud.google.com/apis/credentials\n"
                "2. Create OAuth 2.0 Client ID (Desktop app)\n"
                "3. Download JSON and save to the path above"
            )
        if self.code_prompt is None:
            raise AuthenticationError("Interactive authorization is not available")

        try:
            flow = InstalledAppFlow.from_client_secrets_file(
                str(self.credentials_path),
                self.scopes,
                redirect_uri=self.redirect_uri,
            )
        except ValueError as e:
            raise AuthenticationError(
                f"Unable to parse client secret file to config: {e}"
            ) from e

        auth_url, _ = flow.authorization_url(access_type="offline", state=AUTH_STATE)
        code = extract_auth_code(self.code_prompt(auth_url))

        try:
            flow.fetch_token(code=code)
        except Exception as e:
            raise AuthenticationError(f"Unable to retrieve token from web: {e}") from e

        logger.info("Successfully authenticated with Google Drive")
        return flow.credentials

    def login(self) -> Credentials:
        """Run the interactive flow unconditionally and cache the result."""
        creds = self.acquire_via_interactive_flow()
        self.save_token(creds)
        self._creds = creds
        return creds

    def logout(self) -> None:
        """Remove stored credentials."""
        if self.token_path.exists():
            self.token_path.unlink()
            logger.info("Logged out successfully")
        self._creds = None

    def is_authenticated(self) -> bool:
        """Check if a usable token is cached.

        Returns:
            True if the token cache holds valid credentials
        """
        try:
            creds = self.load_token()
        except AuthenticationError:
            return False
        return creds is not None and creds.valid

    def save_token(self, creds: Credentials) -> None:
        """Save credentials to the token file.

        Args:
            creds: Credentials to save
        """
        logger.info(f"Saving credential file to: {self.token_path}")
        self.token_path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "token": creds.token,
            "refresh_token": creds.refresh_token,
            "token_uri": creds.token_uri,
            "client_id": creds.client_id,
            "client_secret": creds.client_secret,
            "scopes": creds.scopes,
        }
        if creds.expiry is not None:
            data["expiry"] = creds.expiry.strftime("%Y-%m-%dT%H:%M:%SZ")

        try:
            fd = os.open(self.token_path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, "w") as f:
                json.dump(data, f)
        except OSError as e:
            raise AuthenticationError(f"Unable to cache oauth token: {e}") from e
