"""Authentication commands."""

import typer

from ..auth.oauth import OAuthManager
from ..common.exceptions import AuthenticationError
from ..config.settings import Settings, get_settings
from .formatters import (
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
    prompt_for_auth_code,
)

auth_app = typer.Typer(help="Manage Google Drive authentication")


def build_oauth_manager(settings: Settings) -> OAuthManager:
    """Create an OAuth manager that prompts on the console."""
    return OAuthManager(
        settings.token_path,
        settings.credentials_path,
        scopes=settings.scopes,
        code_prompt=prompt_for_auth_code,
        redirect_uri=settings.redirect_uri,
    )


@auth_app.command("login")
def login() -> None:
    """Authenticate with Google Drive."""
    settings = get_settings()
    oauth_manager = build_oauth_manager(settings)

    try:
        if oauth_manager.token_path.exists():
            print_info("Existing token found. Logging out first...")
            oauth_manager.logout()

        print_info("Starting authorization flow...")
        oauth_manager.login()

        print_success("Successfully authenticated with Google Drive!")
        print_info(f"Token saved to: {settings.token_path}")

    except AuthenticationError as e:
        print_error(f"Authentication failed: {e}")
        raise typer.Exit(1)


@auth_app.command("logout")
def logout() -> None:
    """Remove stored credentials."""
    settings = get_settings()
    oauth_manager = build_oauth_manager(settings)

    if not oauth_manager.token_path.exists():
        print_warning("Not currently authenticated.")
        return

    try:
        oauth_manager.logout()
    except OSError as e:
        print_error(f"Logout failed: {e}")
        raise typer.Exit(1)
    print_success("Successfully logged out.")


@auth_app.command("status")
def status() -> None:
    """Show authentication status."""
    settings = get_settings()
    oauth_manager = build_oauth_manager(settings)

    try:
        creds = oauth_manager.load_token()
    except AuthenticationError as e:
        print_error(f"Failed to check status: {e}")
        raise typer.Exit(1)

    if creds is None or not creds.valid:
        print_warning("Not authenticated")
        print_info("Run 'gdrive-export auth login' to authenticate.")
        return

    print_success("Authenticated with Google Drive")
    print_info(f"Token location: {settings.token_path}")
    scopes_text = "\n".join(f"  • {scope}" for scope in (creds.scopes or []))
    print_panel("Granted Scopes", scopes_text, style="green")
