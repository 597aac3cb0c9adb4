"""Main CLI application."""

import typer

from ..common.logging import setup_logging
from ..config.settings import get_settings
from .auth_cmd import auth_app
from .config_cmd import config_app
from .export_cmd import export

app = typer.Typer(
    name="gdrive-export",
    help="Export Google Drive folders to PDF and SVG files",
    add_completion=False,
)

# Register subcommands
app.add_typer(auth_app, name="auth")
app.add_typer(config_app, name="config")

# Add main commands
app.command(name="export")(export)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
) -> None:
    """Export Google Drive slides, programs and images to a local site."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
