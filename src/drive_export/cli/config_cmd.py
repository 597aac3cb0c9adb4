"""Configuration commands."""

import typer

from ..config.settings import get_settings
from .formatters import console, create_table

config_app = typer.Typer(help="Inspect configuration settings")


@config_app.command()
def show() -> None:
    """Show current configuration."""
    settings = get_settings()

    table = create_table(title="Configuration")
    table.add_column("Setting", style="cyan", width=20)
    table.add_column("Value", style="white")

    table.add_row("Credentials file", str(settings.credentials_path))
    table.add_row("Token file", str(settings.token_path))
    table.add_row("Scopes", "\n".join(settings.scopes))
    table.add_row("Page size", str(settings.page_size))
    table.add_row("Log level", settings.log_level)
    table.add_row("Log file", str(settings.log_file) if settings.log_file else "None")

    console.print(table)

    categories = create_table(title="Export Categories")
    categories.add_column("Category", style="cyan", no_wrap=True, min_width=8)
    categories.add_column("Folder ID", style="yellow")
    categories.add_column("Format", style="green")
    categories.add_column("Target directory", style="white")
    categories.add_column("URL prefix", style="magenta")

    for category in settings.categories().values():
        categories.add_row(
            category.name,
            category.folder_id,
            category.mode.value,
            str(category.target_dir),
            category.url_prefix,
        )

    console.print(categories)
