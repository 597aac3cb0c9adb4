"""Rich formatting utilities for terminal output."""

from typing import Any, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

console = Console()


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗[/red] {message}", style="red")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠[/yellow] {message}", style="yellow")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_panel(title: str, content: str, style: str = "blue") -> None:
    """Print content in a panel.

    Args:
        title: Panel title
        content: Panel content
        style: Panel border style
    """
    console.print(Panel(content, title=title, border_style=style))


def print_markdown_source(text: str) -> None:
    """Print markdown source with syntax highlighting."""
    console.print(Syntax(text, "markdown", word_wrap=True))


def prompt_for_auth_code(auth_url: str) -> str:
    """Show the authorization URL and read one line from the operator.

    Args:
        auth_url: URL the operator must open in a browser

    Returns:
        The line entered by the operator
    """
    console.print(
        "Go to the following link in your browser then type the authorization code:"
    )
    console.print(auth_url, markup=False, soft_wrap=True)
    return console.input("[bold cyan]Authorization code:[/bold cyan] ")


def create_table(title: Optional[str] = None, **kwargs: Any) -> Table:
    """Create a Rich table with common styling.

    Args:
        title: Optional table title
        **kwargs: Additional Table arguments

    Returns:
        Configured Table instance
    """
    return Table(title=title, show_header=True, header_style="bold cyan", **kwargs)
