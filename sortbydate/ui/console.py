"""Console UI wrapper using Rich library."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Centralizes console output with consistent styling for
    different message types (warning, error, success).
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize with a Rich Console (stderr by default)."""
        self.console = console or Console(stderr=True)

    def print_warning(self, message: str) -> None:
        """Print a warning message with yellow styling."""
        self.console.print(f"[yellow]⚠️  {message}[/yellow]")

    def print_error(self, message: str) -> None:
        """Print an error message with red styling."""
        self.console.print(f"[red]❌ {message}[/red]")

    def print_success(self, message: str) -> None:
        """Print a success message with green styling."""
        self.console.print(f"[green]✓ {message}[/green]")

    def print_panel(
        self,
        content: str,
        title: str = "",
        border_style: str = "blue"
    ) -> None:
        """
        Print content in a bordered panel.

        Args:
            content: Panel content.
            title: Panel title.
            border_style: Border color/style.
        """
        panel = Panel(content, title=title, border_style=border_style)
        self.console.print(panel)
