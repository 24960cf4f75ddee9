"""Console UI wrapper using Rich library."""

from rich.console import Console
from rich.panel import Panel

from fstools.models.result import Result


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled output methods.

    Centralizes console output with consistent styling for
    different message types (info, warning, error, success).
    """

    def __init__(self) -> None:
        """Initialize with Rich Console."""
        self.console = Console()

    def print_info(self, message: str) -> None:
        """Print an info message with blue styling."""
        self.console.print(f"[blue]ℹ️  {message}[/blue]")

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

    def print_result(self, result: Result) -> None:
        """
        Print a copy/move result.

        Skips are shown as info, other successes as success and
        failures as errors with their result code.

        Args:
            result: Result to display.
        """
        if not result.success:
            self.print_error(f"{result.message} (code {int(result.ret_code)})")
        elif result.message.startswith("Info"):
            self.print_info(result.message)
        else:
            self.print_success(f"{result.src_path} -> {result.dst_path}")
            if result.message != "ok":
                self.print_warning(result.message)

