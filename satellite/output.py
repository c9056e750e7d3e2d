"""Console output formatting for the Satellite CLI."""

from typing import Optional

from rich.console import Console
from rich.markup import escape


class OutputFormatter:
    """Rich-based console reporter.

    Warnings and errors always go to stderr. Informational output, action
    titles and plain lines are suppressed when ``quiet`` is set; the final
    success message is always shown.
    """

    def __init__(
        self,
        quiet: bool = False,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        """Initialize output formatter.

        Args:
            quiet: Suppress non-essential output
            console: Console used for regular output
            err_console: Console used for warnings and errors
        """
        self.quiet = quiet
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    def print(self, message: str = "") -> None:
        """Print a plain line."""
        if not self.quiet:
            self.console.print(message, markup=False, highlight=False)

    def info(self, message: str) -> None:
        """Print an informational message."""
        if not self.quiet:
            self.console.print(message, style="cyan", markup=False, highlight=False)

    def success(self, message: str) -> None:
        """Print a success message."""
        self.console.print(
            f"[bold green]Success:[/bold green] {escape(message)}", soft_wrap=True
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self.err_console.print(
            f"[bold yellow]Warning:[/bold yellow] {escape(message)}", soft_wrap=True
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self.err_console.print(
            f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True
        )

    def action_title(self, title: str) -> None:
        """Print an upper-cased section title underlined with tildes.

        Args:
            title: Title text, e.g. "Fetching database"
        """
        if self.quiet:
            return
        self.console.print()
        self.console.print(title.upper(), style="bold blue", highlight=False)
        self.console.print("~" * len(title), style="blue")
