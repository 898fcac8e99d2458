"""Console output and interactive confirmation."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from safe_folder.validation import is_affirmative

if TYPE_CHECKING:
    from safe_folder.audit import LogEntry
    from safe_folder.config import Settings


console = Console()


class ConsoleConfirmer:
    """Reads a yes/no answer from the terminal.

    Satisfies the Confirmer protocol structurally. End of input and Ctrl-C
    at the prompt count as a decline.
    """

    def __init__(self, console: Console | None = None, stream: TextIO | None = None) -> None:
        """Initialize confirmer.

        Args:
            console: Console used to show the question.
            stream: Read answers from this stream instead of stdin.
        """
        self.console = console or Console()
        self.stream = stream

    def confirm(self, message: str) -> bool:
        """Show ``message`` and block until one line of input is read."""
        try:
            response = Prompt.ask(escape(message), console=self.console, stream=self.stream)
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return False
        return is_affirmative(response)


class ConsoleUI:
    """Text output for safe-folder commands."""

    def __init__(
        self, console: Console | None = None, error_console: Console | None = None
    ) -> None:
        """Initialize output helpers.

        Args:
            console: Console for regular output.
            error_console: Console for errors. Defaults to stderr so errors
                never mix with retrieved content.
        """
        self.console = console or Console()
        self.error_console = error_console or Console(stderr=True)

    def show_success(self, message: str) -> None:
        """Show success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Show error message.

        Args:
            message: Error message.
        """
        self.error_console.print(f"[red]✗[/red] Error: {escape(message)}")

    def show_warning(self, message: str) -> None:
        """Show warning message.

        Args:
            message: Warning message.
        """
        self.console.print(f"[yellow]![/yellow] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Show info message.

        Args:
            message: Info message.
        """
        self.console.print(f"[blue]i[/blue] {escape(message)}")

    def show_content(self, size: int, text: str) -> None:
        """Print retrieved content verbatim under a byte-count header.

        The content bypasses Rich rendering, which would expand tabs and
        drop control characters such as carriage returns.
        """
        self.console.print(f"Retrieved content ({size} bytes):", highlight=False)
        self.console.file.write(text + "\n")
        self.console.file.flush()

    def show_history(self, entries: list[LogEntry]) -> None:
        """Display audit entries as a table.

        Args:
            entries: Entries to show, oldest first.
        """
        if not entries:
            self.console.print("[yellow]Audit log is empty[/yellow]")
            return

        table = Table(title="Audit Log")
        table.add_column("Timestamp", style="cyan")
        table.add_column("Action")
        table.add_column("Status")

        for entry in entries:
            style = "green" if entry.status == "Success" else None
            table.add_row(
                entry.timestamp.isoformat(timespec="seconds"),
                entry.action,
                escape(entry.status),
                style=style,
            )

        self.console.print(table)

    def show_settings(self, settings: Settings) -> None:
        """Display effective configuration."""
        self.console.print("\n[bold]Configuration[/bold]")
        self.console.print(f"  Audit log: {escape(str(settings.log_file))}")
        self.console.print(f"  Text encoding: {settings.encoding}")
        self.console.print(f"  Log level: {settings.log_level}")
