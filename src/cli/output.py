"""Terminal output handling using Rich library.

This module provides the OutputHandler class for all CLI terminal output:
colored messages, a spinner for remote lookups, the candidate listing and the
yes/no confirmation prompt. Supports verbosity levels and --no-color flag.
"""

from typing import Iterator, List
from contextlib import contextmanager

from rich.console import Console
from rich.markup import escape
from rich.spinner import Spinner
from rich.live import Live

from src.hub_client.models import ContentItem


class OutputHandler:
    """Handles all terminal output using Rich library.

    Attributes:
        verbosity: Verbosity level (0=summary, 1 or more shows info messages)
        console: Rich Console instance for output

    Example:
        >>> handler = OutputHandler(verbosity=1, no_color=False)
        >>> handler.warning("Folder is specified, ignoring repository ID")
        >>> if handler.confirm("Continue? (y/n)"):
        ...     pass
    """

    def __init__(self, verbosity: int = 0, no_color: bool = False):
        """Initialize output handler.

        Args:
            verbosity: Verbosity level (0=summary, 1 or more shows info messages)
            no_color: Disable color output if True
        """
        self.verbosity = verbosity
        self.console = Console(
            no_color=no_color,
            highlight=False,
        )

    def error(self, message: str) -> None:
        """Display error message in red."""
        self.console.print(f"[red]✗[/red] {escape(message)}", style="red")

    def warning(self, message: str) -> None:
        """Display warning message in yellow."""
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}", style="yellow")

    def info(self, message: str) -> None:
        """Display info message (only if verbosity >= 1)."""
        if self.verbosity >= 1:
            self.console.print(escape(message))

    def print(self, message: str) -> None:
        """Display message without formatting."""
        self.console.print(escape(message))

    @contextmanager
    def spinner(self, message: str) -> Iterator[None]:
        """Display spinner for single operations.

        Example:
            >>> with handler.spinner("Locating archived content items..."):
            ...     items = locator.locate()
        """
        spinner = Spinner("dots", text=message)
        with Live(spinner, console=self.console, refresh_per_second=10, transient=True):
            yield

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question.

        Only an answer starting with "y" (any case) counts as yes; anything
        else, including an empty answer or end of input, is a no.
        """
        try:
            answer = self.console.input(f"{escape(question)} ")
        except EOFError:
            return False
        answer = answer.strip()
        return len(answer) > 0 and answer[0].lower() == 'y'

    def print_candidates(self, items: List[ContentItem], heading: str) -> None:
        """List the items a run is about to modify, followed by the total."""
        self.console.print(escape(heading))
        for item in items:
            self.console.print(f" {escape(item.label)} ({escape(item.id)})")
        self.console.print(f"Total: {len(items)}")

    def print_removal_summary(
        self,
        field_name: str,
        success_count: int,
        failure_count: int = 0,
        aborted: bool = False,
    ) -> None:
        """Display the outcome of a removal run.

        Args:
            field_name: Human name of the removed field (e.g. "delivery key")
            success_count: Items successfully processed
            failure_count: Items that failed
            aborted: Whether a failure stopped the batch
        """
        self.console.print(
            f"Removed archived {escape(field_name)} from {success_count} content items."
        )
        if aborted:
            self.console.print("[red]Processing stopped after a failure.[/red]")
        elif failure_count > 0:
            self.console.print(f"[yellow]{failure_count} content item(s) failed.[/yellow]")
