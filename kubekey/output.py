"""
Output utility for the kubekey CLI with colors and verbosity control.

Uses the Rich library for formatted messages and tables.
"""

from enum import IntEnum
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text


class Verbosity(IntEnum):
    """Verbosity levels for output."""

    QUIET = 0  # Only errors and final results
    NORMAL = 1  # Standard output with colors
    VERBOSE = 2  # Detailed output


class OutputManager:
    """
    Centralized output manager for the kubekey CLI.

    Results (encoded keys, tables) are printed even in quiet mode; decorative
    messages are not.
    """

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, console: Optional[Console] = None):
        self.verbosity = verbosity
        self.console = console or Console()
        self.error_console = Console(stderr=True)

    def error(self, message: str, suggestion: Optional[str] = None) -> None:
        """Print an error message in red to stderr."""
        self.error_console.print(f"✗ {message}", style="red", markup=False, emoji=False)
        if suggestion and self.verbosity >= Verbosity.NORMAL:
            self.error_console.print(f"💡 {suggestion}", style="yellow", markup=False, emoji=False)

    def warning(self, message: str) -> None:
        """Print a warning message in yellow to stderr."""
        if self.verbosity != Verbosity.QUIET:
            self.error_console.print(f"⚠ {message}", style="yellow", markup=False, emoji=False)

    def info(self, message: str) -> None:
        """Print an info message in blue."""
        if self.verbosity >= Verbosity.NORMAL:
            self.console.print(f"ℹ {message}", style="blue", markup=False, emoji=False)

    def result(self, message: str) -> None:
        """Print a command result as plain text, regardless of verbosity."""
        self.console.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def verbose(self, message: str) -> None:
        """Print a verbose message (only shown in VERBOSE mode)."""
        if self.verbosity >= Verbosity.VERBOSE:
            self.console.print(message, style="dim", markup=False, emoji=False)

    def table(
        self,
        title: Optional[str],
        columns: List[str],
        rows: List[List[str]],
        show_header: bool = True,
    ) -> None:
        """Print a table, regardless of verbosity."""
        table = Table(title=title, show_header=show_header, box=box.ROUNDED)
        for col in columns:
            table.add_column(col)
        for row in rows:
            table.add_row(*[Text(cell) for cell in row])
        self.console.print(table)


# Global output manager instance
_output_manager: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """
    Get the global output manager instance.

    Returns:
        OutputManager instance
    """
    global _output_manager
    if _output_manager is None:
        _output_manager = OutputManager()
    return _output_manager


def set_output(manager: OutputManager) -> None:
    """Set the global output manager instance."""
    global _output_manager
    _output_manager = manager
