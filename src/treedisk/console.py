"""Console output for CLI commands."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from treedisk.types import EntityKind


class DiskConsole:
    """Text output for treedisk commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize console output.

        Args:
            console: Rich console to print to. Created if not provided.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Display success message."""
        self.console.print(f"[green]✓[/green] {message}")

    def show_error(self, message: str) -> None:
        """Display error message."""
        self.console.print(f"[red]✗[/red] {message}")

    def show_paths(self, paths: list[str]) -> None:
        """Print one path per line, without markup or wrapping."""
        for each_path in paths:
            self.console.print(each_path, markup=False, highlight=False, soft_wrap=True)

    def show_entity(self, path: str, kind: EntityKind, read_only: bool | None = None) -> None:
        """Display the classification of a path."""
        table = Table(show_header=True)
        table.add_column("Path", style="cyan")
        table.add_column("Kind")
        table.add_column("Read-only")
        flag = "-" if read_only is None else ("yes" if read_only else "no")
        table.add_row(Text(path), kind.value, flag)
        self.console.print(table)


def configure_logging(verbose: bool) -> None:
    """Route library log records to the console when verbose."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
