"""Tests for console output."""

from __future__ import annotations

from rich.console import Console

from treedisk.console import DiskConsole
from treedisk.types import EntityKind


class TestDiskConsole:
    """Tests for DiskConsole rendering."""

    def test_entity_path_is_not_markup(self) -> None:
        """Test bracketed names are printed literally in the entity table."""
        console = Console(record=True, width=120)
        output = DiskConsole(console)

        output.show_entity("[red]x", EntityKind.FILE, read_only=False)

        assert "[red]x" in console.export_text()

    def test_paths_printed_literally(self) -> None:
        """Test listed paths are printed without markup."""
        console = Console(record=True, width=120)
        output = DiskConsole(console)

        output.show_paths(["dir/[bold]name", "dir/empty/"])

        text = console.export_text()
        assert "dir/[bold]name" in text
        assert "dir/empty/" in text
