"""CLI commands using Typer."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from treedisk.context import AppContext

import typer
from rich.console import Console

from treedisk import __version__
from treedisk.config import ConfigError
from treedisk.console import DiskConsole, configure_logging
from treedisk.context import create_context
from treedisk.errors import DiskError

app = typer.Typer(
    name="treedisk",
    help="Hierarchical filesystem operations for tree-pruning and deployment tools",
    no_args_is_help=True,
)

console = Console()
output = DiskConsole(console)

_config_path: Path | None = None


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"treedisk v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each filesystem step")
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="Settings file (YAML)")
    ] = None,
) -> None:
    """Hierarchical filesystem operations for tree-pruning and deployment tools."""
    global _config_path
    _config_path = config
    configure_logging(verbose)


def _load_context(context: AppContext | None) -> AppContext:
    """Return the injected context or build the production one."""
    if context is not None:
        return context
    try:
        return create_context(_config_path)
    except ConfigError as e:
        output.show_error(str(e))
        raise typer.Exit(1) from e


def _fail(error: DiskError) -> typer.Exit:
    """Report a disk error and build the exit to raise."""
    output.show_error(f"{error} [stage: {error.stage}]" if error.stage else str(error))
    return typer.Exit(1)


@app.command("classify")
def classify_cmd(
    path: Annotated[str, typer.Argument(help="Path to classify")],
    _context=None,
) -> None:
    """Show whether a path is a file or a folder."""
    ctx = _load_context(_context)
    kind = ctx.disk.get_entity_type(path)

    try:
        read_only = ctx.disk.is_file_read_only(path) if ctx.disk.is_file(path) else None
    except DiskError as e:
        raise _fail(e) from e

    output.show_entity(path, kind, read_only)


@app.command("copy")
def copy_cmd(
    source: Annotated[str, typer.Argument(help="Folder to copy from")],
    destination: Annotated[str, typer.Argument(help="Folder to copy into")],
    _context=None,
) -> None:
    """Copy a folder tree, overwriting existing files."""
    ctx = _load_context(_context)

    try:
        ctx.disk.copy_folder(source, destination)
    except DiskError as e:
        raise _fail(e) from e

    output.show_success(f"Copied '{source}' to '{destination}'")


@app.command("delete")
def delete_cmd(
    paths: Annotated[list[str], typer.Argument(help="Files or folders to delete, in order")],
    _context=None,
) -> None:
    """Delete files or folder trees, stopping at the first failure."""
    ctx = _load_context(_context)

    try:
        ctx.disk.delete_files_or_directories(paths)
    except DiskError as e:
        raise _fail(e) from e

    noun = "entity" if len(paths) == 1 else "entities"
    output.show_success(f"Deleted {len(paths)} {noun}")


@app.command("list")
def list_cmd(
    directory: Annotated[str, typer.Argument(help="Directory to enumerate")],
    dirs: Annotated[
        bool, typer.Option("--dirs", "-d", help="List immediate subdirectories only")
    ] = False,
    _context=None,
) -> None:
    """List every file under a directory.

    Empty directories are printed with a trailing separator.
    """
    ctx = _load_context(_context)

    try:
        if dirs:
            paths = ctx.disk.list_child_directories(directory)
        else:
            paths = ctx.disk.list_files_recursively(directory)
    except DiskError as e:
        raise _fail(e) from e

    output.show_paths(paths)


@app.command("cat")
def cat_cmd(
    path: Annotated[str, typer.Argument(help="File to read")],
    _context=None,
) -> None:
    """Print the contents of a text file."""
    ctx = _load_context(_context)

    try:
        text = ctx.disk.read_all_text(path)
    except DiskError as e:
        raise _fail(e) from e

    console.print(text, end="", markup=False, highlight=False, soft_wrap=True)


@app.command("write")
def write_cmd(
    path: Annotated[str, typer.Argument(help="File to write")],
    text: Annotated[
        str | None, typer.Option("--text", "-t", help="Contents (read from stdin when omitted)")
    ] = None,
    _context=None,
) -> None:
    """Replace a file's contents, clearing its read-only flag first."""
    ctx = _load_context(_context)
    contents = text if text is not None else sys.stdin.read()

    try:
        ctx.disk.write_text_to_file(path, contents)
    except DiskError as e:
        raise _fail(e) from e

    output.show_success(f"Wrote {len(contents)} characters to '{path}'")


@app.command("readonly")
def readonly_cmd(
    path: Annotated[str, typer.Argument(help="File to inspect or change")],
    flag: Annotated[
        bool | None, typer.Option("--set/--clear", help="Set or clear the read-only flag")
    ] = None,
    _context=None,
) -> None:
    """Show, set or clear a file's read-only flag."""
    ctx = _load_context(_context)

    try:
        if flag is not None:
            ctx.disk.set_file_read_only(path, flag)
        read_only = ctx.disk.is_file_read_only(path)
    except DiskError as e:
        raise _fail(e) from e

    state = "read-only" if read_only else "writable"
    output.show_success(f"'{path}' is {state}")


@app.command("where")
def where_cmd(_context=None) -> None:
    """Show the directory treedisk is installed in."""
    ctx = _load_context(_context)
    console.print(ctx.disk.program_directory, markup=False, highlight=False)


if __name__ == "__main__":
    app()
