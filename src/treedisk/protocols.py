"""Protocol definitions for the disk abstractions.

Callers type their dependencies against these Protocols instead of the
concrete classes, so test doubles can be substituted without inheritance.

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from treedisk.types import EntityKind, PathArg


@runtime_checkable
class AttributeStore(Protocol):
    """Protocol for per-file attribute access.

    Only the read-only bit is writable; hidden is read for deletion routing.
    """

    def is_read_only(self, path: PathArg) -> bool:
        """Check whether a file is marked read-only.

        Args:
            path: Path to the file.

        Returns:
            True if the read-only flag is set.

        Raises:
            EntityNotFoundError: If nothing exists at the path.
            AttributeAccessError: If the attributes cannot be read.
        """
        ...

    def set_read_only(self, path: PathArg, read_only: bool) -> None:
        """Set or clear the read-only flag without touching other attributes.

        Args:
            path: Path to the file.
            read_only: Target state of the flag.

        Raises:
            EntityNotFoundError: If nothing exists at the path.
            AttributeAccessError: If the attributes cannot be changed.
        """
        ...

    def is_hidden(self, path: PathArg) -> bool:
        """Check whether an entity is hidden.

        Args:
            path: Path to the entity.

        Returns:
            True if the entity is hidden.
        """
        ...


@runtime_checkable
class DiskOperations(Protocol):
    """Protocol for the disk facade.

    Abstracts hierarchical filesystem access for higher-level tooling.
    """

    @property
    def program_directory(self) -> str:
        """Directory the package itself is installed in."""
        ...

    def get_entity_type(self, path: PathArg) -> EntityKind:
        """Get the kind of entity at a path.

        Args:
            path: The path to the item on disk.

        Returns:
            ``EntityKind.FILE`` for an existing file, ``EntityKind.FOLDER``
            otherwise.
        """
        ...

    def is_folder(self, path: PathArg) -> bool:
        """Check if a path classifies as a folder."""
        ...

    def is_file(self, path: PathArg) -> bool:
        """Check if a path classifies as a file."""
        ...

    def copy_folder(self, source: PathArg, destination: PathArg) -> None:
        """Copy a directory tree, overwriting existing files.

        Args:
            source: Existing folder to copy from.
            destination: Folder to copy into.

        Raises:
            SourceNotFoundError: If the source folder does not exist.
        """
        ...

    def delete_file_or_directory(self, path: PathArg) -> None:
        """Delete a file or a directory tree.

        Args:
            path: Entity to delete.

        Raises:
            EntityNotFoundError: If nothing exists at the path.
        """
        ...

    def delete_files_or_directories(self, paths: Iterable[PathArg]) -> None:
        """Delete each path in order, stopping at the first failure.

        Args:
            paths: Entities to delete.
        """
        ...

    def list_child_directories(self, directory: PathArg) -> list[str]:
        """List the immediate subdirectories of a directory.

        Args:
            directory: The parent directory.

        Returns:
            Paths of the child directories.
        """
        ...

    def list_files_recursively(self, directory: PathArg) -> list[str]:
        """List every file under a directory, with empty-directory sentinels.

        Args:
            directory: The parent directory.

        Returns:
            File paths, plus a trailing-separator entry per empty directory.
        """
        ...

    def read_all_text(self, path: PathArg) -> str:
        """Read a whole text file.

        Args:
            path: Path to the file.

        Returns:
            File content as string.

        Raises:
            EntityNotFoundError: If the file does not exist.
        """
        ...

    def write_text_to_file(self, path: PathArg, contents: str) -> None:
        """Replace a file's contents, clearing read-only first.

        Args:
            path: Path to the file.
            contents: Content to write.
        """
        ...

    def is_file_read_only(self, path: PathArg) -> bool:
        """Check whether a file is marked read-only."""
        ...

    def set_file_read_only(self, path: PathArg, read_only: bool) -> None:
        """Set or clear a file's read-only flag."""
        ...
