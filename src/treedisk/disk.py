"""Disk facade over the path, file and attribute operations."""

from __future__ import annotations

import os
from collections.abc import Iterable

from treedisk import classifier, textio, tree
from treedisk.attributes import FileAttributeStore
from treedisk.config import DiskSettings
from treedisk.protocols import AttributeStore
from treedisk.types import EntityKind, PathArg


class Disk:
    """Represents a disk. A facade over the path and file APIs.

    Holds no state besides its settings; every call reads the live
    filesystem. Satisfies the DiskOperations protocol structurally.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, settings: DiskSettings, attributes: AttributeStore) -> None:
        """Initialize the disk with required dependencies.

        Args:
            settings: Facade settings.
            attributes: Attribute store for read-only and hidden checks.
        """
        self.settings = settings
        self.attributes = attributes

    @classmethod
    def create(
        cls,
        settings: DiskSettings | None = None,
        attributes: AttributeStore | None = None,
    ) -> Disk:
        """Factory method for production instantiation.

        Args:
            settings: Optional settings (defaults if not provided).
            attributes: Optional attribute store (created if not provided).

        Returns:
            Configured Disk instance.
        """
        return cls(
            settings=settings or DiskSettings(),
            attributes=attributes or FileAttributeStore(),
        )

    @property
    def program_directory(self) -> str:
        """Directory the treedisk package is installed in."""
        return os.path.dirname(os.path.abspath(__file__))

    def get_entity_type(self, path: PathArg) -> EntityKind:
        """Get the kind of entity at a path."""
        return classifier.classify(path)

    def is_folder(self, path: PathArg) -> bool:
        """Check if a path classifies as a folder."""
        return classifier.is_folder(path)

    def is_file(self, path: PathArg) -> bool:
        """Check if a path classifies as a file."""
        return classifier.is_file(path)

    def copy_folder(self, source: PathArg, destination: PathArg) -> None:
        """Copy a directory tree, overwriting existing files."""
        tree.copy_folder(source, destination, self.settings.sort_entries)

    def delete_file_or_directory(self, path: PathArg) -> None:
        """Delete a file, link or directory tree."""
        tree.delete_file_or_directory(path, self.attributes)

    def delete_files_or_directories(self, paths: Iterable[PathArg]) -> None:
        """Delete each path in order, stopping at the first failure."""
        tree.delete_files_or_directories(paths, self.attributes)

    def list_child_directories(self, directory: PathArg) -> list[str]:
        """List the immediate subdirectories of a directory."""
        return tree.list_child_directories(directory, self.settings.sort_entries)

    def list_files_recursively(self, directory: PathArg) -> list[str]:
        """List every file under a directory, with empty-directory sentinels."""
        return tree.list_files_recursively(
            directory,
            self.settings.sort_entries,
            self.settings.sentinel_separator,
        )

    def read_all_text(self, path: PathArg) -> str:
        """Read a whole text file."""
        return textio.read_all_text(path, self.settings.encoding)

    def write_text_to_file(self, path: PathArg, contents: str) -> None:
        """Replace a file's contents, clearing read-only first."""
        textio.write_text_to_file(path, contents, self.settings.encoding, self.attributes)

    def is_file_read_only(self, path: PathArg) -> bool:
        """Check whether a file is marked read-only."""
        return self.attributes.is_read_only(path)

    def set_file_read_only(self, path: PathArg, read_only: bool) -> None:
        """Set or clear a file's read-only flag."""
        self.attributes.set_read_only(path, read_only)
