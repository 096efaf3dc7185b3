"""Classification of paths into files and folders."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from treedisk.types import EntityKind, PathArg

if TYPE_CHECKING:
    from treedisk.protocols import AttributeStore


def classify(path: PathArg) -> EntityKind:
    """Get the kind of entity at ``path``.

    Only an existing file is reported as ``FILE``. Directories, and paths
    where nothing exists at all, are reported as ``FOLDER``.
    """
    if os.path.isfile(path):
        return EntityKind.FILE
    return EntityKind.FOLDER


def is_folder(path: PathArg) -> bool:
    """Check if ``path`` classifies as a folder."""
    return classify(path) is EntityKind.FOLDER


def is_file(path: PathArg) -> bool:
    """Check if ``path`` classifies as a file."""
    return classify(path) is EntityKind.FILE


def has_trailing_separator(path: PathArg) -> bool:
    """Check if the path string ends with a directory separator."""
    target = os.fspath(path)
    return target.endswith(os.sep) or bool(os.altsep and target.endswith(os.altsep))


def is_deletable_directory(path: PathArg, attributes: AttributeStore | None = None) -> bool:
    """Decide whether ``path`` is deleted as a directory tree.

    A trailing separator marks directory intent regardless of what is on
    disk. Otherwise the path must exist, be a directory and not be hidden;
    hidden directories are routed to file deletion.

    Args:
        path: Path to check.
        attributes: Attribute store used for the hidden check.

    Returns:
        True if the path should be removed as a directory tree.
    """
    if has_trailing_separator(path):
        return True

    if not os.path.isdir(path):
        return False

    if attributes is None:
        from treedisk.attributes import FileAttributeStore

        attributes = FileAttributeStore()
    return not attributes.is_hidden(path)
