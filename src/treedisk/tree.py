"""Recursive directory operations: copy, delete and enumerate.

Every recursion level re-lists the live directory; nothing is cached.
None of the walks guard against symbolic-link cycles. The first failure
aborts the walk and leaves whatever was already done on disk.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable

from treedisk.attributes import FileAttributeStore
from treedisk.classifier import is_deletable_directory
from treedisk.errors import EntityNotFoundError, SourceNotFoundError, translate_os_error
from treedisk.protocols import AttributeStore
from treedisk.types import PathArg

logger = logging.getLogger(__name__)


def _scan(directory: PathArg, sort_entries: bool, stage: str) -> tuple[list[str], list[str]]:
    """List the direct files and subdirectories of ``directory``.

    Any entry that is not a directory counts as a file.

    Returns:
        Tuple of (file paths, subdirectory paths), joined onto ``directory``.
    """
    files: list[str] = []
    directories: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                joined = os.path.join(os.fspath(directory), entry.name)
                if entry.is_dir():
                    directories.append(joined)
                else:
                    files.append(joined)
    except OSError as e:
        raise translate_os_error(e, directory, stage) from e

    if sort_entries:
        files.sort()
        directories.sort()
    return files, directories


def copy_folder(source: PathArg, destination: PathArg, sort_entries: bool = True) -> None:
    """Copy a directory tree onto ``destination``, overwriting existing files.

    Files of each level are copied before descending into its
    subdirectories.

    Args:
        source: Existing folder to copy from.
        destination: Folder to copy into, created if absent.
        sort_entries: Visit entries of each level in name order.

    Raises:
        SourceNotFoundError: If ``source`` is not an existing folder.
        DiskIOError: If creating, listing or copying fails.
    """
    if not os.path.isdir(source):
        raise SourceNotFoundError(
            f"Cannot copy folder as the source folder '{os.fspath(source)}' does not exist.",
            source,
            "copy",
        )

    try:
        os.makedirs(destination, exist_ok=True)
    except OSError as e:
        raise translate_os_error(e, destination, "create-directory") from e

    files, directories = _scan(source, sort_entries, "copy")

    for each_file in files:
        target = os.path.join(os.fspath(destination), os.path.basename(each_file))
        logger.debug("Copying '%s' to '%s'", each_file, target)
        try:
            shutil.copy(each_file, target)
        except OSError as e:
            raise translate_os_error(e, each_file, "copy") from e

    for each_directory in directories:
        target = os.path.join(os.fspath(destination), os.path.basename(each_directory))
        copy_folder(each_directory, target, sort_entries)


def delete_file_or_directory(path: PathArg, attributes: AttributeStore | None = None) -> None:
    """Delete a file, or a directory with everything under it.

    Symbolic links are removed themselves, never their targets.
    Directories are removed as a whole. Files have their read-only flag
    cleared before removal.

    Args:
        path: Entity to delete.
        attributes: Attribute store used to clear the read-only flag.

    Raises:
        EntityNotFoundError: If nothing exists at ``path``.
        AttributeAccessError: If the read-only flag cannot be cleared.
        DiskIOError: If the removal itself fails.
    """
    attributes = attributes or FileAttributeStore()

    link = os.fspath(path).rstrip(os.sep + (os.altsep or ""))
    if link and os.path.islink(link):
        logger.debug("Deleting link '%s'", link)
        try:
            os.unlink(link)
        except OSError as e:
            raise translate_os_error(e, link, "delete") from e
        return

    if is_deletable_directory(path, attributes):
        logger.debug("Deleting directory tree '%s'", os.fspath(path))
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise translate_os_error(e, path, "delete") from e
        return

    if not os.path.lexists(path):
        raise EntityNotFoundError(
            f"Cannot delete '{os.fspath(path)}' as nothing exists there.", path, "delete"
        )

    if attributes.is_read_only(path):
        attributes.set_read_only(path, False)

    logger.debug("Deleting file '%s'", os.fspath(path))
    try:
        os.remove(path)
    except OSError as e:
        raise translate_os_error(e, path, "delete") from e


def delete_files_or_directories(
    paths: Iterable[PathArg], attributes: AttributeStore | None = None
) -> None:
    """Delete each path in order, stopping at the first failure."""
    attributes = attributes or FileAttributeStore()
    for each_path in paths:
        delete_file_or_directory(each_path, attributes)


def list_child_directories(directory: PathArg, sort_entries: bool = True) -> list[str]:
    """List the immediate subdirectories of ``directory``."""
    _, directories = _scan(directory, sort_entries, "list")
    return directories


def list_files_recursively(
    directory: PathArg,
    sort_entries: bool = True,
    separator: str | None = None,
) -> list[str]:
    """Build a list of all the files under ``directory``.

    A directory with neither files nor subdirectories is reported as a
    sentinel entry: its own path with a trailing separator. Direct files
    come first, then the sentinel, then each subdirectory's results.
    Each level is sorted by name unless ``sort_entries`` is false, so
    results do not depend on the filesystem's listing order.

    Args:
        directory: Directory to enumerate.
        sort_entries: Visit entries of each level in name order. When false,
            entries come in raw directory-listing order.
        separator: Separator appended to sentinels. Defaults to ``os.sep``.

    Returns:
        File paths and empty-directory sentinels.

    Raises:
        EntityNotFoundError: If ``directory`` does not exist.
        DiskIOError: If a directory cannot be listed.
    """
    files, directories = _scan(directory, sort_entries, "list")
    results = list(files)

    if not files and not directories:
        results.append(os.fspath(directory) + (separator or os.sep))

    for each_directory in directories:
        results.extend(list_files_recursively(each_directory, sort_entries, separator))

    return results
