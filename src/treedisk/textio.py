"""Whole-file text read and write."""

from __future__ import annotations

import logging
import os

from treedisk.attributes import FileAttributeStore
from treedisk.errors import DiskIOError, translate_os_error
from treedisk.protocols import AttributeStore
from treedisk.types import PathArg

logger = logging.getLogger(__name__)


def read_all_text(path: PathArg, encoding: str | None = None) -> str:
    """Read a text file from disk.

    Line endings are returned exactly as stored.

    Args:
        path: Path to the file to read.
        encoding: Text encoding. Defaults to the platform default.

    Returns:
        The contents of the file.

    Raises:
        EntityNotFoundError: If the file does not exist.
        DiskIOError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, encoding=encoding, newline="") as handle:
            return handle.read()
    except OSError as e:
        raise translate_os_error(e, path, "read") from e
    except UnicodeDecodeError as e:
        raise DiskIOError(f"Cannot decode '{os.fspath(path)}': {e.reason}", path, "read") from e


def write_text_to_file(
    path: PathArg,
    contents: str,
    encoding: str | None = None,
    attributes: AttributeStore | None = None,
) -> None:
    """Write a text file to disk, replacing any previous contents.

    A read-only flag on an existing file is cleared before writing.
    The file is truncated in place, so a failure mid-write leaves it
    partially written.

    Args:
        path: Path of the file to write to.
        contents: The contents to write.
        encoding: Text encoding. Defaults to the platform default.
        attributes: Attribute store used to clear the read-only flag.

    Raises:
        AttributeAccessError: If the read-only flag cannot be cleared.
        DiskIOError: If the file cannot be written.
    """
    attributes = attributes or FileAttributeStore()
    if os.path.isfile(path):
        attributes.set_read_only(path, False)

    logger.debug("Writing %d characters to '%s'", len(contents), os.fspath(path))
    try:
        with open(path, "w", encoding=encoding, newline="") as handle:
            handle.write(contents)
    except OSError as e:
        raise translate_os_error(e, path, "write") from e
