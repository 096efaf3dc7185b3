"""Error types raised by disk operations."""

from __future__ import annotations

import os

__all__ = [
    "AttributeAccessError",
    "DiskError",
    "DiskIOError",
    "EntityNotFoundError",
    "SourceNotFoundError",
    "translate_os_error",
]


class DiskError(Exception):
    """Base error for disk operations.

    Attributes:
        path: The entity the failing step was working on.
        stage: Name of the step that failed, e.g. ``"copy"`` or ``"delete"``.
    """

    def __init__(self, message: str, path: str | os.PathLike[str] = "", stage: str = "") -> None:
        super().__init__(message)
        self.path = os.fspath(path)
        self.stage = stage


class SourceNotFoundError(DiskError):
    """Copy requested from a source folder that does not exist."""

    pass


class EntityNotFoundError(DiskError):
    """Nothing exists at the targeted path."""

    pass


class AttributeAccessError(DiskError):
    """The read-only bit could not be read or written."""

    pass


class DiskIOError(DiskError):
    """Underlying I/O failure during copy, read, write, list or delete."""

    pass


def translate_os_error(exc: OSError, path: str | os.PathLike[str], stage: str) -> DiskError:
    """Map an ``OSError`` onto the disk error taxonomy.

    Args:
        exc: The error raised by the OS call.
        path: Path the failing call was working on.
        stage: Name of the failing step.

    Returns:
        ``EntityNotFoundError`` for missing paths, ``DiskIOError`` otherwise.
    """
    target = os.fspath(path)
    if isinstance(exc, FileNotFoundError):
        return EntityNotFoundError(f"{stage} failed, nothing exists at '{target}'", target, stage)
    return DiskIOError(f"{stage} failed for '{target}': {exc.strerror or exc}", target, stage)
