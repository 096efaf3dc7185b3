"""Read-only and hidden attribute access for single files.

The read-only flag is mapped onto the write permission bits of the file
mode. On Windows ``os.chmod`` toggles FILE_ATTRIBUTE_READONLY from the
same bits, so one code path serves both platforms.
"""

from __future__ import annotations

import logging
import os
import stat

from treedisk.errors import AttributeAccessError, EntityNotFoundError
from treedisk.types import PathArg

logger = logging.getLogger(__name__)

WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH

# Not defined in the stat module on every platform.
FILE_ATTRIBUTE_HIDDEN = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)


class FileAttributeStore:
    """Reads and toggles the read-only flag of a file.

    Satisfies the AttributeStore protocol structurally.
    """

    def is_read_only(self, path: PathArg) -> bool:
        """Check whether the file at ``path`` is marked read-only.

        Args:
            path: Path to the file.

        Returns:
            True if the owner write bit is cleared.

        Raises:
            EntityNotFoundError: If nothing exists at ``path``.
            AttributeAccessError: If the attributes cannot be read.
        """
        return not self._mode(path) & stat.S_IWUSR

    def set_read_only(self, path: PathArg, read_only: bool) -> None:
        """Set or clear the read-only flag, leaving every other bit intact.

        Args:
            path: Path to the file.
            read_only: Target state of the flag.

        Raises:
            EntityNotFoundError: If nothing exists at ``path``.
            AttributeAccessError: If the attributes cannot be changed.
        """
        mode = self._mode(path)
        if read_only:
            new_mode = mode & ~WRITE_BITS
        else:
            new_mode = mode | stat.S_IWUSR

        if new_mode == mode:
            return

        logger.debug("Setting read-only=%s on '%s'", read_only, os.fspath(path))
        try:
            os.chmod(path, new_mode)
        except FileNotFoundError as e:
            raise EntityNotFoundError(
                f"Cannot change attributes, nothing exists at '{os.fspath(path)}'",
                path,
                "set-attributes",
            ) from e
        except OSError as e:
            raise AttributeAccessError(
                f"Cannot change attributes of '{os.fspath(path)}': {e.strerror or e}",
                path,
                "set-attributes",
            ) from e

    def is_hidden(self, path: PathArg) -> bool:
        """Check whether ``path`` is a hidden entity.

        Uses FILE_ATTRIBUTE_HIDDEN where the platform reports file attributes,
        otherwise the leading-dot naming convention.
        """
        if os.name == "nt":
            attributes = self._stat(path).st_file_attributes  # type: ignore[attr-defined]
            return bool(attributes & FILE_ATTRIBUTE_HIDDEN)
        name = os.path.basename(os.fspath(path).rstrip(os.sep + (os.altsep or "")))
        return name.startswith(".") and name not in (".", "..")

    def _mode(self, path: PathArg) -> int:
        return stat.S_IMODE(self._stat(path).st_mode)

    def _stat(self, path: PathArg) -> os.stat_result:
        try:
            return os.stat(path)
        except FileNotFoundError as e:
            raise EntityNotFoundError(
                f"Cannot read attributes, nothing exists at '{os.fspath(path)}'",
                path,
                "get-attributes",
            ) from e
        except OSError as e:
            raise AttributeAccessError(
                f"Cannot read attributes of '{os.fspath(path)}': {e.strerror or e}",
                path,
                "get-attributes",
            ) from e
