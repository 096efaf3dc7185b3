"""Shared data types for treedisk."""

from __future__ import annotations

import os
from enum import Enum
from typing import Union

__all__ = ["EntityKind", "PathArg"]

# Anything the os.path functions accept.
PathArg = Union[str, os.PathLike]


class EntityKind(str, Enum):
    """Kind of entity a path denotes.

    Anything that is not an existing file is reported as ``FOLDER``,
    including paths where nothing exists at all.
    """

    FILE = "file"
    FOLDER = "folder"
