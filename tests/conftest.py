"""Shared test fixtures."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from treedisk.attributes import FileAttributeStore
from treedisk.config import DiskSettings
from treedisk.disk import Disk


@pytest.fixture
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Override home directory for testing."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    return tmp_path


@pytest.fixture
def attributes() -> FileAttributeStore:
    """Create a real attribute store."""
    return FileAttributeStore()


@pytest.fixture
def disk() -> Disk:
    """Create a Disk with default settings."""
    return Disk.create()


# ============================================================================
# Directory Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small tree.

    source/
        f1.txt
        f2.txt
        sub/
            inner.txt
            empty/
    """
    root = tmp_path / "source"
    (root / "sub" / "empty").mkdir(parents=True)
    (root / "f1.txt").write_text("one")
    (root / "f2.txt").write_text("two")
    (root / "sub" / "inner.txt").write_text("inner")
    return root


@pytest.fixture
def read_only_file(tmp_path: Path) -> Iterator[Path]:
    """Create a file with every write bit cleared."""
    path = tmp_path / "locked.txt"
    path.write_text("locked")
    mode = stat.S_IMODE(path.stat().st_mode)
    os.chmod(path, mode & ~(stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH))
    yield path
    if path.exists():
        os.chmod(path, stat.S_IMODE(path.stat().st_mode) | stat.S_IWUSR)


# ============================================================================
# Mock Fixtures
# ============================================================================


@pytest.fixture
def mock_disk() -> MagicMock:
    """Create a mock disk for CLI tests.

    The mock tracks all operations without touching real files.
    """
    disk = MagicMock()
    disk.is_file.return_value = False
    disk.list_files_recursively.return_value = []
    disk.list_child_directories.return_value = []
    disk.read_all_text.return_value = ""
    return disk


@pytest.fixture
def mock_app_context(mock_disk: MagicMock):
    """Create an AppContext wired to the mock disk."""
    from treedisk.context import AppContext

    return AppContext(settings=DiskSettings(), disk=mock_disk)
