"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

The disk is typed using the DiskOperations Protocol rather than the concrete
Disk class, so test doubles can be injected without inheritance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from treedisk.config import DiskSettings, load_settings
from treedisk.protocols import DiskOperations


def _default_disk() -> DiskOperations:
    """Create the default disk implementation."""
    from treedisk.disk import Disk
    return Disk.create()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for the services used by CLI commands.
    """

    settings: DiskSettings = field(default_factory=DiskSettings)
    disk: DiskOperations = field(default_factory=_default_disk)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_path: Override settings file (for testing).

    Returns:
        Configured AppContext with all dependencies.
    """
    from treedisk.disk import Disk

    settings = load_settings(config_path)
    disk = Disk.create(settings=settings)

    return AppContext(settings=settings, disk=disk)
