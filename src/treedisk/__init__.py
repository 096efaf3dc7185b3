"""Hierarchical filesystem facade for tree-pruning and deployment tooling."""

__version__ = "0.1.0"

# Export the facade, protocol interfaces and error types for callers
from treedisk.disk import Disk
from treedisk.errors import (
    AttributeAccessError,
    DiskError,
    DiskIOError,
    EntityNotFoundError,
    SourceNotFoundError,
)
from treedisk.protocols import AttributeStore, DiskOperations
from treedisk.types import EntityKind

__all__ = [
    "__version__",
    "AttributeAccessError",
    "AttributeStore",
    "Disk",
    "DiskError",
    "DiskIOError",
    "DiskOperations",
    "EntityKind",
    "EntityNotFoundError",
    "SourceNotFoundError",
]
