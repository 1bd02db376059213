"""Core pipeline: workspace metadata, package lookup, editor launch."""

from .errors import (
    CargoOpenError,
    EditorNotConfiguredError,
    MetadataError,
    PackageNotFoundError,
    PathResolutionError,
    SpawnError,
)
from .opener import OpenResult, open_package

__all__ = [
    "CargoOpenError",
    "EditorNotConfiguredError",
    "MetadataError",
    "OpenResult",
    "PackageNotFoundError",
    "PathResolutionError",
    "SpawnError",
    "open_package",
]
