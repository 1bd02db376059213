from __future__ import annotations

import logging
from pathlib import Path

from .errors import PackageNotFoundError, PathResolutionError
from .logging_utils import log_event
from .metadata import Package, WorkspaceMetadata

logger = logging.getLogger("cargo_open.core.packages")


def find_package(package_name: str, metadata: WorkspaceMetadata) -> Package:
    """Return the first package named exactly ``package_name``.

    Matching is case-sensitive. When the workspace lists the same name more
    than once, the first entry in provider order wins; which one that is
    depends on the provider and is not guaranteed.
    """
    for package in metadata.packages:
        if package.name == package_name:
            log_event(
                logger,
                logging.DEBUG,
                "package.resolved",
                name=package.name,
                version=package.version,
                manifest_path=package.manifest_path,
            )
            return package
    raise PackageNotFoundError(package_name)


def package_root(package: Package) -> Path:
    manifest_path = package.manifest_path
    parent = manifest_path.parent
    # Bare filenames have "." as parent; the root is its own parent.
    if parent == manifest_path or str(parent) == ".":
        raise PathResolutionError(
            f"Path error: {manifest_path} has no parent directory"
        )
    return parent
