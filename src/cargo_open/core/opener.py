from __future__ import annotations

import dataclasses
import logging
from pathlib import Path
from typing import Mapping, Optional

from .config import resolve_editor
from .launcher import ProcessLauncher
from .logging_utils import log_event
from .metadata import MetadataProvider, Package
from .packages import find_package, package_root

logger = logging.getLogger("cargo_open.core.opener")


@dataclasses.dataclass(frozen=True)
class OpenResult:
    package: Package
    package_path: Path
    editor: str
    returncode: int


def open_package(
    package_name: str,
    *,
    manifest_path: Optional[Path],
    metadata_provider: MetadataProvider,
    launcher: ProcessLauncher,
    env: Mapping[str, str],
) -> OpenResult:
    """Open the source directory of ``package_name`` in the configured editor.

    Steps run strictly in order (metadata, package lookup, package root,
    editor, launch) and the first failure propagates; nothing after it runs.
    A non-zero editor exit status is returned in the result, not raised.
    """
    metadata = metadata_provider.fetch(manifest_path)
    package = find_package(package_name, metadata)
    package_path = package_root(package)
    editor = resolve_editor(env)
    log_event(logger, logging.DEBUG, "editor.resolved", editor=editor)
    returncode = launcher.launch(editor, package_path)
    return OpenResult(
        package=package,
        package_path=package_path,
        editor=editor,
        returncode=returncode,
    )
