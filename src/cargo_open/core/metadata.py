from __future__ import annotations

import dataclasses
import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol

from .errors import MetadataError
from .logging_utils import log_event

logger = logging.getLogger("cargo_open.core.metadata")

RunFn = Callable[..., subprocess.CompletedProcess[str]]

METADATA_FORMAT_VERSION = "1"


@dataclasses.dataclass(frozen=True)
class Package:
    name: str
    manifest_path: Path
    version: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Package":
        name = payload.get("name")
        manifest_path = payload.get("manifest_path")
        if not isinstance(name, str) or not isinstance(manifest_path, str):
            raise ValueError("package entry requires string 'name' and 'manifest_path'")
        version = payload.get("version")
        package_id = payload.get("id")
        return cls(
            name=name,
            manifest_path=Path(manifest_path),
            version=version if isinstance(version, str) else None,
            id=package_id if isinstance(package_id, str) else None,
        )


@dataclasses.dataclass(frozen=True)
class WorkspaceMetadata:
    packages: tuple[Package, ...]
    workspace_root: Optional[Path] = None
    target_directory: Optional[Path] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "WorkspaceMetadata":
        raw_packages = payload.get("packages")
        if not isinstance(raw_packages, list):
            raise ValueError("expected a 'packages' list")
        packages = []
        for index, entry in enumerate(raw_packages):
            if not isinstance(entry, Mapping):
                raise ValueError(f"packages[{index}] is not an object")
            try:
                packages.append(Package.from_dict(entry))
            except ValueError as exc:
                raise ValueError(f"packages[{index}]: {exc}") from exc
        return cls(
            packages=tuple(packages),
            workspace_root=_optional_path(payload.get("workspace_root")),
            target_directory=_optional_path(payload.get("target_directory")),
        )


def _optional_path(value: Any) -> Optional[Path]:
    if isinstance(value, str) and value:
        return Path(value)
    return None


class MetadataProvider(Protocol):
    def fetch(self, manifest_path: Optional[Path] = None) -> WorkspaceMetadata: ...


def build_metadata_command(
    cargo_binary: str, manifest_path: Optional[Path] = None
) -> list[str]:
    command = [cargo_binary, "metadata", "--format-version", METADATA_FORMAT_VERSION]
    if manifest_path is not None:
        command.extend(["--manifest-path", str(manifest_path)])
    return command


def parse_metadata_output(stdout: str) -> WorkspaceMetadata:
    """Decode `cargo metadata` stdout, skipping any non-JSON lines around it."""
    document = next(
        (line for line in stdout.splitlines() if line.startswith("{")), None
    )
    if document is None:
        raise MetadataError("output did not contain a valid JSON document")
    try:
        payload = json.loads(document)
    except ValueError as exc:
        raise MetadataError(f"invalid metadata output: {exc}") from exc
    if not isinstance(payload, dict):
        raise MetadataError("invalid metadata output: expected a JSON object")
    try:
        return WorkspaceMetadata.from_dict(payload)
    except ValueError as exc:
        raise MetadataError(f"invalid metadata output: {exc}") from exc


class CargoMetadataProvider:
    """Runs `cargo metadata` and decodes its JSON description of the workspace."""

    def __init__(
        self, cargo_binary: str = "cargo", *, run_fn: RunFn = subprocess.run
    ) -> None:
        self._cargo_binary = cargo_binary
        self._run_fn = run_fn

    def fetch(self, manifest_path: Optional[Path] = None) -> WorkspaceMetadata:
        command = build_metadata_command(self._cargo_binary, manifest_path)
        log_event(logger, logging.DEBUG, "metadata.exec", command=command)
        try:
            proc = self._run_fn(
                command,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as exc:
            raise MetadataError(f"failed to start `cargo metadata`: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise MetadataError(f"invalid metadata output: {exc}") from exc
        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip()
            raise MetadataError(f"`cargo metadata` exited with an error: {stderr}")
        metadata = parse_metadata_output(proc.stdout or "")
        log_event(
            logger,
            logging.DEBUG,
            "metadata.loaded",
            packages=len(metadata.packages),
            workspace_root=metadata.workspace_root,
        )
        return metadata
