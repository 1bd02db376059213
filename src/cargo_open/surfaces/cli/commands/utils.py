from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, NoReturn, Optional

import typer

from ....core.config import load_env, resolve_cargo_binary
from ....core.launcher import SubprocessLauncher
from ....core.metadata import CargoMetadataProvider

DISTRIBUTION_NAME = "cargo-open"


def get_cargo_open_version() -> str:
    import importlib.metadata

    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def raise_exit(message: str, *, cause: Optional[BaseException] = None) -> NoReturn:
    typer.echo(message, err=True)
    if cause is not None:
        raise typer.Exit(code=1) from cause
    raise typer.Exit(code=1)


def build_metadata_provider(env: Mapping[str, str]) -> CargoMetadataProvider:
    return CargoMetadataProvider(resolve_cargo_binary(env))


def build_launcher() -> SubprocessLauncher:
    return SubprocessLauncher()


def load_cli_env(manifest_path: Optional[Path]) -> dict[str, str]:
    root = manifest_path.parent if manifest_path is not None else Path.cwd()
    return load_env(root, os.environ)
