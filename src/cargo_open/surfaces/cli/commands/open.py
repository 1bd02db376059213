from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, Optional

import typer

from ....core.errors import CargoOpenError
from ....core.launcher import ProcessLauncher
from ....core.metadata import MetadataProvider
from ....core.opener import open_package


def register_open_commands(
    app: typer.Typer,
    *,
    raise_exit: Callable,
    build_metadata_provider: Callable[[Mapping[str, str]], MetadataProvider],
    build_launcher: Callable[[], ProcessLauncher],
    load_env: Callable[[Optional[Path]], Mapping[str, str]],
) -> None:
    @app.command("open")
    def open_cmd(
        package_name: str = typer.Argument(
            ..., metavar="CRATE", help="The name of the crate to open"
        ),
        manifest_path: Optional[Path] = typer.Option(
            None,
            "--manifest-path",
            metavar="PATH",
            help="Use a specific manifest file",
        ),
    ) -> None:
        """Open an installed crate in your editor."""
        env = load_env(manifest_path)
        try:
            open_package(
                package_name,
                manifest_path=manifest_path,
                metadata_provider=build_metadata_provider(env),
                launcher=build_launcher(),
                env=env,
            )
        except CargoOpenError as exc:
            raise_exit(f"error: {exc.user_message}", cause=exc)
