import typer

from ...core.logging_utils import configure_logging
from .commands.open import register_open_commands
from .commands.utils import (
    build_launcher as _build_launcher,
)
from .commands.utils import (
    build_metadata_provider as _build_metadata_provider,
)
from .commands.utils import (
    get_cargo_open_version,
)
from .commands.utils import (
    load_cli_env as _load_cli_env,
)
from .commands.utils import (
    raise_exit as _raise_exit,
)

app = typer.Typer(add_completion=False, help="Open an installed crate in your editor.")


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"cargo-open {get_cargo_open_version()}")
    raise typer.Exit(code=0)


@app.callback()
def _root(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log each step to stderr."
    ),
) -> None:
    # Subcommands implement behavior; `--version` is handled eagerly.
    configure_logging(verbose)


def main() -> None:
    """Entrypoint for CLI execution."""
    app()


register_open_commands(
    app,
    raise_exit=_raise_exit,
    build_metadata_provider=_build_metadata_provider,
    build_launcher=_build_launcher,
    load_env=_load_cli_env,
)
