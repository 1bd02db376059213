"""CLI entrypoint.

Re-export the Typer app from the CLI surface.
"""

from .surfaces.cli.cli import app, main

__all__ = ["app", "main"]


if __name__ == "__main__":  # pragma: no cover
    # Checkouts without the installed `cargo-open` script run the tool through
    # `python -m cargo_open.cli`, so this re-export module must start the app.
    main()
