from __future__ import annotations

from typing import Optional


class CargoOpenError(Exception):
    """Base error for a failed `cargo open` invocation."""

    def __init__(self, message: str, *, user_message: Optional[str] = None) -> None:
        super().__init__(message)
        self.user_message = user_message or message


class MetadataError(CargoOpenError):
    """`cargo metadata` failed or produced output we could not read."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Metadata error: {detail}")
        self.detail = detail


class PackageNotFoundError(CargoOpenError):
    """No package with the requested name exists in the workspace metadata."""

    def __init__(self, package_name: str) -> None:
        super().__init__(f"Package not found: {package_name}")
        self.package_name = package_name


class PathResolutionError(CargoOpenError):
    """A manifest path has no parent directory."""


class EditorNotConfiguredError(CargoOpenError):
    """None of the editor environment variables is set."""


class SpawnError(CargoOpenError):
    """The editor executable could not be started."""

    def __init__(self, editor: str, detail: str) -> None:
        super().__init__(f"Failed to launch editor {editor!r}: {detail}")
        self.editor = editor
        self.detail = detail
