"""Test harness configuration.

This repo uses a `src/` layout. In some developer environments an older
installed `cargo_open` package can shadow the local sources.

Ensure tests always import the in-repo code.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import pytest

DEFAULT_NON_INTEGRATION_TIMEOUT_SECONDS = 60


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    src_path = str(src_dir)
    if sys.path[:1] != [src_path] and src_path not in sys.path:
        sys.path.insert(0, src_path)


def pytest_collection_modifyitems(
    session: pytest.Session, config: pytest.Config, items: list[pytest.Item]
) -> None:
    """
    Apply a default per-test timeout to non-integration tests.

    This relies on `pytest-timeout` when installed; if it isn't installed, the
    marker is inert but still documents the intent.
    """
    _ = session, config
    for item in items:
        if item.get_closest_marker("integration") is not None:
            continue
        item.add_marker(pytest.mark.timeout(DEFAULT_NON_INTEGRATION_TIMEOUT_SECONDS))


@pytest.fixture(autouse=True)
def _reset_cargo_open_logger():
    yield
    logger = logging.getLogger("cargo_open")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class RecordingEnv(dict):
    """A dict that remembers which keys were looked up."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.lookups: list[str] = []

    def __contains__(self, key: object) -> bool:
        self.lookups.append(str(key))
        return super().__contains__(key)

    def __getitem__(self, key: str) -> str:
        self.lookups.append(key)
        return super().__getitem__(key)

    def get(self, key: str, default: Any = None) -> Any:
        self.lookups.append(key)
        return super().get(key, default)


@dataclass
class FakeMetadataProvider:
    metadata: Any = None
    error: Optional[Exception] = None
    calls: list[Optional[Path]] = field(default_factory=list)

    def fetch(self, manifest_path: Optional[Path] = None):
        self.calls.append(manifest_path)
        if self.error is not None:
            raise self.error
        return self.metadata


@dataclass
class FakeLauncher:
    returncode: int = 0
    error: Optional[Exception] = None
    calls: list[tuple[str, Path]] = field(default_factory=list)

    def launch(self, editor: str, target: Path) -> int:
        self.calls.append((editor, target))
        if self.error is not None:
            raise self.error
        return self.returncode


@pytest.fixture()
def make_metadata():
    """Build WorkspaceMetadata from (name, manifest_path) pairs."""

    # Import lazily so `pytest_configure()` can prepend the local src/ directory
    # before any `cargo_open` modules are loaded.
    from cargo_open.core.metadata import Package, WorkspaceMetadata

    def _make(*entries: tuple[str, str]) -> WorkspaceMetadata:
        return WorkspaceMetadata(
            packages=tuple(
                Package(name=name, manifest_path=Path(manifest))
                for name, manifest in entries
            )
        )

    return _make


@pytest.fixture()
def fake_provider() -> FakeMetadataProvider:
    return FakeMetadataProvider()


@pytest.fixture()
def fake_launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture()
def recording_env():
    return RecordingEnv
