from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Callable, Protocol

from .errors import SpawnError
from .logging_utils import log_event

logger = logging.getLogger("cargo_open.core.launcher")

RunFn = Callable[..., subprocess.CompletedProcess]


class ProcessLauncher(Protocol):
    def launch(self, editor: str, target: Path) -> int: ...


class SubprocessLauncher:
    """Runs the editor in the foreground with the caller's stdio streams."""

    def __init__(self, *, run_fn: RunFn = subprocess.run) -> None:
        self._run_fn = run_fn

    def launch(self, editor: str, target: Path) -> int:
        command = [editor, str(target)]
        log_event(logger, logging.DEBUG, "editor.launch", command=command)
        try:
            proc = self._run_fn(command, check=False)
        except (OSError, ValueError) as exc:
            raise SpawnError(editor, str(exc)) from exc
        returncode = proc.returncode
        # The editor's own status is reported but never turned into a failure.
        log_event(
            logger,
            logging.WARNING if returncode else logging.DEBUG,
            "editor.exited",
            editor=editor,
            returncode=returncode,
        )
        return returncode
