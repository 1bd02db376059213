import logging
import os
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from .errors import EditorNotConfiguredError

logger = logging.getLogger("cargo_open.core.config")

EDITOR_ENV_KEYS = ("CARGO_EDITOR", "VISUAL", "EDITOR")
CARGO_ENV_KEY = "CARGO"
DEFAULT_CARGO_BINARY = "cargo"
DOTENV_FILENAME = ".env"


def resolve_editor(env: Mapping[str, str]) -> str:
    """Return the editor command from the first editor variable present in env.

    A variable set to the empty string still counts as set and is returned
    as-is; it is not skipped in favour of a lower-priority variable.
    """
    for key in EDITOR_ENV_KEYS:
        if key in env:
            return env[key]
    *leading, last = EDITOR_ENV_KEYS
    raise EditorNotConfiguredError(
        f"Cannot resolve editor: set one of {', '.join(leading)} or {last}"
    )


def resolve_cargo_binary(env: Mapping[str, str]) -> str:
    value = env.get(CARGO_ENV_KEY)
    if value:
        return value
    return DEFAULT_CARGO_BINARY


def load_env(root: Path, base_env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Return a merged env mapping for ``root`` without mutating process env.

    Values from ``root/.env`` only fill keys missing from ``base_env``. The
    editor variables are taken from the file as a group, and only when
    ``base_env`` sets none of them, so a project file never outranks the
    user's own editor. ``CARGO`` is never read from the file.
    """
    env = dict(base_env) if base_env is not None else dict(os.environ)
    candidate = root / DOTENV_FILENAME
    try:
        if not candidate.is_file():
            return env
        values = dotenv_values(candidate)
    except OSError as exc:
        logger.debug("Failed to load .env file %s: %s", candidate, exc)
        return env
    editor_configured = any(key in env for key in EDITOR_ENV_KEYS)
    for key, value in values.items():
        if value is None or key in env or key == CARGO_ENV_KEY:
            continue
        if key in EDITOR_ENV_KEYS and editor_configured:
            continue
        env[key] = value
    return env
