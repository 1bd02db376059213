from __future__ import annotations

import json
import logging
import sys
from typing import Any

ROOT_LOGGER_NAME = "cargo_open"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_HANDLER_MARKER = "_cargo_open_handler"


def _format_value(value: Any) -> str:
    if isinstance(value, BaseException):
        return repr(value)
    try:
        return json.dumps(value, default=str)
    except (TypeError, ValueError):
        return repr(value)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit one structured line: the event name followed by key=value pairs."""
    if not logger.isEnabledFor(level):
        return
    parts = [event]
    for key, value in fields.items():
        parts.append(f"{key}={_format_value(value)}")
    logger.log(level, " ".join(parts))


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send cargo_open logs to stderr; DEBUG when verbose, WARNING otherwise.

    Safe to call more than once per process: a single stderr handler is kept
    and re-pointed at the current ``sys.stderr`` on every call.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = next(
        (h for h in logger.handlers if getattr(h, _HANDLER_MARKER, False)), None
    )
    if isinstance(handler, logging.StreamHandler):
        handler.setStream(sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_MARKER, True)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
