from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from contextlib import suppress
from logging.handlers import RotatingFileHandler
from pathlib import Path

from parinfer_request.env import env_str

LOG_LEVEL_ENV = "PARINFER_LOG_LEVEL"
LOG_FILE_ENV = "PARINFER_LOG_FILE"

_FILE_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def _log_level_from_env(environ: Mapping[str, str] | None) -> str | None:
    raw = str(env_str(LOG_LEVEL_ENV, environ) or "").strip()
    return raw or None


def _file_handler(root: logging.Logger) -> RotatingFileHandler | None:
    for h in root.handlers:
        if getattr(h, "_parinfer_file_log", False):
            return h  # type: ignore[return-value]
    return None


def ensure_file_logging(*, log_file: Path) -> Path:
    """Attach a rotating file handler to the root logger once.

    Returns the file actually being written, which is the first one attached
    if logging to a file was already set up.
    """

    root = logging.getLogger()
    existing = _file_handler(root)
    if existing is not None:
        return Path(existing.baseFilename)

    log_file = log_file.resolve()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=2, encoding="utf-8")
    handler._parinfer_file_log = True  # type: ignore[attr-defined]
    handler.setFormatter(logging.Formatter(fmt=_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    return log_file


def configure_logging(environ: Mapping[str, str] | None = None) -> None:
    """Route log records to stderr, and to a file when PARINFER_LOG_FILE is set.

    Stdout carries the request, so nothing is ever logged there.
    """

    root = logging.getLogger()
    if not any(getattr(h, "_parinfer_stderr_log", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler._parinfer_stderr_log = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(fmt="parinfer-request: %(levelname)s %(message)s"))
        root.addHandler(handler)

    root.setLevel(logging.WARNING)
    lvl = _log_level_from_env(environ)
    if lvl:
        with suppress(ValueError):
            root.setLevel(lvl.upper())

    log_file = env_str(LOG_FILE_ENV, environ)
    if log_file:
        ensure_file_logging(log_file=Path(log_file))
