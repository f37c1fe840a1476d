# -*- coding: utf-8 -*-
"""Console and per-run file logging for the GUI."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
LEVEL_ENV = "WATCH_LOG_LEVEL"


def _env_level(name: str, default: int = logging.INFO) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


def _attach(root: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def session_log_path(base_dir: str | Path, app_name: str, started: datetime | None = None) -> Path:
    """``<base_dir>/logs/<app>-<YYYYmmdd-HHMMSS>.log`` for one run."""
    stamp = (started or datetime.now()).strftime("%Y%m%d-%H%M%S")
    slug = "-".join(app_name.lower().split())
    return Path(base_dir) / "logs" / f"{slug}-{stamp}.log"


def setup_session_logging(base_dir: str | Path, app_name: str) -> Path | None:
    """Send log records to the console and to a fresh file in ``logs/``.

    The level comes from ``WATCH_LOG_LEVEL`` (default INFO). Calling this twice
    returns the file of the first call. Returns ``None`` when the log file
    cannot be created; console logging still works then.
    """
    root = logging.getLogger()
    if getattr(root, "_watch_logging_configured", False):
        return getattr(root, "_watch_session_log", None)

    level = _env_level(LEVEL_ENV)
    root.setLevel(level)
    if not any(type(handler) is logging.StreamHandler for handler in root.handlers):
        _attach(root, logging.StreamHandler(), level)

    log_path: Path | None = session_log_path(base_dir, app_name)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _attach(root, logging.FileHandler(log_path, encoding="utf-8"), level)
        root.info("Logging this session to %s", log_path)
    except OSError as exc:
        root.error("Could not open session log %s: %s", log_path, exc)
        log_path = None

    root._watch_logging_configured = True  # type: ignore[attr-defined]
    root._watch_session_log = log_path  # type: ignore[attr-defined]
    return log_path
