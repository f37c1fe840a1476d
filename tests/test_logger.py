# -*- coding: utf-8 -*-
"""Tests for session logging and crash reports."""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

import pytest

from watch.utils import logger as watch_logger


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    for attr in ("_watch_logging_configured", "_watch_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_session_log_path_is_per_run(tmp_path: Path) -> None:
    path = watch_logger.session_log_path(tmp_path, "Watch Client", datetime(2024, 5, 1, 9, 30, 5))
    assert path == tmp_path / "logs" / "watch-client-20240501-093005.log"


def test_setup_session_logging_creates_file_once(tmp_path: Path, monkeypatch, clean_root_logger) -> None:
    monkeypatch.setenv("WATCH_LOG_LEVEL", "debug")
    first = watch_logger.setup_session_logging(tmp_path, "watch")
    second = watch_logger.setup_session_logging(tmp_path / "other", "watch")

    assert first is not None
    assert first.exists()
    assert second == first
    assert clean_root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch) -> None:
    monkeypatch.setenv("WATCH_LOG_LEVEL", "chatty")
    assert watch_logger._env_level("WATCH_LOG_LEVEL") == logging.INFO


def test_crash_handler_saves_report(tmp_path: Path, monkeypatch) -> None:
    pytest.importorskip("PyQt6")
    from watch import main as watch_main

    shown: list = []
    monkeypatch.setattr(watch_main.QMessageBox, "critical", lambda *args: shown.append(args))
    monkeypatch.setattr(sys, "__excepthook__", lambda *args: None)

    try:
        raise RuntimeError("screen exploded")
    except RuntimeError:
        watch_main.crash_handler(tmp_path / "logs")(*sys.exc_info())

    report = (tmp_path / "logs" / watch_main.CRASH_LOG_NAME).read_text(encoding="utf-8")
    assert "RuntimeError: screen exploded" in report
