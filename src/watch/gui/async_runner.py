# -*- coding: utf-8 -*-
"""Asyncio event loop running beside the Qt event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, QThread, pyqtSignal

from watch.presentation.screen_state import ScreenState
from watch.presentation.view_model import ViewModel

logger = logging.getLogger(__name__)


class AsyncLoopThread(QThread):
    """Run one asyncio loop on a background thread.

    View model actions are submitted with ``submit`` and execute on the loop
    thread, so every task a view model launches lives on this loop.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("watch-asyncio")
        self.loop = asyncio.new_event_loop()
        self.loop.set_exception_handler(self._handle_exception)

    def run(self) -> None:
        asyncio.set_event_loop(self.loop)
        logger.debug("Asyncio loop started")
        try:
            self.loop.run_forever()
        finally:
            pending = asyncio.all_tasks(self.loop)
            for task in pending:
                task.cancel()
            if pending:
                self.loop.run_until_complete(asyncio.gather(*pending, return_exceptions=True))
            self.loop.run_until_complete(self.loop.shutdown_asyncgens())
            self.loop.close()
            logger.debug("Asyncio loop closed")

    def submit(self, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` on the loop thread."""
        self.loop.call_soon_threadsafe(callback, *args)

    def stop(self, timeout_ms: int = 3000) -> None:
        if self.loop.is_closed():
            return
        if not self.isRunning():
            self.loop.close()
            return
        self.loop.call_soon_threadsafe(self.loop.stop)
        self.wait(timeout_ms)

    @staticmethod
    def _handle_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
        exc = context.get("exception")
        logger.error("Asyncio loop error: %s", context.get("message", ""), exc_info=exc)


class StateBridge(QObject):
    """Forward view model states from the loop thread to the GUI thread."""

    state_changed = pyqtSignal(object)

    def __init__(self, view_model: ViewModel, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self._unsubscribe = view_model.subscribe(self._forward)

    def _forward(self, state: ScreenState) -> None:
        self.state_changed.emit(state)

    def detach(self) -> None:
        self._unsubscribe()
