# -*- coding: utf-8 -*-
"""Task scope bound to the lifetime of one screen."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any

logger = logging.getLogger(__name__)


class ScopeClosedError(RuntimeError):
    """Raised when work is launched on a released scope."""


class ViewModelScope:
    """Own the asyncio tasks started on behalf of a screen.

    Releasing the scope cancels every task that is still running. Finished
    tasks drop out of the scope on their own; a task that failed is remembered
    until the next ``join`` re-raises its exception.
    """

    def __init__(self, name: str = "scope") -> None:
        self.name = name
        self._tasks: set[asyncio.Task] = set()
        self._failures: list[Exception] = []
        self._closed = False

    @property
    def is_closed(self) -> bool:
        return self._closed

    def active_tasks(self) -> list[asyncio.Task]:
        return [task for task in self._tasks if not task.done()]

    def launch(self, coro: Coroutine[Any, Any, Any], *, name: str | None = None) -> asyncio.Task:
        """Schedule ``coro`` on the running loop and track it."""
        if self._closed:
            coro.close()
            raise ScopeClosedError(f"Scope {self.name!r} is closed")
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if isinstance(exc, Exception):
            self._failures.append(exc)
        if exc is not None:
            logger.error("%s: task %s failed", self.name, task.get_name(), exc_info=exc)

    def cancel(self) -> int:
        """Cancel outstanding tasks and close the scope. Returns the number cancelled."""
        self._closed = True
        cancelled = 0
        for task in list(self._tasks):
            if task.cancel():
                cancelled += 1
        if cancelled:
            logger.debug("%s: cancelled %d task(s)", self.name, cancelled)
        return cancelled

    async def join(self) -> None:
        """Wait until no task is running. The first fatal failure is re-raised."""
        pending = self.active_tasks()
        while pending:
            await asyncio.gather(*pending, return_exceptions=True)
            pending = self.active_tasks()
        if self._failures:
            first = self._failures[0]
            self._failures.clear()
            raise first
