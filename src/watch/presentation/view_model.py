# -*- coding: utf-8 -*-
"""Observable screen state driven by use case emissions."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Callable
from typing import Any, Generic, TypeVar

from watch.common.resource import Resource
from watch.presentation.scope import ViewModelScope
from watch.presentation.screen_state import Empty, ScreenState, describe, to_screen_state

logger = logging.getLogger(__name__)

T = TypeVar("T")

StateObserver = Callable[[ScreenState], None]


class ViewModel(Generic[T]):
    """
    Own one screen state and keep it in sync with the latest use case call.

    Every action launches an independent collection of a Resource flow. With
    ``cancel_previous`` left off, overlapping actions race and the emission
    that arrives last wins. With it on, starting an action cancels the
    in-flight collection of the same slot first.
    """

    def __init__(self, *, cancel_previous: bool = False, scope: ViewModelScope | None = None) -> None:
        self.cancel_previous = cancel_previous
        self.scope = scope or ViewModelScope(type(self).__name__)
        self._state: ScreenState[T] = Empty()
        self._observers: list[StateObserver] = []
        self._slots: dict[str, asyncio.Task] = {}

    @property
    def state(self) -> ScreenState[T]:
        return self._state

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register ``observer`` for every published state. Returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    def _publish(self, state: ScreenState[T]) -> None:
        self._state = state
        logger.debug("%s -> %s", type(self).__name__, describe(state))
        for observer in list(self._observers):
            observer(state)

    async def _consume(self, flow: AsyncIterator[Resource[T]]) -> None:
        async for emission in flow:
            self._publish(to_screen_state(emission))

    def collect(self, flow: AsyncIterator[Resource[T]], slot: str = "default") -> asyncio.Task:
        """Launch a task folding every emission of ``flow`` into the state."""
        if self.cancel_previous:
            previous = self._slots.get(slot)
            if previous is not None and not previous.done():
                previous.cancel()
                logger.debug("%s: cancelled in-flight %r action", type(self).__name__, slot)
        task = self.scope.launch(self._consume(flow), name=f"{type(self).__name__}.{slot}")
        self._slots[slot] = task
        return task

    async def join(self) -> None:
        """Wait for every in-flight action."""
        await self.scope.join()

    def clear(self) -> None:
        """Release the screen: cancel pending work and drop observers."""
        self.scope.cancel()
        self._slots.clear()
        self._observers.clear()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state!r})"
