# -*- coding: utf-8 -*-
"""Adapt one repository call into a Resource emission sequence."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import TypeVar

from watch.common import resource
from watch.common.resource import Resource

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def resource_flow(name: str, fetch: Callable[[], Awaitable[T]]) -> AsyncIterator[Resource[T]]:
    """Yield Loading, await ``fetch`` once, then yield Success or Error.

    Only ``OSError`` becomes an Error emission. Anything else propagates to
    the collector.
    """
    yield resource.Loading()
    try:
        data = await fetch()
    except OSError as exc:
        logger.warning("%s failed: %s", name, exc)
        yield resource.Error(exc)
        return
    logger.debug("%s succeeded", name)
    yield resource.Success(data)
