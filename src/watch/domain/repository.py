# -*- coding: utf-8 -*-
"""Data-access boundary consumed by the use cases."""

from __future__ import annotations

from typing import Protocol

from watch.domain.models import Creator, CreatorContent, HomeContent, SearchVideoContent, VideoInformation


class VideoRepository(Protocol):
    """Fetch video payloads.

    Implementations raise ``OSError`` for transient fetch failures. Any other
    exception is treated as a programming error by the callers.
    """

    async def get_home_content(self) -> HomeContent: ...

    async def get_creator_content(self, creator: Creator) -> CreatorContent: ...

    async def search_videos(self, query: str) -> SearchVideoContent: ...

    async def get_video_information(self, video_id: str) -> VideoInformation: ...
