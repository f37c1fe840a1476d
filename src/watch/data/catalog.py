# -*- coding: utf-8 -*-
"""Video catalog documents and the repository serving them from memory."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from watch.domain.models import (
    Creator,
    CreatorContent,
    HomeContent,
    SearchVideoContent,
    Video,
    VideoInformation,
)

logger = logging.getLogger(__name__)


@dataclass
class Catalog:
    """Parsed catalog: creators by id, videos in document order, home selection."""

    creators: dict[str, Creator] = field(default_factory=dict)
    videos: list[VideoInformation] = field(default_factory=list)
    home_ids: list[str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Catalog:
        creators = {}
        for item in data.get("creators", []):
            creator = Creator.from_dict(item)
            creators[creator.id] = creator

        videos = []
        for item in data.get("videos", []):
            creator_id = str(item.get("creator_id", ""))
            if creator_id not in creators:
                raise ValueError(f"Video {item.get('id')!r} references unknown creator {creator_id!r}")
            videos.append(VideoInformation(video=Video.from_dict(item), creator=creators[creator_id]))

        home = data.get("home")
        home_ids = [str(video_id) for video_id in home] if isinstance(home, list) else None
        return cls(creators=creators, videos=videos, home_ids=home_ids)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "creators": [creator.to_dict() for creator in self.creators.values()],
            "videos": [
                {**item.video.to_dict(), "creator_id": item.creator.id} for item in self.videos
            ],
        }
        if self.home_ids is not None:
            data["home"] = list(self.home_ids)
        return data

    def home(self) -> HomeContent:
        if self.home_ids is None:
            return HomeContent(videos=self.videos)
        by_id = {item.video.id: item for item in self.videos}
        return HomeContent(videos=[by_id[video_id] for video_id in self.home_ids if video_id in by_id])

    def creator_content(self, creator: Creator) -> CreatorContent:
        known = self.creators.get(creator.id)
        if known is None:
            raise LookupError(f"Unknown creator: {creator.id}")
        return CreatorContent(
            creator=known,
            videos=[item for item in self.videos if item.creator.id == creator.id],
        )

    def search(self, query: str) -> SearchVideoContent:
        """Case-insensitive substring match on title, description and creator name."""
        needle = query.strip().lower()
        if not needle:
            return SearchVideoContent(videos=[])
        matches = []
        for item in self.videos:
            haystack = " ".join(
                (item.video.title, item.video.description or "", item.creator.name)
            ).lower()
            if needle in haystack:
                matches.append(item)
        return SearchVideoContent(videos=matches)

    def video_information(self, video_id: str) -> VideoInformation:
        for item in self.videos:
            if item.video.id == video_id:
                return item
        raise LookupError(f"Unknown video: {video_id}")


class InMemoryVideoRepository:
    """Serve a catalog held in memory, optionally with simulated latency."""

    def __init__(self, catalog: Catalog, latency: float = 0.0) -> None:
        self.catalog = catalog
        self.latency = float(latency)

    async def _wait(self) -> None:
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def get_home_content(self) -> HomeContent:
        await self._wait()
        return self.catalog.home()

    async def get_creator_content(self, creator: Creator) -> CreatorContent:
        await self._wait()
        return self.catalog.creator_content(creator)

    async def search_videos(self, query: str) -> SearchVideoContent:
        await self._wait()
        return self.catalog.search(query)

    async def get_video_information(self, video_id: str) -> VideoInformation:
        await self._wait()
        return self.catalog.video_information(video_id)
