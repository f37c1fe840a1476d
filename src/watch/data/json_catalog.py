# -*- coding: utf-8 -*-
"""Repository reading a catalog JSON file on every request."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from watch.data.catalog import Catalog
from watch.domain.models import Creator, CreatorContent, HomeContent, SearchVideoContent, VideoInformation
from watch.utils.file_utils import read_json_file

logger = logging.getLogger(__name__)


class JsonCatalogRepository:
    """Serve a catalog file. Edits to the file are visible on the next request."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Catalog:
        logger.debug("Reading catalog from %s", self.path)
        return Catalog.from_dict(read_json_file(self.path))

    async def _load(self) -> Catalog:
        return await asyncio.to_thread(self._read)

    async def get_home_content(self) -> HomeContent:
        return (await self._load()).home()

    async def get_creator_content(self, creator: Creator) -> CreatorContent:
        return (await self._load()).creator_content(creator)

    async def search_videos(self, query: str) -> SearchVideoContent:
        return (await self._load()).search(query)

    async def get_video_information(self, video_id: str) -> VideoInformation:
        return (await self._load()).video_information(video_id)
