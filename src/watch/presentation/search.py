# -*- coding: utf-8 -*-
"""Search screen view model."""

from __future__ import annotations

import asyncio

from watch.domain.models import SearchVideoContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.search_videos import SearchVideos
from watch.presentation.view_model import ViewModel


class SearchViewModel(ViewModel[SearchVideoContent]):
    """Stays Empty until the first search; every query replaces the results."""

    def __init__(self, search_videos: SearchVideos, **kwargs) -> None:
        super().__init__(**kwargs)
        self._search_videos = search_videos
        self.last_query: str | None = None

    @classmethod
    def from_repository(cls, repository: VideoRepository, **kwargs) -> SearchViewModel:
        return cls(SearchVideos(repository), **kwargs)

    def search(self, query: str) -> asyncio.Task:
        self.last_query = query
        return self.collect(self._search_videos(query), slot="search")
