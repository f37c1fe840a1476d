# -*- coding: utf-8 -*-
"""Use case for the search screen."""

from __future__ import annotations

from collections.abc import AsyncIterator

from watch.common.resource import Resource
from watch.domain.models import SearchVideoContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.base import resource_flow


class SearchVideos:
    """Search videos by free text."""

    def __init__(self, repository: VideoRepository) -> None:
        self._repository = repository

    def __call__(self, query: str) -> AsyncIterator[Resource[SearchVideoContent]]:
        return resource_flow(f"SearchVideos({query!r})", lambda: self._repository.search_videos(query))
