# -*- coding: utf-8 -*-
"""Use case for the video screen."""

from __future__ import annotations

from collections.abc import AsyncIterator

from watch.common.resource import Resource
from watch.domain.models import VideoInformation
from watch.domain.repository import VideoRepository
from watch.domain.use_case.base import resource_flow


class GetVideoInformation:
    """Load one video and its creator."""

    def __init__(self, repository: VideoRepository) -> None:
        self._repository = repository

    def __call__(self, video_id: str) -> AsyncIterator[Resource[VideoInformation]]:
        return resource_flow(
            f"GetVideoInformation({video_id})",
            lambda: self._repository.get_video_information(video_id),
        )
