# -*- coding: utf-8 -*-
"""Video screen view model."""

from __future__ import annotations

import asyncio

from watch.domain.models import VideoInformation
from watch.domain.repository import VideoRepository
from watch.domain.use_case.get_video_information import GetVideoInformation
from watch.presentation.screen_state import Content
from watch.presentation.view_model import ViewModel


class VideoViewModel(ViewModel[VideoInformation]):
    """Load the details of one video.

    Screens opened from a list already hold the ``VideoInformation``; they can
    publish it directly with ``show`` instead of fetching it again.
    """

    def __init__(self, get_video_information: GetVideoInformation, **kwargs) -> None:
        super().__init__(**kwargs)
        self._get_video_information = get_video_information

    @classmethod
    def from_repository(cls, repository: VideoRepository, **kwargs) -> VideoViewModel:
        return cls(GetVideoInformation(repository), **kwargs)

    def load_video(self, video_id: str) -> asyncio.Task:
        return self.collect(self._get_video_information(video_id), slot="video")

    def show(self, information: VideoInformation) -> None:
        self._publish(Content(information))
