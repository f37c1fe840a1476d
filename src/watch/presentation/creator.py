# -*- coding: utf-8 -*-
"""Creator screen view model."""

from __future__ import annotations

import asyncio

from watch.domain.models import Creator, CreatorContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.get_creator_content import GetCreatorContent
from watch.presentation.view_model import ViewModel


class CreatorViewModel(ViewModel[CreatorContent]):
    def __init__(self, get_creator_content: GetCreatorContent, **kwargs) -> None:
        super().__init__(**kwargs)
        self._get_creator_content = get_creator_content

    @classmethod
    def from_repository(cls, repository: VideoRepository, **kwargs) -> CreatorViewModel:
        return cls(GetCreatorContent(repository), **kwargs)

    def load_creator(self, creator: Creator) -> asyncio.Task:
        return self.collect(self._get_creator_content(creator), slot="creator")
