# -*- coding: utf-8 -*-
"""Home screen view model."""

from __future__ import annotations

import asyncio

from watch.domain.models import HomeContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.get_home_content import GetHomeContent
from watch.presentation.view_model import ViewModel


class HomeViewModel(ViewModel[HomeContent]):
    def __init__(self, get_home_content: GetHomeContent, **kwargs) -> None:
        super().__init__(**kwargs)
        self._get_home_content = get_home_content

    @classmethod
    def from_repository(cls, repository: VideoRepository, **kwargs) -> HomeViewModel:
        return cls(GetHomeContent(repository), **kwargs)

    def load_home_content(self) -> asyncio.Task:
        return self.collect(self._get_home_content(), slot="home")
