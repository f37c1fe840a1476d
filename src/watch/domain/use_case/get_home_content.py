# -*- coding: utf-8 -*-
"""Use case for the home screen."""

from __future__ import annotations

from collections.abc import AsyncIterator

from watch.common.resource import Resource
from watch.domain.models import HomeContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.base import resource_flow


class GetHomeContent:
    """Load the videos shown on the home screen."""

    def __init__(self, repository: VideoRepository) -> None:
        self._repository = repository

    def __call__(self) -> AsyncIterator[Resource[HomeContent]]:
        return resource_flow("GetHomeContent", self._repository.get_home_content)
