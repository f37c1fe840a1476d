# -*- coding: utf-8 -*-
"""Use case for the creator screen."""

from __future__ import annotations

from collections.abc import AsyncIterator

from watch.common.resource import Resource
from watch.domain.models import Creator, CreatorContent
from watch.domain.repository import VideoRepository
from watch.domain.use_case.base import resource_flow


class GetCreatorContent:
    """Load a creator profile with its videos."""

    def __init__(self, repository: VideoRepository) -> None:
        self._repository = repository

    def __call__(self, creator: Creator) -> AsyncIterator[Resource[CreatorContent]]:
        return resource_flow(
            f"GetCreatorContent({creator.id})",
            lambda: self._repository.get_creator_content(creator),
        )
