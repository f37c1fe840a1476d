# -*- coding: utf-8 -*-
"""Tests for the use cases' Resource emission sequences."""

from __future__ import annotations

import asyncio

import pytest

from watch.common import resource
from watch.domain.models import Creator, SearchVideoContent
from watch.domain.use_case.get_creator_content import GetCreatorContent
from watch.domain.use_case.get_home_content import GetHomeContent
from watch.domain.use_case.get_video_information import GetVideoInformation
from watch.domain.use_case.search_videos import SearchVideos


def _collect(flow) -> list:
    async def _run() -> list:
        return [emission async for emission in flow]

    return asyncio.run(_run())


def test_home_emits_loading_then_success(fake_repository, catalog) -> None:
    emissions = _collect(GetHomeContent(fake_repository)())
    assert emissions == [resource.Loading(), resource.Success(catalog.home())]


def test_repository_is_called_exactly_once(fake_repository) -> None:
    _collect(SearchVideos(fake_repository)("tour"))
    assert fake_repository.calls == ["search:tour"]


def test_repository_is_not_called_until_iterated(fake_repository) -> None:
    GetHomeContent(fake_repository)()
    assert fake_repository.calls == []


def test_io_failure_becomes_error_with_same_cause(fake_repository) -> None:
    failure = OSError("network unreachable")
    fake_repository.failures["home"] = failure

    emissions = _collect(GetHomeContent(fake_repository)())

    assert emissions[0] == resource.Loading()
    assert len(emissions) == 2
    assert isinstance(emissions[1], resource.Error)
    assert emissions[1].cause is failure
    assert emissions[1].message == "network unreachable"


def test_io_subclasses_are_recoverable(fake_repository) -> None:
    fake_repository.failures["video:v1"] = TimeoutError("timed out")
    emissions = _collect(GetVideoInformation(fake_repository)("v1"))
    assert isinstance(emissions[-1], resource.Error)


def test_non_io_failure_propagates_after_loading(fake_repository) -> None:
    fake_repository.failures["search:x"] = KeyError("bug")
    seen: list = []

    async def _run() -> None:
        async for emission in SearchVideos(fake_repository)("x"):
            seen.append(emission)

    with pytest.raises(KeyError):
        asyncio.run(_run())
    assert seen == [resource.Loading()]


def test_blank_query_yields_zero_videos(fake_repository) -> None:
    emissions = _collect(SearchVideos(fake_repository)("   "))
    assert emissions[-1] == resource.Success(SearchVideoContent(videos=[]))


def test_creator_content_lists_only_that_creators_videos(fake_repository) -> None:
    emissions = _collect(GetCreatorContent(fake_repository)(Creator(id="ana", name="Ana Lens")))
    content = emissions[-1].data
    assert content.creator.name == "Ana Lens"
    assert [item.video.id for item in content.videos] == ["v1", "v3"]


def test_each_call_is_an_independent_sequence(fake_repository) -> None:
    use_case = GetHomeContent(fake_repository)
    first = _collect(use_case())
    second = _collect(use_case())
    assert first == second
    assert fake_repository.calls == ["home", "home"]
