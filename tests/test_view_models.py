# -*- coding: utf-8 -*-
"""Tests for the screen view models."""

from __future__ import annotations

import asyncio

import pytest

from conftest import settle
from watch.domain.models import Creator, SearchVideoContent
from watch.presentation.creator import CreatorViewModel
from watch.presentation.home import HomeViewModel
from watch.presentation.scope import ScopeClosedError
from watch.presentation.screen_state import Content, Empty, Error, Loading
from watch.presentation.search import SearchViewModel
from watch.presentation.video import VideoViewModel


def _record(view_model) -> list:
    states: list = []
    view_model.subscribe(states.append)
    return states


def test_initial_state_is_empty(fake_repository) -> None:
    assert HomeViewModel.from_repository(fake_repository).state == Empty()


def test_blank_search_goes_empty_loading_content(fake_repository) -> None:
    view_model = SearchViewModel.from_repository(fake_repository)
    states = _record(view_model)
    assert view_model.state == Empty()

    async def _run() -> None:
        view_model.search("")
        await view_model.join()

    asyncio.run(_run())
    assert states == [Loading(), Content(SearchVideoContent(videos=[]))]
    assert view_model.state == Content(SearchVideoContent(videos=[]))


def test_home_io_failure_goes_loading_then_error(fake_repository) -> None:
    failure = OSError("network unreachable")
    fake_repository.failures["home"] = failure
    view_model = HomeViewModel.from_repository(fake_repository)
    states = _record(view_model)

    async def _run() -> None:
        await view_model.load_home_content()

    asyncio.run(_run())
    assert states[0] == Loading()
    assert len(states) == 2
    assert isinstance(states[1], Error)
    assert states[1].cause is failure
    assert states[1].message == "network unreachable"


def test_content_payload_is_the_repository_response(fake_repository, catalog) -> None:
    view_model = CreatorViewModel.from_repository(fake_repository)

    async def _run() -> None:
        await view_model.load_creator(Creator(id="bob", name="Bob Builds"))

    asyncio.run(_run())
    assert view_model.state == Content(catalog.creator_content(Creator(id="bob", name="")))


def test_exactly_one_terminal_state_per_action(fake_repository) -> None:
    view_model = VideoViewModel.from_repository(fake_repository)
    states = _record(view_model)

    async def _run() -> None:
        await view_model.load_video("v2")

    asyncio.run(_run())
    terminal = [state for state in states if isinstance(state, (Content, Error))]
    assert states[0] == Loading()
    assert len(terminal) == 1
    assert terminal[0].payload.video.title == "Birdhouse build"


def test_repeated_action_is_idempotent(fake_repository) -> None:
    view_model = SearchViewModel.from_repository(fake_repository)
    results = []

    async def _run() -> None:
        await view_model.search("tour")
        results.append(view_model.state)
        await view_model.search("tour")
        results.append(view_model.state)

    asyncio.run(_run())
    assert results[0] == results[1]
    assert len(results[0].payload.videos) == 1


def test_retry_after_error_can_succeed(fake_repository) -> None:
    fake_repository.failures["home"] = OSError("offline")
    view_model = HomeViewModel.from_repository(fake_repository)

    async def _run() -> None:
        await view_model.load_home_content()
        assert isinstance(view_model.state, Error)
        del fake_repository.failures["home"]
        await view_model.load_home_content()

    asyncio.run(_run())
    assert isinstance(view_model.state, Content)


def test_last_emission_wins_when_actions_overlap(fake_repository, catalog) -> None:
    view_model = SearchViewModel.from_repository(fake_repository)
    states = _record(view_model)

    async def _run() -> None:
        fake_repository.gates["search:a"] = asyncio.Event()
        fake_repository.gates["search:ab"] = asyncio.Event()
        first = view_model.search("a")
        second = view_model.search("ab")
        await settle()

        fake_repository.gates["search:ab"].set()
        await second
        fake_repository.gates["search:a"].set()
        await first

    asyncio.run(_run())
    assert states == [
        Loading(),
        Loading(),
        Content(catalog.search("ab")),
        Content(catalog.search("a")),
    ]
    assert view_model.state == Content(catalog.search("a"))
    assert catalog.search("a") != catalog.search("ab")


def test_cancel_previous_keeps_most_recent_action(fake_repository, catalog) -> None:
    view_model = SearchViewModel.from_repository(fake_repository, cancel_previous=True)
    tasks = []

    async def _run() -> None:
        fake_repository.gates["search:a"] = asyncio.Event()
        fake_repository.gates["search:ab"] = asyncio.Event()
        tasks.append(view_model.search("a"))
        await settle()
        tasks.append(view_model.search("ab"))
        await settle()

        fake_repository.gates["search:ab"].set()
        fake_repository.gates["search:a"].set()
        await view_model.join()

    asyncio.run(_run())
    assert tasks[0].cancelled()
    assert view_model.state == Content(catalog.search("ab"))


def test_clear_cancels_in_flight_work_and_drops_observers(fake_repository) -> None:
    view_model = HomeViewModel.from_repository(fake_repository)
    states = _record(view_model)
    holder = {}

    async def _run() -> None:
        fake_repository.gates["home"] = asyncio.Event()
        holder["task"] = view_model.load_home_content()
        await settle()
        view_model.clear()
        fake_repository.gates["home"].set()
        await settle()

    asyncio.run(_run())
    assert holder["task"].cancelled()
    assert states == [Loading()]
    assert view_model.state == Loading()


def test_action_after_clear_raises(fake_repository) -> None:
    view_model = HomeViewModel.from_repository(fake_repository)

    async def _run() -> None:
        view_model.clear()
        view_model.load_home_content()

    with pytest.raises(ScopeClosedError):
        asyncio.run(_run())


def test_programming_error_is_not_masked(fake_repository) -> None:
    view_model = CreatorViewModel.from_repository(fake_repository)

    async def _run() -> None:
        view_model.load_creator(Creator(id="nobody", name="Nobody"))
        await view_model.join()

    with pytest.raises(LookupError):
        asyncio.run(_run())
    assert view_model.state == Loading()


def test_unsubscribe_stops_notifications(fake_repository) -> None:
    view_model = HomeViewModel.from_repository(fake_repository)
    states: list = []
    unsubscribe = view_model.subscribe(states.append)
    unsubscribe()

    async def _run() -> None:
        await view_model.load_home_content()

    asyncio.run(_run())
    assert states == []


def test_video_view_model_can_show_known_information(catalog, fake_repository) -> None:
    view_model = VideoViewModel.from_repository(fake_repository)
    information = catalog.video_information("v3")
    view_model.show(information)
    assert view_model.state == Content(information)
    assert fake_repository.calls == []
