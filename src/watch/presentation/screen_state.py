# -*- coding: utf-8 -*-
"""Screen states rendered by the views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union, assert_never

from watch.common import resource
from watch.common.resource import Resource
from watch.domain.models import CreatorContent, HomeContent, SearchVideoContent, VideoInformation

T = TypeVar("T")


@dataclass(frozen=True)
class Empty:
    """Nothing has been requested yet."""


@dataclass(frozen=True)
class Loading:
    """A fetch is in flight."""


@dataclass(frozen=True)
class Content(Generic[T]):
    payload: T


@dataclass(frozen=True)
class Error:
    cause: OSError

    @property
    def message(self) -> str:
        return str(self.cause)


ScreenState = Union[Empty, Loading, Content[T], Error]

HomeState = ScreenState[HomeContent]
SearchState = ScreenState[SearchVideoContent]
CreatorState = ScreenState[CreatorContent]
VideoState = ScreenState[VideoInformation]


def to_screen_state(emission: Resource[T]) -> ScreenState[T]:
    """Map one Resource emission to the screen state it produces."""
    match emission:
        case resource.Loading():
            return Loading()
        case resource.Success(data=data):
            return Content(data)
        case resource.Error(cause=cause):
            return Error(cause)
        case _:
            assert_never(emission)


def describe(state: ScreenState) -> str:
    """Short human-readable label for logs and the CLI."""
    match state:
        case Empty():
            return "Empty"
        case Loading():
            return "Loading"
        case Content(payload=payload):
            videos = getattr(payload, "videos", None)
            if videos is not None:
                return f"Content: {len(videos)} videos"
            return f"Content: {type(payload).__name__}"
        case Error():
            return f"Error: {state.message}"
        case _:
            assert_never(state)
