# -*- coding: utf-8 -*-
"""Domain payloads passed from the repository to the screens unchanged."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any


def _required(data: dict[str, Any], key: str) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise ValueError(f"Missing {key!r} in payload")
    return data[key]


@dataclass(frozen=True)
class Creator:
    """A channel publishing videos."""

    id: str
    name: str
    photo_url: str = ""
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Creator:
        return cls(
            id=str(_required(data, "id")),
            name=str(data.get("name", "")),
            photo_url=str(data.get("photo_url", "")),
            description=str(data.get("description", "")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Video:
    """Playable video metadata."""

    id: str
    title: str
    content_url: str
    thumbnail_url: str = ""
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Video:
        video_id = str(_required(data, "id"))
        description = data.get("description")
        return cls(
            id=video_id,
            title=str(data.get("title", "")),
            content_url=str(data.get("content_url", "")),
            thumbnail_url=str(data.get("thumbnail_url", "")),
            description=str(description) if description else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VideoInformation:
    """A video together with the creator that published it."""

    video: Video
    creator: Creator

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VideoInformation:
        return cls(
            video=Video.from_dict(_required(data, "video")),
            creator=Creator.from_dict(_required(data, "creator")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"video": self.video.to_dict(), "creator": self.creator.to_dict()}


def _videos_from(items: Any) -> tuple[VideoInformation, ...]:
    if not isinstance(items, list):
        raise ValueError("Expected a list of videos")
    return tuple(VideoInformation.from_dict(item) for item in items)


@dataclass(frozen=True)
class HomeContent:
    """Videos shown on the home screen."""

    videos: tuple[VideoInformation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "videos", tuple(self.videos))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HomeContent:
        return cls(videos=_videos_from(data.get("videos", [])))

    def to_dict(self) -> dict[str, Any]:
        return {"videos": [item.to_dict() for item in self.videos]}


@dataclass(frozen=True)
class CreatorContent:
    """A creator profile and the videos it published."""

    creator: Creator
    videos: tuple[VideoInformation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "videos", tuple(self.videos))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CreatorContent:
        return cls(
            creator=Creator.from_dict(_required(data, "creator")),
            videos=_videos_from(data.get("videos", [])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"creator": self.creator.to_dict(), "videos": [item.to_dict() for item in self.videos]}


@dataclass(frozen=True)
class SearchVideoContent:
    """Videos matching a search query."""

    videos: tuple[VideoInformation, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "videos", tuple(self.videos))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SearchVideoContent:
        return cls(videos=_videos_from(data.get("videos", [])))

    def to_dict(self) -> dict[str, Any]:
        return {"videos": [item.to_dict() for item in self.videos]}
