# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
import json
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


SAMPLE_CATALOG: dict[str, Any] = {
    "creators": [
        {
            "id": "ana",
            "name": "Ana Lens",
            "photo_url": "https://cdn.example.test/ana.png",
            "description": "Painting and studio life",
        },
        {"id": "bob", "name": "Bob Builds", "photo_url": "https://cdn.example.test/bob.png"},
    ],
    "videos": [
        {
            "id": "v1",
            "title": "Abstract timelapse",
            "content_url": "https://cdn.example.test/v1.mp4",
            "thumbnail_url": "https://cdn.example.test/v1.jpg",
            "description": "Ten minutes of painting",
            "creator_id": "ana",
        },
        {
            "id": "v2",
            "title": "Birdhouse build",
            "content_url": "https://cdn.example.test/v2.mp4",
            "creator_id": "bob",
        },
        {
            "id": "v3",
            "title": "Studio tour",
            "content_url": "https://cdn.example.test/v3.mp4",
            "creator_id": "ana",
        },
    ],
    "home": ["v1", "v2"],
}


@pytest.fixture
def catalog_data() -> dict[str, Any]:
    return json.loads(json.dumps(SAMPLE_CATALOG))


@pytest.fixture
def catalog(catalog_data: dict[str, Any]):
    from watch.data.catalog import Catalog

    return Catalog.from_dict(catalog_data)


@pytest.fixture
def catalog_file(tmp_path: Path, catalog_data: dict[str, Any]) -> Path:
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps(catalog_data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def default_config() -> dict:
    from watch.config import get_default_config

    return get_default_config()


class FakeRepository:
    """Catalog-backed repository whose calls can be held open or made to fail.

    ``gates`` maps a call key (``"home"``, ``"search:<query>"``,
    ``"creator:<id>"``, ``"video:<id>"``) to an ``asyncio.Event`` the call
    waits on. ``failures`` maps a call key to the exception it raises.
    """

    def __init__(self, catalog) -> None:
        self.catalog = catalog
        self.calls: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.failures: dict[str, BaseException] = {}

    async def _serve(self, key: str, produce: Callable[[], Any]) -> Any:
        self.calls.append(key)
        gate = self.gates.get(key)
        if gate is not None:
            await gate.wait()
        failure = self.failures.get(key)
        if failure is not None:
            raise failure
        return produce()

    async def get_home_content(self):
        return await self._serve("home", self.catalog.home)

    async def get_creator_content(self, creator):
        return await self._serve(f"creator:{creator.id}", lambda: self.catalog.creator_content(creator))

    async def search_videos(self, query: str):
        return await self._serve(f"search:{query}", lambda: self.catalog.search(query))

    async def get_video_information(self, video_id: str):
        return await self._serve(f"video:{video_id}", lambda: self.catalog.video_information(video_id))


@pytest.fixture
def fake_repository(catalog) -> FakeRepository:
    return FakeRepository(catalog)


async def settle(rounds: int = 5) -> None:
    """Let scheduled tasks run until they block."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    app.processEvents()
