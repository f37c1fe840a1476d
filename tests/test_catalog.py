# -*- coding: utf-8 -*-
"""Tests for catalog parsing and the catalog-backed repositories."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from watch.data.catalog import Catalog, InMemoryVideoRepository
from watch.data.json_catalog import JsonCatalogRepository
from watch.domain.models import Creator
from watch.presentation.home import HomeViewModel
from watch.presentation.screen_state import Content, Error


def test_catalog_links_videos_to_creators(catalog: Catalog) -> None:
    information = catalog.video_information("v2")
    assert information.creator.name == "Bob Builds"
    assert information.video.description is None


def test_home_follows_home_ids(catalog: Catalog) -> None:
    assert [item.video.id for item in catalog.home().videos] == ["v1", "v2"]


def test_home_defaults_to_all_videos(catalog_data: dict) -> None:
    del catalog_data["home"]
    catalog = Catalog.from_dict(catalog_data)
    assert [item.video.id for item in catalog.home().videos] == ["v1", "v2", "v3"]


def test_home_skips_unknown_ids(catalog_data: dict) -> None:
    catalog_data["home"] = ["v3", "missing"]
    assert [item.video.id for item in Catalog.from_dict(catalog_data).home().videos] == ["v3"]


def test_unknown_creator_reference_is_rejected(catalog_data: dict) -> None:
    catalog_data["videos"][0]["creator_id"] = "ghost"
    with pytest.raises(ValueError, match="ghost"):
        Catalog.from_dict(catalog_data)


def test_search_is_case_insensitive_and_matches_creator_name(catalog: Catalog) -> None:
    assert [item.video.id for item in catalog.search("BIRD").videos] == ["v2"]
    assert [item.video.id for item in catalog.search("ana lens").videos] == ["v1", "v3"]


def test_search_matches_description(catalog: Catalog) -> None:
    assert [item.video.id for item in catalog.search("painting").videos] == ["v1"]


def test_unknown_lookups_raise_lookup_error(catalog: Catalog) -> None:
    with pytest.raises(LookupError):
        catalog.video_information("nope")
    with pytest.raises(LookupError):
        catalog.creator_content(Creator(id="nope", name=""))


def test_catalog_to_dict_keeps_structure(catalog: Catalog, catalog_data: dict) -> None:
    assert Catalog.from_dict(catalog.to_dict()) == catalog
    assert catalog.to_dict()["home"] == catalog_data["home"]


def test_in_memory_repository_applies_latency(catalog: Catalog) -> None:
    repository = InMemoryVideoRepository(catalog, latency=0.01)

    async def _run():
        return await repository.search_videos("tour")

    content = asyncio.run(_run())
    assert [item.video.id for item in content.videos] == ["v3"]


def test_json_repository_reads_file_on_each_call(catalog_file: Path) -> None:
    repository = JsonCatalogRepository(catalog_file)

    async def _home_ids() -> list[str]:
        return [item.video.id for item in (await repository.get_home_content()).videos]

    assert asyncio.run(_home_ids()) == ["v1", "v2"]

    data = json.loads(catalog_file.read_text(encoding="utf-8"))
    data["home"] = ["v3"]
    catalog_file.write_text(json.dumps(data), encoding="utf-8")
    assert asyncio.run(_home_ids()) == ["v3"]


def test_missing_catalog_file_surfaces_as_error_state(tmp_path: Path) -> None:
    view_model = HomeViewModel.from_repository(JsonCatalogRepository(tmp_path / "missing.json"))

    async def _run() -> None:
        await view_model.load_home_content()

    asyncio.run(_run())
    assert isinstance(view_model.state, Error)
    assert isinstance(view_model.state.cause, FileNotFoundError)


def test_json_repository_feeds_home_view_model(catalog_file: Path) -> None:
    view_model = HomeViewModel.from_repository(JsonCatalogRepository(catalog_file))

    async def _run() -> None:
        await view_model.load_home_content()

    asyncio.run(_run())
    assert isinstance(view_model.state, Content)
    assert len(view_model.state.payload.videos) == 2
