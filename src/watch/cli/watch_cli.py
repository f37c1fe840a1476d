# -*- coding: utf-8 -*-
"""CLI commands that drive the screen view models without a GUI."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path

import typer

from watch.config import build_repository, load_config, validate_config
from watch.data.json_catalog import JsonCatalogRepository
from watch.domain.models import Creator
from watch.domain.repository import VideoRepository
from watch.presentation.creator import CreatorViewModel
from watch.presentation.home import HomeViewModel
from watch.presentation.screen_state import Content, Error, ScreenState, describe
from watch.presentation.search import SearchViewModel
from watch.presentation.video import VideoViewModel
from watch.presentation.view_model import StateObserver, ViewModel

app = typer.Typer(help="Browse the video catalog from the terminal")
logger = logging.getLogger(__name__)

CatalogOption = typer.Option(None, "--catalog", help="Catalog JSON file (overrides settings)")
ApiUrlOption = typer.Option(None, "--api-url", help="Video API base URL (overrides settings)")
SettingsOption = typer.Option(None, "--settings", help="Settings JSON file")
VerboseOption = typer.Option(False, "--verbose", help="Verbose output")


def _repository(catalog: Path | None, api_url: str | None, settings: Path | None) -> VideoRepository:
    if catalog is not None:
        return JsonCatalogRepository(catalog)
    config = load_config(settings)
    if api_url:
        config["repository"].update({"backend": "http", "base_url": api_url})
        validate_config(config)
    base_dir = settings.parent if settings is not None else Path.cwd()
    return build_repository(config, base_dir=base_dir)


def _print_state(state: ScreenState) -> None:
    typer.echo(describe(state))
    if isinstance(state, Content):
        for item in getattr(state.payload, "videos", ()):
            typer.echo(f"  [{item.video.id}] {item.video.title} - {item.creator.name}")


def _run(
    view_model: ViewModel,
    action: Callable[[], object],
    verbose: bool,
    details: StateObserver | None = None,
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    async def _drive() -> ScreenState:
        view_model.subscribe(_print_state)
        if details is not None:
            view_model.subscribe(details)
        action()
        await view_model.join()
        return view_model.state

    final_state = asyncio.run(_drive())
    if isinstance(final_state, Error):
        raise typer.Exit(code=1)


@app.command()
def home(
    catalog: Path = CatalogOption,
    api_url: str = ApiUrlOption,
    settings: Path = SettingsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the home screen videos."""
    view_model = HomeViewModel.from_repository(_repository(catalog, api_url, settings))
    _run(view_model, view_model.load_home_content, verbose)


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text"),
    catalog: Path = CatalogOption,
    api_url: str = ApiUrlOption,
    settings: Path = SettingsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Search videos."""
    view_model = SearchViewModel.from_repository(_repository(catalog, api_url, settings))
    _run(view_model, lambda: view_model.search(query), verbose)


@app.command()
def creator(
    creator_id: str = typer.Argument(..., help="Creator id"),
    catalog: Path = CatalogOption,
    api_url: str = ApiUrlOption,
    settings: Path = SettingsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show a creator and its videos."""
    view_model = CreatorViewModel.from_repository(_repository(catalog, api_url, settings))
    _run(view_model, lambda: view_model.load_creator(Creator(id=creator_id, name="")), verbose)


@app.command()
def video(
    video_id: str = typer.Argument(..., help="Video id"),
    catalog: Path = CatalogOption,
    api_url: str = ApiUrlOption,
    settings: Path = SettingsOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show one video."""
    view_model = VideoViewModel.from_repository(_repository(catalog, api_url, settings))

    def _print_details(state: ScreenState) -> None:
        if isinstance(state, Content):
            information = state.payload
            typer.echo(f"  {information.video.title} by {information.creator.name}")
            typer.echo(f"  {information.video.content_url}")
            if information.video.description:
                typer.echo(f"  {information.video.description}")

    _run(view_model, lambda: view_model.load_video(video_id), verbose, details=_print_details)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
