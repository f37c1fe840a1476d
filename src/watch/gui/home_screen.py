# -*- coding: utf-8 -*-
"""Home screen: the catalog's featured videos."""

from __future__ import annotations

from PyQt6.QtWidgets import QWidget

from watch.gui.async_runner import AsyncLoopThread
from watch.gui.screen_widget import ScreenWidget
from watch.gui.state_view import StateView
from watch.gui.video_list_widget import VideoListWidget
from watch.presentation.home import HomeViewModel


class VideoListStateView(StateView):
    """State view whose content page is a video list."""

    def build_content(self) -> QWidget:
        self.video_list = VideoListWidget()
        return self.video_list

    def show_content(self, payload) -> None:
        self.video_list.set_videos(payload.videos)


class HomeScreen(ScreenWidget):
    title = "Home"

    def __init__(self, view_model: HomeViewModel, runner: AsyncLoopThread, parent: QWidget | None = None) -> None:
        home_view = VideoListStateView()
        super().__init__(view_model, runner, home_view, parent)
        self.home_view = home_view
        self.home_view.video_list.video_activated.connect(self.video_requested.emit)
        self.home_view.video_list.creator_activated.connect(self.creator_requested.emit)

    def start(self) -> None:
        self.runner.submit(self.view_model.load_home_content)
