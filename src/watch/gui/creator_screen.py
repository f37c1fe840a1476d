# -*- coding: utf-8 -*-
"""Creator screen: profile header plus the creator's videos."""

from __future__ import annotations

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from watch.domain.models import Creator, CreatorContent
from watch.gui.async_runner import AsyncLoopThread
from watch.gui.screen_widget import ScreenWidget
from watch.gui.state_view import StateView
from watch.gui.video_list_widget import VideoListWidget
from watch.presentation.creator import CreatorViewModel


class CreatorStateView(StateView):
    def build_content(self) -> QWidget:
        page = QWidget()
        self.name_label = QLabel("")
        self.name_label.setObjectName("sectionTitle")
        self.description_label = QLabel("")
        self.description_label.setObjectName("mutedText")
        self.description_label.setWordWrap(True)
        self.video_list = VideoListWidget()

        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        layout.addWidget(self.name_label)
        layout.addWidget(self.description_label)
        layout.addWidget(self.video_list, 1)
        return page

    def show_content(self, payload: CreatorContent) -> None:
        self.name_label.setText(payload.creator.name)
        self.description_label.setText(payload.creator.description)
        self.description_label.setVisible(bool(payload.creator.description))
        self.video_list.set_videos(payload.videos)


class CreatorScreen(ScreenWidget):
    title = "Creator"

    def __init__(
        self,
        view_model: CreatorViewModel,
        runner: AsyncLoopThread,
        creator: Creator,
        parent: QWidget | None = None,
    ) -> None:
        creator_view = CreatorStateView()
        super().__init__(view_model, runner, creator_view, parent)
        self.creator = creator
        self.creator_view = creator_view
        self.title_label.setText(creator.name or self.title)
        self.creator_view.video_list.video_activated.connect(self.video_requested.emit)

    def start(self) -> None:
        self.runner.submit(self.view_model.load_creator, self.creator)
