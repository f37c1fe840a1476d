# -*- coding: utf-8 -*-
"""Video screen: details of one video and a hand-off to the system player."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from watch.domain.models import VideoInformation
from watch.gui.async_runner import AsyncLoopThread
from watch.gui.screen_widget import ScreenWidget
from watch.gui.state_view import StateView
from watch.presentation.video import VideoViewModel

logger = logging.getLogger(__name__)


class VideoStateView(StateView):
    def build_content(self) -> QWidget:
        page = QWidget()
        self.title_label = QLabel("")
        self.title_label.setObjectName("sectionTitle")
        self.title_label.setWordWrap(True)
        self.play_button = QPushButton("Play")
        self.play_button.setObjectName("primaryButton")
        self.creator_button = QPushButton("")
        self.creator_button.setObjectName("secondaryButton")
        self.description_label = QLabel("")
        self.description_label.setObjectName("mutedText")
        self.description_label.setWordWrap(True)

        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(8)
        layout.addWidget(self.title_label)
        layout.addWidget(self.play_button)
        layout.addWidget(self.creator_button)
        layout.addWidget(self.description_label)
        layout.addStretch(1)
        return page

    def show_content(self, payload: VideoInformation) -> None:
        self.title_label.setText(payload.video.title)
        self.creator_button.setText(payload.creator.name)
        self.play_button.setEnabled(bool(payload.video.content_url))
        self.description_label.setText(payload.video.description or "")
        self.description_label.setVisible(payload.video.description is not None)


class VideoScreen(ScreenWidget):
    """Opened either with a known ``VideoInformation`` or with a video id to fetch."""

    title = "Video"

    def __init__(
        self,
        view_model: VideoViewModel,
        runner: AsyncLoopThread,
        video_id: str,
        information: VideoInformation | None = None,
        parent: QWidget | None = None,
    ) -> None:
        video_view = VideoStateView()
        super().__init__(view_model, runner, video_view, parent)
        self.video_id = video_id
        self.information = information
        self.video_view = video_view
        self.video_view.play_button.clicked.connect(self.play)
        self.video_view.creator_button.clicked.connect(self._open_creator)

    def start(self) -> None:
        if self.information is not None:
            self.runner.submit(self.view_model.show, self.information)
        else:
            self.runner.submit(self.view_model.load_video, self.video_id)

    def retry(self) -> None:
        self.runner.submit(self.view_model.load_video, self.video_id)

    def _current(self) -> VideoInformation | None:
        payload = getattr(self.video_view.current_state, "payload", None)
        return payload if isinstance(payload, VideoInformation) else None

    def play(self) -> None:
        information = self._current()
        if information is None or not information.video.content_url:
            return
        url = QUrl.fromUserInput(information.video.content_url)
        logger.info("Opening %s in the system player", url.toString())
        if not QDesktopServices.openUrl(url):
            logger.warning("No player available for %s", url.toString())

    def _open_creator(self) -> None:
        information = self._current()
        if information is not None:
            self.creator_requested.emit(information.creator)
