# -*- coding: utf-8 -*-
"""Main window: a stack of screens with back navigation."""

from __future__ import annotations

import logging
from typing import Any

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QStackedWidget, QStatusBar, QToolBar, QWidget

from watch.constants import APP_NAME, APP_VERSION
from watch.domain.models import Creator, VideoInformation
from watch.domain.repository import VideoRepository
from watch.gui.async_runner import AsyncLoopThread
from watch.gui.creator_screen import CreatorScreen
from watch.gui.home_screen import HomeScreen
from watch.gui.screen_widget import ScreenWidget
from watch.gui.search_screen import SearchScreen
from watch.gui.video_screen import VideoScreen
from watch.presentation.creator import CreatorViewModel
from watch.presentation.home import HomeViewModel
from watch.presentation.search import SearchViewModel
from watch.presentation.video import VideoViewModel

logger = logging.getLogger(__name__)

STYLE_SHEET = """
QLabel#sectionTitle { font-size: 16px; font-weight: 600; }
QLabel#mutedText { color: #6b6b6b; }
QLabel#errorText { color: #b00020; }
QPushButton#primaryButton { font-weight: 600; }
"""


class MainWindow(QMainWindow):
    """
    Host the screens of the client.

    Screens are pushed on a stack; going back pops and disposes the top
    screen so its view model releases any in-flight work.
    """

    def __init__(
        self,
        repository: VideoRepository,
        settings: dict[str, Any],
        runner: AsyncLoopThread | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.repository = repository
        self.settings = settings
        self.cancel_previous = bool(settings.get("view_model", {}).get("cancel_previous", False))
        self.runner = runner or AsyncLoopThread(self)
        if not self.runner.isRunning():
            self.runner.start()

        window = settings.get("window", {})
        self.setWindowTitle(f"{APP_NAME} v{APP_VERSION}")
        self.resize(int(window.get("width", 420)), int(window.get("height", 820)))
        self.setStyleSheet(STYLE_SHEET)

        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)
        self.setStatusBar(QStatusBar())
        self._build_toolbar()

        self.push_screen(HomeScreen(self._view_model(HomeViewModel), self.runner))

    def _build_toolbar(self) -> None:
        toolbar = QToolBar("Navigation")
        toolbar.setMovable(False)
        self.back_action = QAction("Back", self)
        self.back_action.setShortcut(QKeySequence.StandardKey.Back)
        self.back_action.triggered.connect(self.go_back)
        self.search_action = QAction("Search", self)
        self.search_action.setShortcut(QKeySequence.StandardKey.Find)
        self.search_action.triggered.connect(self.open_search)
        toolbar.addAction(self.back_action)
        toolbar.addAction(self.search_action)
        self.addToolBar(toolbar)

    def _view_model(self, view_model_type):
        return view_model_type.from_repository(self.repository, cancel_previous=self.cancel_previous)

    def current_screen(self) -> ScreenWidget | None:
        widget = self.stack.currentWidget()
        return widget if isinstance(widget, ScreenWidget) else None

    def push_screen(self, screen: ScreenWidget) -> None:
        screen.video_requested.connect(self.open_video)
        screen.creator_requested.connect(self.open_creator)
        self.stack.addWidget(screen)
        self.stack.setCurrentWidget(screen)
        self._refresh_navigation()
        logger.info("Opened %s screen", screen.title)
        screen.start()

    def go_back(self) -> None:
        if self.stack.count() <= 1:
            return
        screen = self.current_screen()
        if screen is None:
            return
        self.stack.removeWidget(screen)
        screen.dispose()
        screen.deleteLater()
        self.stack.setCurrentIndex(self.stack.count() - 1)
        self._refresh_navigation()

    def open_search(self) -> None:
        if isinstance(self.current_screen(), SearchScreen):
            return
        screen = SearchScreen(self._view_model(SearchViewModel), self.runner)
        self.push_screen(screen)
        screen.query_edit.setFocus()

    def open_creator(self, creator: Creator) -> None:
        self.push_screen(CreatorScreen(self._view_model(CreatorViewModel), self.runner, creator))

    def open_video(self, information: VideoInformation) -> None:
        self.push_screen(
            VideoScreen(self._view_model(VideoViewModel), self.runner, information.video.id, information)
        )

    def _refresh_navigation(self) -> None:
        self.back_action.setEnabled(self.stack.count() > 1)
        screen = self.current_screen()
        self.statusBar().showMessage(screen.title if screen is not None else "")

    def closeEvent(self, event) -> None:
        while self.stack.count():
            widget = self.stack.widget(0)
            self.stack.removeWidget(widget)
            if isinstance(widget, ScreenWidget):
                widget.dispose()
        self.runner.stop()
        super().closeEvent(event)
