# -*- coding: utf-8 -*-
"""Search screen with a query bar."""

from __future__ import annotations

from PyQt6.QtWidgets import QHBoxLayout, QLineEdit, QPushButton, QWidget

from watch.constants import EMPTY_SEARCH_TEXT, SEARCH_PLACEHOLDER
from watch.gui.async_runner import AsyncLoopThread
from watch.gui.home_screen import VideoListStateView
from watch.gui.screen_widget import ScreenWidget
from watch.presentation.search import SearchViewModel


class SearchScreen(ScreenWidget):
    """The search button is enabled only while the query is not blank."""

    title = "Search"

    def __init__(self, view_model: SearchViewModel, runner: AsyncLoopThread, parent: QWidget | None = None) -> None:
        results_view = VideoListStateView(empty_text=EMPTY_SEARCH_TEXT)
        super().__init__(view_model, runner, results_view, parent)
        self.results_view = results_view

        self.query_edit = QLineEdit()
        self.query_edit.setPlaceholderText(SEARCH_PLACEHOLDER)
        self.query_edit.setClearButtonEnabled(True)
        self.search_button = QPushButton("Search")
        self.search_button.setObjectName("primaryButton")
        self.search_button.setEnabled(False)

        bar = QHBoxLayout()
        bar.setSpacing(8)
        bar.addWidget(self.query_edit, 1)
        bar.addWidget(self.search_button)
        self.main_layout.insertLayout(1, bar)

        self.query_edit.textChanged.connect(self._on_text_changed)
        self.query_edit.returnPressed.connect(self.submit_search)
        self.search_button.clicked.connect(self.submit_search)
        self.results_view.video_list.video_activated.connect(self.video_requested.emit)
        self.results_view.video_list.creator_activated.connect(self.creator_requested.emit)

    def _on_text_changed(self, text: str) -> None:
        self.search_button.setEnabled(bool(text.strip()))

    def submit_search(self) -> None:
        query = self.query_edit.text()
        if not query.strip():
            return
        self.runner.submit(self.view_model.search, query)

    def retry(self) -> None:
        last_query = self.view_model.last_query
        if last_query is not None:
            self.runner.submit(self.view_model.search, last_query)
