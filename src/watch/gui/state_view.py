# -*- coding: utf-8 -*-
"""Base widget rendering one screen state at a time."""

from __future__ import annotations

from typing import Any, assert_never

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QLabel, QProgressBar, QPushButton, QStackedWidget, QVBoxLayout, QWidget

from watch.constants import EMPTY_SCREEN_TEXT
from watch.presentation.screen_state import Content, Empty, Error, Loading, ScreenState


def _centered_page(*widgets: QWidget) -> QWidget:
    page = QWidget()
    layout = QVBoxLayout(page)
    layout.addStretch(1)
    for widget in widgets:
        layout.addWidget(widget, 0, Qt.AlignmentFlag.AlignHCenter)
    layout.addStretch(1)
    return page


class StateView(QStackedWidget):
    """Switch between empty, loading, content and error pages.

    Subclasses build the content page in ``build_content`` and fill it in
    ``show_content``.
    """

    retry_requested = pyqtSignal()

    def __init__(self, empty_text: str = EMPTY_SCREEN_TEXT, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.empty_label = QLabel(empty_text)
        self.empty_label.setObjectName("sectionTitle")

        self.loading_bar = QProgressBar()
        self.loading_bar.setRange(0, 0)
        self.loading_bar.setTextVisible(False)

        self.error_label = QLabel("")
        self.error_label.setObjectName("errorText")
        self.error_label.setWordWrap(True)
        self.retry_button = QPushButton("Retry")
        self.retry_button.clicked.connect(self.retry_requested.emit)

        self.empty_page = _centered_page(self.empty_label)
        self.loading_page = _centered_page(self.loading_bar)
        self.error_page = _centered_page(self.error_label, self.retry_button)
        self.content_page = self.build_content()

        for page in (self.empty_page, self.loading_page, self.content_page, self.error_page):
            self.addWidget(page)
        self.current_state: ScreenState = Empty()
        self.setCurrentWidget(self.empty_page)

    def build_content(self) -> QWidget:
        return QWidget()

    def show_content(self, payload: Any) -> None:
        del payload

    def show_state(self, state: ScreenState) -> None:
        self.current_state = state
        match state:
            case Empty():
                self.setCurrentWidget(self.empty_page)
            case Loading():
                self.setCurrentWidget(self.loading_page)
            case Content(payload=payload):
                self.show_content(payload)
                self.setCurrentWidget(self.content_page)
            case Error():
                self.error_label.setText(f"Something went wrong: {state.message}")
                self.setCurrentWidget(self.error_page)
            case _:
                assert_never(state)
