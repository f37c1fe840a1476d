# -*- coding: utf-8 -*-
"""Common wiring between a screen widget and its view model."""

from __future__ import annotations

import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from watch.gui.async_runner import AsyncLoopThread, StateBridge
from watch.gui.state_view import StateView
from watch.presentation.view_model import ViewModel

logger = logging.getLogger(__name__)


class ScreenWidget(QWidget):
    """
    A navigable screen.

    Renders every state its view model publishes and forwards navigation
    requests to the main window. ``dispose`` releases the view model scope.
    """

    video_requested = pyqtSignal(object)
    creator_requested = pyqtSignal(object)

    title = ""

    def __init__(
        self,
        view_model: ViewModel,
        runner: AsyncLoopThread,
        state_view: StateView,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.view_model = view_model
        self.runner = runner
        self.state_view = state_view
        self.state_view.retry_requested.connect(self.retry)

        self.title_label = QLabel(self.title)
        self.title_label.setObjectName("sectionTitle")
        self.main_layout = QVBoxLayout(self)
        self.main_layout.setContentsMargins(12, 12, 12, 12)
        self.main_layout.setSpacing(8)
        self.main_layout.addWidget(self.title_label)
        self.main_layout.addWidget(self.state_view, 1)

        self.bridge = StateBridge(view_model, self)
        self.bridge.state_changed.connect(self.state_view.show_state)
        self.state_view.show_state(view_model.state)

    def start(self) -> None:
        """Trigger the initial action when the screen is opened."""

    def retry(self) -> None:
        self.start()

    def dispose(self) -> None:
        logger.debug("Disposing %s", type(self).__name__)
        self.bridge.detach()
        self.runner.submit(self.view_model.clear)
