# -*- coding: utf-8 -*-
"""List of videos with creator shortcuts."""

from __future__ import annotations

from collections.abc import Iterable

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QListWidget, QListWidgetItem, QMenu, QWidget

from watch.domain.models import VideoInformation


class VideoListWidget(QListWidget):
    """Show videos; activating an item opens it, the context menu opens its creator."""

    video_activated = pyqtSignal(object)
    creator_activated = pyqtSignal(object)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setSpacing(4)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        self.itemActivated.connect(self._on_item_activated)
        self.customContextMenuRequested.connect(self._show_context_menu)

    def set_videos(self, videos: Iterable[VideoInformation]) -> None:
        self.clear()
        for information in videos:
            item = QListWidgetItem(f"{information.video.title}\n{information.creator.name}")
            item.setData(Qt.ItemDataRole.UserRole, information)
            if information.video.description:
                item.setToolTip(information.video.description)
            self.addItem(item)

    def information_at(self, row: int) -> VideoInformation | None:
        item = self.item(row)
        return item.data(Qt.ItemDataRole.UserRole) if item is not None else None

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.video_activated.emit(item.data(Qt.ItemDataRole.UserRole))

    def _show_context_menu(self, position) -> None:
        item = self.itemAt(position)
        if item is None:
            return
        information: VideoInformation = item.data(Qt.ItemDataRole.UserRole)
        menu = QMenu(self)
        open_creator = menu.addAction(f"Open {information.creator.name}")
        if menu.exec(self.mapToGlobal(position)) is open_creator:
            self.creator_activated.emit(information.creator)
