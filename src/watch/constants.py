# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "watch"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"
DEFAULT_CATALOG_FILE = "catalog.json"

REPOSITORY_BACKENDS = ("catalog", "http")

SEARCH_PLACEHOLDER = "Search"
EMPTY_SEARCH_TEXT = "Search a video"
EMPTY_SCREEN_TEXT = "Nothing to show yet"
