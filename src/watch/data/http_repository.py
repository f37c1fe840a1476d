# -*- coding: utf-8 -*-
"""Repository backed by a JSON HTTP API."""

from __future__ import annotations

import asyncio
import http.client
import json
import logging
from typing import Any
from urllib import error, parse, request

from watch.domain.models import Creator, CreatorContent, HomeContent, SearchVideoContent, VideoInformation

logger = logging.getLogger(__name__)


class HttpVideoRepository:
    """Thin wrapper over the video API.

    Endpoints: ``GET /home``, ``GET /creators/{id}``, ``GET /search?q=``,
    ``GET /videos/{id}``. Network failures, HTTP errors and timeouts surface
    as ``OSError``, including a connection dropped mid-body. An unparsable or
    incomplete payload raises ``ValueError``.
    """

    def __init__(self, base_url: str, token: str = "", timeout: float = 10.0) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = float(timeout)

    def _url(self, path: str, query: dict[str, str] | None = None) -> str:
        url = f"{self.base_url}{path}"
        if query:
            url = f"{url}?{parse.urlencode(query)}"
        return url

    def _get_json(self, path: str, query: dict[str, str] | None = None) -> dict[str, Any]:
        url = self._url(path, query)
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        req = request.Request(url, headers=headers, method="GET")
        logger.debug("GET %s", url)
        try:
            with request.urlopen(req, timeout=self.timeout) as response:
                raw_body = response.read().decode("utf-8")
        except error.HTTPError as exc:
            raise OSError(f"HTTP {exc.code} for {path}") from exc
        except http.client.HTTPException as exc:
            raise OSError(f"Bad response for {path}: {exc!r}") from exc
        payload = json.loads(raw_body) if raw_body else {}
        if not isinstance(payload, dict):
            raise ValueError(f"Expected JSON object from {path}")
        return payload

    async def _fetch(self, path: str, query: dict[str, str] | None = None) -> dict[str, Any]:
        return await asyncio.to_thread(self._get_json, path, query)

    async def get_home_content(self) -> HomeContent:
        return HomeContent.from_dict(await self._fetch("/home"))

    async def get_creator_content(self, creator: Creator) -> CreatorContent:
        return CreatorContent.from_dict(await self._fetch(f"/creators/{parse.quote(creator.id, safe='')}"))

    async def search_videos(self, query: str) -> SearchVideoContent:
        return SearchVideoContent.from_dict(await self._fetch("/search", {"q": query}))

    async def get_video_information(self, video_id: str) -> VideoInformation:
        return VideoInformation.from_dict(await self._fetch(f"/videos/{parse.quote(video_id, safe='')}"))
