#!/usr/bin/env python3
"""YouTube Data API v3 client for video metadata and comment threads."""

from __future__ import annotations

import logging

from common import get_json
from config import API_BASE_URL, DEFAULT_MAX_COMMENTS, DEFAULT_TIMEOUT_SECONDS, MAX_COMMENTS_LIMIT
from errors import NotFound, ParseError
from models import CommentThread, VideoInfo


class YouTubeDataClient:
    """Fetch snippet, statistics and top comments for a single video."""

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.logger = logger or logging.getLogger("yt_analyzer.youtube_api")

    def _get(self, resource: str, params: dict) -> dict:
        payload = get_json(
            f"{self.base_url}/{resource}",
            {**params, "key": self.api_key},
            timeout_seconds=self.timeout_seconds,
            logger=self.logger,
        )
        return payload if isinstance(payload, dict) else {}

    def fetch_video_info(self, video_id: str) -> VideoInfo:
        """Return metadata for the video or raise NotFound."""
        response = self._get("videos", {"part": "snippet,statistics", "id": video_id})
        items = response.get("items") or []
        if not items:
            raise NotFound(f"Video not found: {video_id}")
        try:
            return VideoInfo.from_api(items[0])
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed video item for {video_id}: {exc!r}") from exc

    def fetch_comments(self, video_id: str, max_results: int = DEFAULT_MAX_COMMENTS) -> list[CommentThread]:
        """Return up to max_results top-level comments ordered by relevance.

        A response without ``items`` means the video has no comments and
        yields an empty list.
        """
        if not 1 <= max_results <= MAX_COMMENTS_LIMIT:
            raise ValueError(f"max_results must be between 1 and {MAX_COMMENTS_LIMIT}")

        response = self._get(
            "commentThreads",
            {
                "part": "snippet",
                "videoId": video_id,
                "maxResults": max_results,
                "order": "relevance",
            },
        )
        items = response.get("items")
        if not items:
            self.logger.debug("No comment threads returned for %s", video_id)
            return []
        try:
            return [CommentThread.from_api(item) for item in items[:max_results]]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ParseError(f"Malformed comment thread for {video_id}: {exc!r}") from exc
