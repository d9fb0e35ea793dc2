#!/usr/bin/env python3
"""Typed views over YouTube Data API payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class VideoInfo:
    """Snippet and statistics for one video."""
    video_id: str
    title: str
    description: str
    tags: Optional[tuple[str, ...]] = None
    published_at: Optional[str] = None
    channel_title: Optional[str] = None
    view_count: Optional[str] = None
    like_count: Optional[str] = None
    comment_count: Optional[str] = None

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "VideoInfo":
        snippet = item.get("snippet") or {}
        statistics = item.get("statistics") or {}
        tags = snippet.get("tags")
        return cls(
            video_id=item.get("id", ""),
            title=snippet.get("title", ""),
            description=snippet.get("description") or "",
            tags=tuple(tags) if tags is not None else None,
            published_at=snippet.get("publishedAt"),
            channel_title=snippet.get("channelTitle"),
            view_count=statistics.get("viewCount"),
            like_count=statistics.get("likeCount"),
            comment_count=statistics.get("commentCount"),
        )


@dataclass(frozen=True)
class CommentThread:
    """Top-level comment of a thread."""
    author: str
    text: str
    like_count: int = 0

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "CommentThread":
        top = item["snippet"]["topLevelComment"]["snippet"]
        return cls(
            author=top.get("authorDisplayName", ""),
            text=top.get("textDisplay", ""),
            like_count=int(top.get("likeCount") or 0),
        )
