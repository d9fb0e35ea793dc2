#!/usr/bin/env python3
"""Keyword heuristics for videos that ship without tags."""

from __future__ import annotations

import re

from models import VideoInfo

HASHTAG_RE = re.compile(r"#\w+", re.ASCII)
TOKEN_SPLIT_RE = re.compile(r"[\s,]+")
MARKER_WORDS = ("Code", "Tips", "Tricks")
MAX_LINE_LENGTH = 100
MAX_WORDS_PER_LINE = 3
MAX_KEYWORDS = 10


def _is_keyword_token(word: str) -> bool:
    return len(word) > 2 and "http" not in word and "@" not in word and "." not in word


def extract_keywords_from_description(description: str | None) -> list[str]:
    """Derive up to ten keywords from hashtags and marker lines."""
    if not description:
        return []

    keywords = [tag[1:] for tag in HASHTAG_RE.findall(description)]

    for line in description.split("\n"):
        if len(line) >= MAX_LINE_LENGTH:
            continue
        if not any(marker in line for marker in MARKER_WORDS):
            continue
        words = [word for word in TOKEN_SPLIT_RE.split(line) if _is_keyword_token(word)]
        keywords.extend(words[:MAX_WORDS_PER_LINE])

    return list(dict.fromkeys(keywords))[:MAX_KEYWORDS]


def resolve_keywords(video_info: VideoInfo) -> list[str]:
    """Prefer the video's own tags and fall back to the description."""
    if video_info.tags is not None:
        return list(video_info.tags)
    return extract_keywords_from_description(video_info.description)
