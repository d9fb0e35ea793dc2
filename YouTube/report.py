#!/usr/bin/env python3
"""Render the markdown report and pick where it is written."""

from __future__ import annotations

import os
from collections.abc import Sequence

from common import ensure_directory, format_published_date
from config import REPORT_COMMENT_LIMIT, REPORT_PREFIX
from keywords import resolve_keywords
from models import CommentThread, VideoInfo

NO_COMMENTS_TEXT = "Comments not available or disabled for this video"
NO_KEYWORDS_TEXT = "No keywords found"
NO_TRANSCRIPT_TEXT = """[Transcript not available via automated API]

To manually get the transcript:
1. Go to the video on YouTube
2. Click the "..." menu below the video
3. Select "Show transcript"
4. Copy and paste the transcript text here

Alternatively, you can use browser extensions or other tools to extract transcripts."""


def _or_na(value: str | None) -> str:
    return value if value else "N/A"


def render_comments(comments: Sequence[CommentThread], limit: int = REPORT_COMMENT_LIMIT) -> str:
    if not comments:
        return NO_COMMENTS_TEXT
    return "\n\n".join(
        f"**Comment {index}:** {comment.author}\n{comment.text}\nLikes: {comment.like_count}\n---"
        for index, comment in enumerate(comments[:limit], 1)
    )


def build_report(
    video_info: VideoInfo,
    original_url: str,
    comments: Sequence[CommentThread] = (),
    transcript: str = "",
) -> str:
    """Render markdown for one analyzed video."""
    keywords = resolve_keywords(video_info)
    keywords_text = ", ".join(keywords) if keywords else NO_KEYWORDS_TEXT

    return (
        "## Video Link:\n\n"
        f"{original_url}\n\n"
        "## Video title:\n\n"
        f"{video_info.title}\n\n"
        "## Video Description:\n\n"
        f"{video_info.description}\n\n"
        "## Video Keywords:\n\n"
        f"{keywords_text}\n\n"
        "## Video Statistics:\n\n"
        f"- Views: {_or_na(video_info.view_count)}\n"
        f"- Likes: {_or_na(video_info.like_count)}\n"
        f"- Comments: {_or_na(video_info.comment_count)}\n"
        f"- Published: {format_published_date(video_info.published_at)}\n"
        f"- Channel: {_or_na(video_info.channel_title)}\n\n"
        "## Top Comments:\n\n"
        f"{render_comments(comments)}\n\n"
        "## Video Transcript:\n\n"
        f"{transcript or NO_TRANSCRIPT_TEXT}\n"
    )


def next_report_path(output_dir: str, prefix: str = REPORT_PREFIX) -> str:
    """Return the first unused <prefix>-<n>.md path in output_dir."""
    counter = 1
    while os.path.exists(os.path.join(output_dir, f"{prefix}-{counter}.md")):
        counter += 1
    return os.path.join(output_dir, f"{prefix}-{counter}.md")


def write_report(markdown: str, output_dir: str, prefix: str = REPORT_PREFIX) -> str:
    """Write markdown to a fresh numbered file and return its path."""
    ensure_directory(output_dir)
    while True:
        output_path = next_report_path(output_dir, prefix)
        try:
            with open(output_path, "x", encoding="utf-8") as handle:
                handle.write(markdown)
        except FileExistsError:
            continue
        return output_path
