#!/usr/bin/env python3
"""Fetch YouTube transcripts with a preferred-language fallback."""

from __future__ import annotations

import logging
from typing import Optional

from youtube_transcript_api import YouTubeTranscriptApi

from config import DEFAULT_LANGUAGE
from errors import TranscriptUnavailable


class TranscriptFetcher:
    """Fetch transcript text, trying the preferred language before any language."""

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        api: YouTubeTranscriptApi | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.api = api or YouTubeTranscriptApi()
        self.logger = logger or logging.getLogger("yt_analyzer.transcripts")
        self.attempts: list[Optional[tuple[str, ...]]] = [(language,), None]

    def _fetch_segments(self, video_id: str, languages: Optional[tuple[str, ...]]):
        if languages is not None:
            return self.api.fetch(video_id, languages=languages)
        # No constraint: take whichever transcript YouTube lists first.
        transcript = next(iter(self.api.list(video_id)), None)
        if transcript is None:
            return []
        return transcript.fetch()

    def fetch(self, video_id: str) -> str:
        """Return the transcript text joined with single spaces."""
        first_error: Exception | None = None
        for languages in self.attempts:
            label = ", ".join(languages) if languages else "any language"
            self.logger.info("Fetching transcript for %s (%s)", video_id, label)
            try:
                segments = list(self._fetch_segments(video_id, languages))
                if not segments:
                    raise LookupError("No transcript content found")
            except Exception as exc:
                self.logger.warning("Transcript attempt (%s) failed for %s: %s", label, video_id, exc)
                if first_error is None:
                    first_error = exc
                continue

            text = " ".join(snippet.text for snippet in segments)
            self.logger.info("Fetched transcript (%s characters)", len(text))
            return text

        raise TranscriptUnavailable(f"Transcript not available: {_first_line(first_error)}") from first_error


def _first_line(exc: Exception | None) -> str:
    text = str(exc).strip()
    if not text:
        return type(exc).__name__
    return text.splitlines()[0]
