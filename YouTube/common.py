#!/usr/bin/env python3
"""Shared helpers used by the video analyzer."""

from __future__ import annotations

import http.client
import json
import logging
import os
import re
import urllib.error
import urllib.request
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlencode, urlparse

from config import DEFAULT_TIMEOUT_SECONDS
from errors import InvalidInput, ParseError, TransportError

VIDEO_URL_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/watch\?.*v=([^&\n?#]+)"),
)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure process-wide logging."""
    if verbose and quiet:
        raise ValueError("Cannot use --verbose and --quiet together.")

    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_published_datetime(value: str | None) -> datetime | None:
    """Parse YouTube published timestamp as timezone-aware UTC datetime."""
    if not value:
        return None

    normalized = value.strip().replace("Z", "+00:00")
    try:
        parsed = datetime.fromisoformat(normalized)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)
    except ValueError:
        pass

    try:
        parsed = datetime.strptime(value[:19], "%Y-%m-%dT%H:%M:%S")
        return parsed.replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def format_published_date(value: str | None, fallback: str = "N/A") -> str:
    """Render a published timestamp as YYYY-MM-DD, or the fallback."""
    parsed = parse_published_datetime(value)
    if parsed is None:
        return fallback
    return parsed.strftime("%Y-%m-%d")


def extract_video_id(url: str) -> str:
    """Extract the video ID from a watch, short or embed URL."""
    candidate = url.strip()
    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)

    raise InvalidInput(f"Invalid YouTube URL: {url}")


def ensure_directory(path: str) -> None:
    """Create directory if missing."""
    os.makedirs(path, exist_ok=True)


def _api_error_message(body: bytes) -> str | None:
    try:
        payload = json.loads(body.decode("utf-8", errors="replace"))
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        return payload["error"].get("message")
    return None


def get_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    logger: logging.Logger | None = None,
) -> Any:
    """GET a JSON document and return the decoded payload.

    Raises TransportError for connection failures and HTTP error statuses,
    and ParseError when the body is not valid JSON. Nothing is retried.
    """
    full_url = f"{url}?{urlencode(params)}" if params else url
    if logger:
        logger.debug("GET %s", urlparse(url).path)

    try:
        with urllib.request.urlopen(full_url, timeout=timeout_seconds) as response:
            raw_bytes = response.read()
    except urllib.error.HTTPError as exc:
        detail = _api_error_message(exc.read() or b"") or exc.reason
        raise TransportError(f"HTTP {exc.code} from {urlparse(url).path}: {detail}") from exc
    except (urllib.error.URLError, http.client.HTTPException, OSError) as exc:
        reason = getattr(exc, "reason", exc)
        raise TransportError(f"Request to {urlparse(url).netloc} failed: {reason}") from exc

    try:
        return json.loads(raw_bytes.decode("utf-8", errors="replace"))
    except ValueError as exc:
        raise ParseError(f"Failed to parse response from {urlparse(url).path}") from exc
