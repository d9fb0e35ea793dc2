#!/usr/bin/env python3
"""Analyzer configuration loaded from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_ENV_FILE = os.path.join(SCRIPT_DIR, "..", ".env")
DEFAULT_OUTPUT_DIR = os.path.join(SCRIPT_DIR, "..", "outputs")

API_BASE_URL = "https://www.googleapis.com/youtube/v3"
API_KEY_ENV = "YOUTUBE_API_KEY"
DEFAULT_MAX_COMMENTS = 20
MAX_COMMENTS_LIMIT = 100
REPORT_COMMENT_LIMIT = 10
DEFAULT_LANGUAGE = "en"
DEFAULT_TIMEOUT_SECONDS = 15
REPORT_PREFIX = "competitor"


class MissingApiKeyError(RuntimeError):
    """Raised when YOUTUBE_API_KEY is not configured."""


@dataclass(frozen=True)
class AnalyzerConfig:
    api_key: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    language: str = DEFAULT_LANGUAGE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    base_url: str = API_BASE_URL


def load_config(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> AnalyzerConfig:
    """Build the configuration from a .env file and the process environment.

    Variables already present in the environment win over the .env file.
    Passing ``environ`` skips the .env file entirely.
    """
    if environ is None:
        load_dotenv(env_file or DEFAULT_ENV_FILE, override=False)
        environ = os.environ

    api_key = (environ.get(API_KEY_ENV) or "").strip()
    if not api_key:
        raise MissingApiKeyError(f"{API_KEY_ENV} is not set")

    timeout_raw = environ.get("YT_ANALYZER_TIMEOUT")
    try:
        timeout_seconds = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
    except ValueError as exc:
        raise ValueError(f"YT_ANALYZER_TIMEOUT must be a number, got {timeout_raw!r}") from exc

    return AnalyzerConfig(
        api_key=api_key,
        output_dir=environ.get("YT_ANALYZER_OUTPUT_DIR") or DEFAULT_OUTPUT_DIR,
        language=environ.get("YT_ANALYZER_LANGUAGE") or DEFAULT_LANGUAGE,
        timeout_seconds=timeout_seconds,
    )
