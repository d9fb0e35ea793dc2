#!/usr/bin/env python3
"""Analyze YouTube videos: metadata, comments and transcript into markdown."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from common import configure_logging, extract_video_id
from config import (
    DEFAULT_MAX_COMMENTS,
    MAX_COMMENTS_LIMIT,
    REPORT_PREFIX,
    AnalyzerConfig,
    MissingApiKeyError,
    load_config,
)
from errors import AnalyzerError, TranscriptUnavailable
from report import build_report, write_report
from transcripts import TranscriptFetcher
from youtube_api import YouTubeDataClient


class VideoAnalyzer:
    """Fetch everything about one video and write it as a report."""

    def __init__(
        self,
        config: AnalyzerConfig,
        data_client: YouTubeDataClient | None = None,
        transcript_fetcher: TranscriptFetcher | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger("yt_analyzer")
        self.data_client = data_client or YouTubeDataClient(
            config.api_key,
            base_url=config.base_url,
            timeout_seconds=config.timeout_seconds,
        )
        self.transcript_fetcher = transcript_fetcher or TranscriptFetcher(language=config.language)

    def analyze(self, url: str, max_comments: int = DEFAULT_MAX_COMMENTS) -> dict:
        """Run one analysis; metadata failures propagate, the rest degrade."""
        video_id = extract_video_id(url)

        self.logger.info("Fetching video info...")
        video_info = self.data_client.fetch_video_info(video_id)

        self.logger.info("Fetching up to %s comments...", max_comments)
        try:
            comments = self.data_client.fetch_comments(video_id, max_comments)
        except AnalyzerError as exc:
            self.logger.warning("Comments unavailable: %s", exc)
            comments = []

        self.logger.info("Fetching transcript...")
        try:
            transcript = self.transcript_fetcher.fetch(video_id)
        except TranscriptUnavailable as exc:
            self.logger.warning("Transcript unavailable: %s", exc)
            transcript = ""

        markdown = build_report(video_info, url, comments, transcript)
        file_name = write_report(markdown, self.config.output_dir, REPORT_PREFIX)
        self.logger.info("Analysis saved to %s (%s comments)", file_name, len(comments))

        return {
            "file_name": file_name,
            "video_info": video_info,
            "comments": comments,
            "transcript": transcript,
        }


def analyze_video(analyzer: VideoAnalyzer, url: str, max_comments: int) -> bool:
    """Analyze one URL and print a summary; report failures instead of raising."""
    print()
    print("Starting YouTube video analysis...")
    print(f"URL: {url}")
    print()

    try:
        result = analyzer.analyze(url, max_comments)
    except (AnalyzerError, OSError) as exc:
        print(f"Analysis failed: {exc}")
        print()
        return False

    video_info = result["video_info"]
    print("Analysis complete!")
    print(f"File created: {result['file_name']}")
    print("Video stats:")
    print(f"   - Title: {video_info.title}")
    print(f"   - Views: {video_info.view_count or 'N/A'}")
    print(f"   - Comments analyzed: {len(result['comments'])}")
    print(f"   - Transcript: {'Available' if result['transcript'] else 'Not available'}")
    print()
    return True


def prompt_url() -> str:
    while True:
        url = input("Enter YouTube video URL: ").strip()
        if url:
            return url
        print("Please enter a valid URL")


def prompt_comment_count(default: int = DEFAULT_MAX_COMMENTS) -> int:
    while True:
        raw = input(f"Maximum number of comments to fetch [{default}]: ").strip()
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            value = 0
        if 1 <= value <= MAX_COMMENTS_LIMIT:
            return value
        print(f"Please enter a number between 1 and {MAX_COMMENTS_LIMIT}")


def prompt_continue(default: bool = True) -> bool:
    hint = "Y/n" if default else "y/N"
    while True:
        answer = input(f"Analyze another video? [{hint}]: ").strip().lower()
        if not answer:
            return default
        if answer in {"y", "yes"}:
            return True
        if answer in {"n", "no"}:
            return False
        print("Please answer yes or no")


def run_interactive(
    analyzer: VideoAnalyzer,
    url: str | None = None,
    max_comments: int = DEFAULT_MAX_COMMENTS,
) -> None:
    """Prompt, analyze and repeat until the user declines."""
    current_url = url
    while True:
        try:
            if not current_url:
                current_url = prompt_url()
                max_comments = prompt_comment_count()

            analyze_video(analyzer, current_url, max_comments)

            if not prompt_continue():
                return
        except EOFError:
            print()
            return
        current_url = None


def comment_count(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not 1 <= number <= MAX_COMMENTS_LIMIT:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_COMMENTS_LIMIT}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yt-analyzer",
        description="Analyze YouTube videos and extract metadata, comments, and transcripts",
    )
    parser.add_argument("url", nargs="?", help="YouTube video URL to analyze")
    parser.add_argument(
        "--comments",
        "-c",
        type=comment_count,
        default=DEFAULT_MAX_COMMENTS,
        help="Maximum number of comments to fetch",
    )
    parser.add_argument("--output-dir", "-o", default=None, help="Directory for markdown reports")
    parser.add_argument("--language", default=None, help="Preferred transcript language")
    parser.add_argument("--env-file", default=None, help="Path to a .env file with YOUTUBE_API_KEY")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Only show errors")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(verbose=args.verbose, quiet=args.quiet)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        config = load_config(args.env_file)
    except MissingApiKeyError:
        print("Error: API key not found", file=sys.stderr)
        print("Please create a .env file with YOUTUBE_API_KEY=your_key", file=sys.stderr)
        print("See .env.example for reference", file=sys.stderr)
        return 1
    except ValueError as exc:
        parser.error(str(exc))

    overrides = {}
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.language:
        overrides["language"] = args.language
    if overrides:
        config = replace(config, **overrides)

    analyzer = VideoAnalyzer(config, logger=logging.getLogger("yt_analyzer"))

    print("YouTube Video Analyzer - Interactive Mode")
    print("=========================================")
    try:
        run_interactive(analyzer, args.url, args.comments)
    except KeyboardInterrupt:
        print()

    print("Thanks for using YouTube Video Analyzer!")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
