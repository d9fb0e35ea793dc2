#!/usr/bin/env python3
"""Error kinds raised while analyzing a video."""


class AnalyzerError(Exception):
    """Base exception for analyzer errors."""

    kind = "analyzer_error"


class InvalidInput(AnalyzerError, ValueError):
    """The URL does not contain a recognizable video ID."""

    kind = "invalid_input"


class NotFound(AnalyzerError):
    """The API returned no item for the requested video."""

    kind = "not_found"


class ParseError(AnalyzerError):
    """An API response body was not valid JSON."""

    kind = "parse_error"


class TransportError(AnalyzerError):
    """The request never produced a usable response."""

    kind = "transport_error"


class TranscriptUnavailable(AnalyzerError):
    """Every transcript attempt failed or returned no segments."""

    kind = "transcript_unavailable"
