from __future__ import annotations

import http.client
import io
import urllib.error
from datetime import timezone

import pytest

import common as common_module
from common import extract_video_id, format_published_date, get_json, parse_published_datetime
from config import DEFAULT_TIMEOUT_SECONDS
from errors import InvalidInput, ParseError, TransportError


@pytest.mark.parametrize(
    "url",
    [
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ",
        "https://youtu.be/dQw4w9WgXcQ?si=abc123",
        "https://www.youtube.com/embed/dQw4w9WgXcQ",
        "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42s&list=PL123",
        "https://www.youtube.com/watch?feature=share&v=dQw4w9WgXcQ",
        "https://m.youtube.com/watch?v=dQw4w9WgXcQ#comments",
        "  https://www.youtube.com/watch?v=dQw4w9WgXcQ  ",
    ],
)
def test_extract_video_id_supported_shapes(url: str) -> None:
    assert extract_video_id(url) == "dQw4w9WgXcQ"


def test_extract_video_id_rejects_other_domains() -> None:
    with pytest.raises(InvalidInput):
        extract_video_id("https://vimeo.com/123456")


def test_invalid_input_is_still_a_value_error() -> None:
    with pytest.raises(ValueError):
        extract_video_id("not-a-video-url")


def test_parse_published_datetime_returns_utc_aware_datetime() -> None:
    parsed = parse_published_datetime("2026-02-17T11:22:33Z")
    assert parsed is not None
    assert parsed.tzinfo == timezone.utc
    assert parsed.hour == 11


def test_format_published_date_falls_back_for_missing_value() -> None:
    assert format_published_date("2024-03-05T23:10:00Z") == "2024-03-05"
    assert format_published_date(None) == "N/A"
    assert format_published_date("garbage") == "N/A"


def test_get_json_decodes_payload_and_encodes_params(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def fake_urlopen(url, timeout):
        captured["url"] = url
        captured["timeout"] = timeout
        return io.BytesIO(b'{"items": [1, 2]}')

    monkeypatch.setattr(common_module.urllib.request, "urlopen", fake_urlopen)

    payload = get_json("https://example.test/videos", {"id": "abc", "part": "snippet,statistics"}, timeout_seconds=3)

    assert payload == {"items": [1, 2]}
    assert captured["url"] == "https://example.test/videos?id=abc&part=snippet%2Cstatistics"
    assert captured["timeout"] == 3


def test_get_json_raises_parse_error_for_invalid_body(monkeypatch) -> None:
    monkeypatch.setattr(common_module.urllib.request, "urlopen", lambda *_args, **_kwargs: io.BytesIO(b"<html>"))

    with pytest.raises(ParseError):
        get_json("https://example.test/videos")


def test_get_json_maps_http_error_to_transport_error(monkeypatch) -> None:
    def fake_urlopen(url, timeout):
        raise urllib.error.HTTPError(
            url,
            403,
            "Forbidden",
            {},
            io.BytesIO(b'{"error": {"message": "API key not valid"}}'),
        )

    monkeypatch.setattr(common_module.urllib.request, "urlopen", fake_urlopen)

    with pytest.raises(TransportError, match="HTTP 403.*API key not valid"):
        get_json("https://example.test/videos", {"key": "secret"})


def test_get_json_maps_connection_failure_to_transport_error(monkeypatch) -> None:
    def fake_urlopen(url, timeout):
        raise urllib.error.URLError("Name or service not known")

    monkeypatch.setattr(common_module.urllib.request, "urlopen", fake_urlopen)

    with pytest.raises(TransportError, match="Name or service not known"):
        get_json("https://example.test/videos")


def test_get_json_maps_truncated_body_to_transport_error(monkeypatch) -> None:
    class TruncatedResponse(io.BytesIO):
        def read(self, *_args):
            raise http.client.IncompleteRead(b'{"ite', 100)

    monkeypatch.setattr(common_module.urllib.request, "urlopen", lambda *_args, **_kwargs: TruncatedResponse())

    with pytest.raises(TransportError, match="IncompleteRead"):
        get_json("https://example.test/videos")


def test_get_json_uses_configured_default_timeout(monkeypatch) -> None:
    captured: dict[str, object] = {}

    def fake_urlopen(url, timeout):
        captured["timeout"] = timeout
        return io.BytesIO(b"{}")

    monkeypatch.setattr(common_module.urllib.request, "urlopen", fake_urlopen)

    get_json("https://example.test/videos")

    assert captured["timeout"] == DEFAULT_TIMEOUT_SECONDS
