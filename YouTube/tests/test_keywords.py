from __future__ import annotations

from keywords import extract_keywords_from_description, resolve_keywords
from models import VideoInfo


def test_hashtags_are_returned_without_prefix() -> None:
    keywords = extract_keywords_from_description("Check this out #coding #js")

    assert "coding" in keywords
    assert "js" in keywords
    assert all(not keyword.startswith("#") for keyword in keywords)


def test_marker_lines_contribute_first_three_clean_words() -> None:
    description = "Intro line\nPython Tips, asyncio tricks, visit https://example.com now please\nbye"

    assert extract_keywords_from_description(description) == ["Python", "Tips", "asyncio"]


def test_marker_words_are_case_sensitive_and_long_lines_skipped() -> None:
    long_line = "Code " + "word " * 30
    description = f"some tips here\n{long_line}"

    assert extract_keywords_from_description(description) == []


def test_tokens_with_urls_handles_or_dots_are_dropped() -> None:
    description = "Code by @someone at site.com with http://x and Rust Go"

    assert extract_keywords_from_description(description) == ["Code", "with", "and"]


def test_extraction_is_idempotent_deduplicated_and_capped() -> None:
    tags = " ".join(f"#tag{i}" for i in range(15))
    description = f"{tags} #tag1 #tag2\nCode Tips Tricks"

    first = extract_keywords_from_description(description)
    second = extract_keywords_from_description(description)

    assert first == second
    assert len(first) == 10
    assert len(set(first)) == len(first)
    assert first[:3] == ["tag0", "tag1", "tag2"]


def test_empty_description_yields_nothing() -> None:
    assert extract_keywords_from_description("") == []
    assert extract_keywords_from_description(None) == []


def test_resolve_keywords_prefers_tags_even_when_empty() -> None:
    tagged = VideoInfo(video_id="a", title="t", description="#ignored", tags=("python", "tips"))
    empty_tags = VideoInfo(video_id="a", title="t", description="#ignored", tags=())
    untagged = VideoInfo(video_id="a", title="t", description="#used")

    assert resolve_keywords(tagged) == ["python", "tips"]
    assert resolve_keywords(empty_tags) == []
    assert resolve_keywords(untagged) == ["used"]
