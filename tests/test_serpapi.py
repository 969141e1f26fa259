import pytest

from conftest import FakeResponse, FakeSession
from trailio.core.exceptions import ProviderError
from trailio.search.serpapi import SerpApiSearch, extract_youtube_key


def test_extract_youtube_key():
    assert extract_youtube_key("https://www.youtube.com/watch?v=6hB3S9bIaco") == "6hB3S9bIaco"
    assert extract_youtube_key("https://www.youtube.com/watch?feature=share&v=6hB3S9bIaco") == "6hB3S9bIaco"
    assert extract_youtube_key("https://youtu.be/6hB3S9bIaco?t=10") == "6hB3S9bIaco"
    assert extract_youtube_key("https://www.youtube.com/shorts/6hB3S9bIaco") == "6hB3S9bIaco"
    assert extract_youtube_key("https://www.youtube.com/embed/6hB3S9bIaco") == "6hB3S9bIaco"
    assert extract_youtube_key("https://vimeo.com/12345") is None
    assert extract_youtube_key(None) is None


@pytest.mark.asyncio
async def test_results_are_limited_to_youtube():
    session = FakeSession(
        {
            "/search.json": FakeResponse(
                200,
                {
                    "video_results": [
                        {"title": "A", "link": "https://www.dailymotion.com/video/x1"},
                        {"title": "B", "link": "https://youtu.be/bbbbbbbbbbb", "duration": "1:01:01"},
                    ]
                },
            )
        }
    )

    candidates = await SerpApiSearch(session, "serpkey").search_videos("query", "es-ES")

    assert [candidate.key for candidate in candidates] == ["bbbbbbbbbbb"]
    assert candidates[0].duration == 3661
    assert candidates[0].site == "YouTube"
    assert session.calls[0].params["hl"] == "es"
    assert session.calls[0].params["gl"] == "es"


@pytest.mark.asyncio
async def test_language_without_region_omits_gl():
    session = FakeSession({"/search.json": FakeResponse(200, {"video_results": []})})

    await SerpApiSearch(session, "serpkey").search_videos("query", "fr")

    assert "gl" not in session.calls[0].params


@pytest.mark.asyncio
async def test_empty_search_is_reported_through_error_field():
    session = FakeSession(
        {"/search.json": FakeResponse(200, {"error": "Google hasn't returned any results for this query."})}
    )

    assert await SerpApiSearch(session, "serpkey").search_videos("query", "en-US") == []


@pytest.mark.asyncio
async def test_non_success_status_raises_provider_error():
    session = FakeSession({"/search.json": FakeResponse(401, text="Invalid API key")})

    with pytest.raises(ProviderError):
        await SerpApiSearch(session, "badkey").search_videos("query", "en-US")
