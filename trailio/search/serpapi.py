import asyncio
import re

import aiohttp

from trailio.core.constants import RECOGNIZED_SITE
from trailio.core.exceptions import ProviderError
from trailio.core.logger import logger
from trailio.core.models import settings
from trailio.metadata.models import VideoCandidate
from trailio.utils.formatting import parse_duration
from trailio.utils.parsing import split_language

YOUTUBE_KEY_PATTERN = re.compile(
    r"(?:youtube\.com/(?:watch\?(?:.*&)?v=|shorts/|embed/)|youtu\.be/)([A-Za-z0-9_-]{11})"
)


def extract_youtube_key(link: str):
    if not link:
        return None

    match = YOUTUBE_KEY_PATTERN.search(link)
    return match.group(1) if match else None


class SerpApiSearch:
    def __init__(self, session: aiohttp.ClientSession, api_key: str):
        self.session = session
        self.api_key = api_key
        self.url = f"{settings.SERPAPI_URL}/search.json"

    async def search_videos(self, query: str, language: str):
        lang, region = split_language(language)
        params = {
            "engine": "google_videos",
            "q": query,
            "hl": lang,
            "num": settings.SEARCH_MAX_RESULTS,
            "api_key": self.api_key,
        }
        if region:
            params["gl"] = region.lower()

        try:
            async with self.session.get(self.url, params=params) as response:
                if response.status != 200:
                    text = await response.text()
                    raise ProviderError(
                        "SerpAPI", f"search returned {response.status}: {text}", response.status
                    )

                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError("SerpAPI", f"search request failed: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError("SerpAPI", "search returned a malformed payload")

        if data.get("error") and not data.get("video_results"):
            # "no results" is reported through the error field
            logger.log("SEARCH", f"No results for '{query}': {data['error']}")
            return []

        candidates = []
        for result in (data.get("video_results") or [])[: settings.SEARCH_MAX_RESULTS]:
            key = extract_youtube_key(result.get("link"))
            if key is None:
                continue

            candidates.append(
                VideoCandidate(
                    site=RECOGNIZED_SITE,
                    key=key,
                    title=result.get("title") or "",
                    description=result.get("snippet") or result.get("description") or "",
                    duration=parse_duration(result.get("duration") or result.get("length")),
                )
            )

        logger.log("SEARCH", f"{len(candidates)} YouTube results for '{query}'")
        return candidates
