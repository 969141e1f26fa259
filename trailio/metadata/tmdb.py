import asyncio

import aiohttp

from trailio.core.exceptions import ProviderError
from trailio.core.logger import logger
from trailio.core.models import settings
from trailio.metadata.models import VideoCandidate

VIDEO_CATEGORIES = ("Trailer", "Teaser")


def tmdb_media_path(media_type: str):
    return "tv" if media_type == "series" else "movie"


class TMDBApi:
    def __init__(self, session: aiohttp.ClientSession, api_key: str):
        self.session = session
        self.base_url = settings.TMDB_URL
        self.headers = {"Content-Type": "application/json"}
        self.params = {}

        # v4 read access tokens are JWTs, v3 keys are plain hex strings
        if api_key and api_key.startswith("eyJ"):
            self.headers["Authorization"] = f"Bearer {api_key}"
        elif api_key:
            self.params["api_key"] = api_key

    async def _get(self, path: str, params: dict):
        url = f"{self.base_url}{path}"
        try:
            async with self.session.get(
                url, headers=self.headers, params={**self.params, **params}
            ) as response:
                if response.status != 200:
                    text = await response.text()
                    raise ProviderError(
                        "TMDB", f"{path} returned {response.status}: {text}", response.status
                    )

                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError("TMDB", f"{path} request failed: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError("TMDB", f"{path} returned a malformed payload")

        return data

    async def find_by_imdb_id(self, imdb_id: str, language: str):
        return await self._get(
            f"/find/{imdb_id}",
            {"external_source": "imdb_id", "language": language},
        )

    async def get_videos(self, media_type: str, tmdb_id: str, language: str):
        data = await self._get(
            f"/{tmdb_media_path(media_type)}/{tmdb_id}/videos",
            {"language": language},
        )

        videos = []
        for result in data.get("results") or []:
            if not isinstance(result, dict) or not result.get("key"):
                continue

            video_type = result.get("type")
            videos.append(
                VideoCandidate(
                    site=result.get("site") or "",
                    category=video_type if video_type in VIDEO_CATEGORIES else "Other",
                    key=result["key"],
                    title=result.get("name") or "",
                    official=bool(result.get("official")),
                )
            )

        logger.log(
            "TMDB",
            f"{len(videos)} videos for {media_type} {tmdb_id} in {language}",
        )
        return videos
