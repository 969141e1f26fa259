from trailio.core.constants import NATIVE_ID_PREFIX
from trailio.core.exceptions import ProviderError
from trailio.core.logger import logger
from trailio.metadata.models import ResolvedMedia
from trailio.metadata.tmdb import TMDBApi
from trailio.utils.parsing import parse_media_id

RESULT_KEYS = {"movie": "movie_results", "series": "tv_results"}
TITLE_KEYS = {"movie": "title", "series": "name"}
DATE_KEYS = {"movie": "release_date", "series": "first_air_date"}


def _extract_year(date: str):
    if date and len(date) >= 4 and date[:4].isdigit():
        return date[:4]
    return ""


class MediaResolver:
    """Maps Stremio ids onto TMDb ids plus display metadata."""

    def __init__(self, tmdb: TMDBApi):
        self.tmdb = tmdb

    async def resolve(self, media_type: str, media_id: str, language: str):
        external_id, _, _ = parse_media_id(media_id)

        if external_id.startswith(NATIVE_ID_PREFIX):
            provider_id = external_id[len(NATIVE_ID_PREFIX) :]
            if not provider_id:
                return None
            return ResolvedMedia(provider_id=provider_id)

        try:
            data = await self.tmdb.find_by_imdb_id(external_id, language)
        except ProviderError as e:
            logger.warning(f"Cross-reference lookup failed for {external_id}: {e}")
            return None

        results = data.get(RESULT_KEYS[media_type]) or []
        if not results:
            logger.log("TMDB", f"No {media_type} match for {external_id}")
            return None

        entry = results[0]
        if not isinstance(entry, dict) or "id" not in entry:
            return None

        return ResolvedMedia(
            provider_id=str(entry["id"]),
            title=entry.get(TITLE_KEYS[media_type]) or "",
            year=_extract_year(entry.get(DATE_KEYS[media_type])),
        )
