from trailio.core.constants import RECOGNIZED_SITE
from trailio.core.logger import logger
from trailio.metadata.models import VideoCandidate, VideoReference
from trailio.metadata.tmdb import TMDBApi
from trailio.services.localization import LanguagePhrases, get_phrases
from trailio.utils.formatting import clean_video_title


def is_recognized_site(video: VideoCandidate):
    return video.site.lower() == RECOGNIZED_SITE.lower()


def _is_official_trailer(video: VideoCandidate, phrases: LanguagePhrases):
    if video.category == "Trailer" and video.official:
        return True

    title = video.title.lower()
    return any(word in title for word in phrases.trailer_words)


def _is_trailer_or_teaser(video: VideoCandidate, phrases: LanguagePhrases):
    return video.category in ("Trailer", "Teaser")


def _any_video(video: VideoCandidate, phrases: LanguagePhrases):
    return True


# evaluated in order, the first rule with a match wins
SELECTION_RULES = [
    ("official trailer", _is_official_trailer),
    ("trailer or teaser", _is_trailer_or_teaser),
    ("first video", _any_video),
]


def pick_trailer(videos: list[VideoCandidate], language: str):
    phrases = get_phrases(language)
    recognized = [video for video in videos if is_recognized_site(video)]

    for rule_name, rule in SELECTION_RULES:
        for video in recognized:
            if rule(video, phrases):
                logger.log("STREAM", f"Trailer {video.key} picked by rule '{rule_name}'")
                return video

    return None


class TrailerSelector:
    def __init__(self, tmdb: TMDBApi, fallback_language: str):
        self.tmdb = tmdb
        self.fallback_language = fallback_language

    async def select(self, media_type: str, provider_id: str, language: str):
        languages = [language]
        if self.fallback_language:
            languages.append(self.fallback_language)

        # ProviderError propagates, only an empty result moves on to the fallback
        for fetch_language in languages:
            videos = await self.tmdb.get_videos(media_type, provider_id, fetch_language)
            video = pick_trailer(videos, fetch_language)
            if video is not None:
                return VideoReference(
                    category="trailer",
                    key=video.key,
                    title=clean_video_title(video.title),
                )

            logger.log(
                "STREAM",
                f"No {RECOGNIZED_SITE} trailer for {media_type} {provider_id} in {fetch_language}",
            )

        return None
