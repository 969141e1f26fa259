import asyncio

import aiohttp

from trailio.core.constants import YOUTUBE_WATCH_URL
from trailio.core.logger import logger
from trailio.core.models import AppSettings, StreamConfig
from trailio.metadata.models import MediaRequest, ResolvedMedia, VideoReference
from trailio.metadata.resolver import MediaResolver
from trailio.metadata.tmdb import TMDBApi
from trailio.search.serpapi import SerpApiSearch
from trailio.services.auxiliary import AuxiliarySelector
from trailio.services.localization import get_phrases
from trailio.services.trailers import TrailerSelector
from trailio.utils.formatting import format_stream_label


class StreamService:
    def __init__(
        self,
        session: aiohttp.ClientSession,
        config: StreamConfig,
        app_settings: AppSettings,
    ):
        self.config = config
        self.addon_name = app_settings.ADDON_NAME
        self.external_url = app_settings.YOUTUBE_EXTERNAL_URL

        self.tmdb = TMDBApi(session, config.tmdb_api_key)
        self.resolver = MediaResolver(self.tmdb)
        self.trailers = TrailerSelector(self.tmdb, app_settings.FALLBACK_LANGUAGE)

        self.auxiliary = None
        if config.serp_api_key:
            self.auxiliary = AuxiliarySelector(
                SerpApiSearch(session, config.serp_api_key), app_settings.SCORING
            )

    async def get_references(self, media: ResolvedMedia, media_request: MediaRequest):
        media_type = media_request.media_type
        language = media_request.language
        references = []

        trailer = await self.trailers.select(media_type, media.provider_id, language)
        if trailer is not None:
            references.append(trailer)

        if self.auxiliary is None or not self.config.categories:
            return references

        if not media.title:
            logger.log(
                "STREAM",
                f"Skipping {', '.join(self.config.categories)} for {media.provider_id}: title unknown",
            )
            return references

        auxiliary_references = await asyncio.gather(
            *[
                self.auxiliary.select(media.title, media.year, language, category)
                for category in self.config.categories
            ],
            return_exceptions=True,
        )
        for reference in auxiliary_references:
            if isinstance(reference, BaseException):
                raise reference

        references.extend(
            reference for reference in auxiliary_references if reference is not None
        )
        return references

    def format_stream(
        self, reference: VideoReference, media: ResolvedMedia, language: str
    ):
        phrases = get_phrases(language)
        stream = {
            "name": self.addon_name,
            "description": format_stream_label(
                phrases.label(reference.category),
                media.title,
                media.year,
                reference.title,
            ),
        }

        if self.external_url:
            stream["url"] = YOUTUBE_WATCH_URL.format(key=reference.key)
            stream["behaviorHints"] = {"notWebReady": True}
        else:
            stream["ytId"] = reference.key

        return stream

    async def get_streams(self, media_request: MediaRequest):
        media_type = media_request.media_type
        media_id = media_request.media_id

        if not self.config.tmdb_api_key:
            logger.warning(f"No TMDb API key available for {media_type} {media_id}")
            return []

        media = await self.resolver.resolve(
            media_type, media_id, media_request.language
        )
        if media is None:
            logger.log("STREAM", f"Could not resolve {media_type} {media_id}")
            return []

        references = await self.get_references(media, media_request)
        logger.log(
            "STREAM",
            f"{len(references)} streams for {media_type} {media_id} ({media.title or media.provider_id})",
        )
        return [
            self.format_stream(reference, media, media_request.language)
            for reference in references
        ]
