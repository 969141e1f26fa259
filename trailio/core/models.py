from typing import List, Optional

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScoringWeights(BaseModel):
    """Point values used to rank auxiliary search results."""

    title_match: int = 5
    ending_phrase: int = 8
    ending_long_duration: int = 3
    ending_long_seconds: int = 180
    ending_short_penalty: int = -4
    ending_short_seconds: int = 60
    making_phrase: int = 6
    behind_scenes_phrase: int = 6
    interview_phrase: int = 3
    making_long_duration: int = 2
    making_long_seconds: int = 120
    making_short_penalty: int = -3
    making_short_seconds: int = 45
    language_match: int = 6
    english_mismatch_penalty: int = -4
    trailer_penalty: int = -5
    min_score: int = 5


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    ADDON_ID: Optional[str] = "community.trailio"
    ADDON_NAME: Optional[str] = "Trailio"
    ADDON_VERSION: Optional[str] = "1.0.0"
    FASTAPI_HOST: Optional[str] = "0.0.0.0"
    FASTAPI_PORT: Optional[int] = 7000
    LOG_LEVEL: Optional[str] = "DEBUG"
    TMDB_API_KEY: Optional[str] = None
    TMDB_LANGUAGE: Optional[str] = "en-US"
    TMDB_URL: Optional[str] = "https://api.themoviedb.org/3"
    SERPAPI_KEY: Optional[str] = None
    SERPAPI_URL: Optional[str] = "https://serpapi.com"
    SEARCH_MAX_RESULTS: Optional[int] = 10
    FALLBACK_LANGUAGE: Optional[str] = "en-US"
    YOUTUBE_EXTERNAL_URL: Optional[bool] = False
    HTTP_CLIENT_TIMEOUT_TOTAL: Optional[int] = 15
    HTTP_CLIENT_LIMIT: Optional[int] = 100
    HTTP_CLIENT_LIMIT_PER_HOST: Optional[int] = 20
    CUSTOM_HEADER_HTML: Optional[str] = None
    SCORING: ScoringWeights = ScoringWeights()

    @field_validator("TMDB_URL", "SERPAPI_URL")
    def remove_trailing_slash(cls, v):
        if v and v.endswith("/"):
            return v[:-1]
        return v

    @field_validator("TMDB_API_KEY", "SERPAPI_KEY")
    def empty_key_is_none(cls, v):
        if v is not None and v.strip() == "":
            return None
        return v


settings = AppSettings()


AUXILIARY_CATEGORIES = ["making", "ending"]


class ConfigModel(BaseModel):
    tmdbApiKey: Optional[str] = ""
    language: Optional[str] = ""
    serpApiKey: Optional[str] = ""
    categories: Optional[List[str]] = AUXILIARY_CATEGORIES

    @field_validator("tmdbApiKey", "serpApiKey", "language")
    def strip_value(cls, v):
        return v.strip() if v else ""

    @field_validator("categories")
    def check_categories(cls, v):
        if v is None:
            return AUXILIARY_CATEGORIES
        return [category for category in v if category in AUXILIARY_CATEGORIES]


default_config = ConfigModel().model_dump()


class StreamConfig(BaseModel):
    """Effective per-request parameters after merging user and server values."""

    tmdb_api_key: Optional[str] = None
    language: str = "en-US"
    serp_api_key: Optional[str] = None
    categories: List[str] = AUXILIARY_CATEGORIES
