from typing import Literal

from pydantic import BaseModel, ConfigDict


class MediaRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    media_type: Literal["movie", "series"]
    media_id: str  # Full ID (e.g., "tt0111161:1:1" or "tmdb:278")
    language: str = "en-US"


class ResolvedMedia(BaseModel):
    model_config = ConfigDict(frozen=True)

    provider_id: str
    title: str = ""
    year: str = ""  # 4 digits or empty


class VideoCandidate(BaseModel):
    model_config = ConfigDict(frozen=True)

    site: str
    category: Literal["Trailer", "Teaser", "Other"] = "Other"
    key: str
    title: str = ""
    description: str = ""
    duration: int = 0  # seconds
    official: bool = False


class VideoReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: Literal["trailer", "making", "ending"]
    key: str
    title: str = ""
