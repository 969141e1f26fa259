from fastapi import APIRouter, Request

from trailio.core.config_validation import apply_query_overrides, config_check
from trailio.core.constants import NATIVE_ID_PREFIX, SUPPORTED_KINDS
from trailio.core.models import settings

router = APIRouter()


@router.get(
    "/manifest.json",
    tags=["Stremio"],
    summary="Add-on Manifest",
    description="Returns the add-on manifest.",
)
@router.get(
    "/{b64config}/manifest.json",
    tags=["Stremio"],
    summary="Add-on Manifest",
    description="Returns the add-on manifest with existing configuration.",
)
async def manifest(request: Request, b64config: str = None):
    config = apply_query_overrides(config_check(b64config), request.query_params)
    has_tmdb_key = bool(config["tmdbApiKey"] or settings.TMDB_API_KEY)

    base_manifest = {
        "id": settings.ADDON_ID,
        "name": settings.ADDON_NAME,
        "description": "Trailers, making-of and ending explained videos from TMDb and YouTube.",
        "version": settings.ADDON_VERSION,
        "catalogs": [],
        "resources": [
            {
                "name": "stream",
                "types": list(SUPPORTED_KINDS),
                "idPrefixes": ["tt", NATIVE_ID_PREFIX],
            }
        ],
        "types": list(SUPPORTED_KINDS),
        "config": [
            {
                "key": "tmdbApiKey",
                "type": "text",
                "title": "TMDb API key",
                "required": not settings.TMDB_API_KEY,
            },
            {
                "key": "language",
                "type": "text",
                "title": "Language (e.g. en-US, es-ES)",
                "default": settings.TMDB_LANGUAGE,
            },
            {
                "key": "serpApiKey",
                "type": "text",
                "title": "SerpAPI key (making-of and ending explained)",
            },
        ],
        "behaviorHints": {
            "configurable": True,
            "configurationRequired": not has_tmdb_key,
        },
    }

    if not has_tmdb_key:
        base_manifest["description"] = (
            f"⚠️ TMDb API KEY REQUIRED, PLEASE CONFIGURE ON {request.url.scheme}://{request.url.netloc}/configure ⚠️"
        )

    return base_manifest
