from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from trailio.core.models import AUXILIARY_CATEGORIES, settings
from trailio.services.localization import PHRASES

router = APIRouter()


@router.get(
    "/",
    tags=["General"],
    summary="Root Redirect",
    description="Redirects to the configuration page.",
)
@router.get(
    "/{b64config}/",
    tags=["General"],
    summary="Root Redirect",
    description="Redirects to the configuration page, keeping an existing configuration.",
)
async def root(b64config: str = None):
    if b64config:
        return RedirectResponse(f"/{b64config}/configure")
    return RedirectResponse("/configure")


@router.get(
    "/health",
    tags=["General"],
    summary="Health Check",
    description="Reports the add-on version and which server-wide provider keys are set.",
)
async def health():
    return {
        "status": "ok",
        "version": settings.ADDON_VERSION,
        "providers": {
            "tmdb": settings.TMDB_API_KEY is not None,
            "serpapi": settings.SERPAPI_KEY is not None,
        },
        "languages": sorted(PHRASES),
        "categories": ["trailer", *AUXILIARY_CATEGORIES],
    }
