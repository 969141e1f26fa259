from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from trailio.core.config_validation import config_check
from trailio.core.models import AUXILIARY_CATEGORIES, settings

router = APIRouter()
templates = Jinja2Templates(Path(__file__).resolve().parents[2] / "templates")


@router.get(
    "/configure",
    tags=["Configuration"],
    summary="Configuration Page",
    description="Renders the configuration page.",
)
@router.get(
    "/{b64config}/configure",
    tags=["Configuration"],
    summary="Configuration Page",
    description="Renders the configuration page with existing configuration.",
)
async def configure(request: Request, b64config: str = None):
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "CUSTOM_HEADER_HTML": settings.CUSTOM_HEADER_HTML
            if settings.CUSTOM_HEADER_HTML
            else "",
            "addonName": settings.ADDON_NAME,
            "config": config_check(b64config),
            "categories": AUXILIARY_CATEGORIES,
            "defaultLanguage": settings.TMDB_LANGUAGE,
            "hasServerTmdbKey": bool(settings.TMDB_API_KEY),
        },
    )
