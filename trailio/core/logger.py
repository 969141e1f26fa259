import sys

from loguru import logger

from trailio.core.log_levels import CUSTOM_LOG_LEVELS, STANDARD_LOG_LEVELS
from trailio.core.models import settings


def setupLogger(level: str):
    # Configure custom log levels
    for level_name, level_config in CUSTOM_LOG_LEVELS.items():
        logger.level(
            level_name,
            no=level_config["no"],
            icon=level_config["icon"],
            color=level_config["loguru_color"],
        )

    # Configure standard log levels (override defaults)
    for level_name, level_config in STANDARD_LOG_LEVELS.items():
        logger.level(
            level_name, icon=level_config["icon"], color=level_config["loguru_color"]
        )

    log_format = (
        "<white>{time:YYYY-MM-DD}</white> <magenta>{time:HH:mm:ss}</magenta> | "
        "<level>{level.icon}</level> <level>{level}</level> | "
        "<cyan>{module}</cyan>.<cyan>{function}</cyan> - <level>{message}</level>"
    )

    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": level,
                "format": log_format,
                "backtrace": False,
                "diagnose": False,
                "enqueue": True,
            }
        ]
    )


setupLogger(settings.LOG_LEVEL)


def _mask(value: str | None):
    if not value:
        return "not set"
    return f"{value[:4]}****" if len(value) > 8 else "****"


def log_startup_info(settings):
    logger.log(
        "TRAILIO",
        f"Server started on http://{settings.FASTAPI_HOST}:{settings.FASTAPI_PORT}",
    )
    logger.log("TRAILIO", f"Addon: {settings.ADDON_NAME} ({settings.ADDON_ID}) v{settings.ADDON_VERSION}")
    logger.log(
        "TRAILIO",
        f"TMDb: {settings.TMDB_URL} - Default Key: {_mask(settings.TMDB_API_KEY)} - Default Language: {settings.TMDB_LANGUAGE} - Fallback Language: {settings.FALLBACK_LANGUAGE}",
    )
    logger.log(
        "TRAILIO",
        f"SerpAPI: {settings.SERPAPI_URL} - Default Key: {_mask(settings.SERPAPI_KEY)} - Max Results: {settings.SEARCH_MAX_RESULTS}",
    )
    logger.log(
        "TRAILIO",
        f"YouTube Playback: {'external url' if settings.YOUTUBE_EXTERNAL_URL else 'ytId'}",
    )
    logger.log(
        "TRAILIO",
        f"Auxiliary Minimum Score: {settings.SCORING.min_score}",
    )
