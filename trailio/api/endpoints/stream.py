from fastapi import APIRouter, Request

from trailio.core.config_validation import (
    apply_query_overrides,
    build_stream_config,
    config_check,
)
from trailio.core.constants import SUPPORTED_KINDS
from trailio.core.exceptions import ProviderError
from trailio.core.logger import logger
from trailio.core.models import settings
from trailio.metadata.models import MediaRequest
from trailio.services.orchestration import StreamService
from trailio.utils.http_client import http_client_manager

streams = APIRouter()


@streams.get(
    "/stream/{media_type}/{media_id}.json",
    tags=["Stremio"],
    summary="Stream Provider",
    description="Returns trailer and related video streams for a title.",
)
@streams.get(
    "/{b64config}/stream/{media_type}/{media_id}.json",
    tags=["Stremio"],
    summary="Stream Provider",
    description="Returns trailer and related video streams for a title using an existing configuration.",
)
async def stream(
    request: Request,
    media_type: str,
    media_id: str,
    b64config: str = None,
):
    if media_type not in SUPPORTED_KINDS:
        return {"streams": []}

    config = apply_query_overrides(config_check(b64config), request.query_params)
    stream_config = build_stream_config(config)
    media_request = MediaRequest(
        media_type=media_type, media_id=media_id, language=stream_config.language
    )

    logger.log(
        "STREAM",
        f"Stream request for {media_type} {media_id} ({media_request.language})",
    )

    try:
        session = await http_client_manager.get_session()
        stream_service = StreamService(session, stream_config, settings)
        results = await stream_service.get_streams(media_request)
    except ProviderError as e:
        logger.warning(f"Provider failure for {media_type} {media_id}: {e}")
        return {"streams": []}
    except Exception as e:
        logger.exception(f"Unexpected error for {media_type} {media_id}: {e}")
        return {"streams": []}

    return {"streams": results}
