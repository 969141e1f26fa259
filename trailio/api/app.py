import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from trailio.api.endpoints import base, config, manifest
from trailio.api.endpoints import stream as streams_router
from trailio.core.logger import logger
from trailio.utils.http_client import http_client_manager

PUBLIC_ROOTS = ("", "configure", "manifest.json", "stream", "health", "docs", "openapi.json")


def mask_config_path(path: str):
    # the first segment may be a base64 config carrying API keys
    parts = path.split("/")
    if len(parts) > 2 and parts[1] not in PUBLIC_ROOTS:
        parts[1] = "<config>"
    return "/".join(parts)


class StreamLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = mask_config_path(request.url.path)
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            logger.exception(f"{request.method} {path} failed: {e}")
            raise

        logger.log(
            "API",
            f"{request.method} {path} - {response.status_code} - {time.perf_counter() - start_time:.2f}s",
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await http_client_manager.get_session()
    try:
        yield
    finally:
        await http_client_manager.close()


app = FastAPI(
    title="Trailio",
    summary="Trailers, making-of and ending explained videos for Stremio.",
    lifespan=lifespan,
    redoc_url=None,
)


app.add_middleware(StreamLogMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(base.router)
app.include_router(config.router)
app.include_router(manifest.router)
app.include_router(streams_router.streams)
