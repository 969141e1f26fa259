import asyncio
from typing import Optional

import aiohttp

from trailio.core.models import settings


class HttpClientManager:
    """Owns the aiohttp session shared by the TMDb and SerpAPI clients."""

    def __init__(self):
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock = asyncio.Lock()

    def _create_session(self):
        return aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(
                limit=settings.HTTP_CLIENT_LIMIT,
                limit_per_host=settings.HTTP_CLIENT_LIMIT_PER_HOST,
            ),
            timeout=aiohttp.ClientTimeout(total=settings.HTTP_CLIENT_TIMEOUT_TOTAL),
            headers={
                "Accept": "application/json",
                "User-Agent": f"{settings.ADDON_NAME}/{settings.ADDON_VERSION}",
            },
        )

    async def get_session(self) -> aiohttp.ClientSession:
        async with self._lock:
            if self._session is None or self._session.closed:
                self._session = self._create_session()
            return self._session

    async def close(self) -> None:
        async with self._lock:
            if self._session is not None and not self._session.closed:
                await self._session.close()
            self._session = None


http_client_manager = HttpClientManager()
