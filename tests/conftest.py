"""Fake aiohttp session shared by the provider and endpoint tests."""

from dataclasses import dataclass, field

import pytest


class FakeResponse:
    def __init__(self, status: int = 200, payload=None, text: str = "", error=None):
        self.status = status
        self.payload = payload if payload is not None else {}
        self._text = text
        self.error = error

    async def json(self):
        return self.payload

    async def text(self):
        return self._text

    async def __aenter__(self):
        if self.error is not None:
            raise self.error
        return self

    async def __aexit__(self, *args):
        return False


@dataclass
class Call:
    url: str
    params: dict = field(default_factory=dict)
    headers: dict = field(default_factory=dict)


class FakeSession:
    """Routes ``get`` calls by URL suffix.

    A route is either a ``FakeResponse`` or a callable receiving the query
    parameters and returning one. Unknown URLs answer 404.
    """

    def __init__(self, routes: dict = None):
        self.routes = routes or {}
        self.calls: list[Call] = []

    def get(self, url: str, params: dict = None, headers: dict = None, **kwargs):
        params = dict(params or {})
        self.calls.append(Call(url, params, dict(headers or {})))

        for suffix, route in self.routes.items():
            if url.endswith(suffix):
                return route(params) if callable(route) else route

        return FakeResponse(404, {"status_message": "not found"}, text="not found")

    def calls_to(self, suffix: str):
        return [call for call in self.calls if call.url.endswith(suffix)]


SHAWSHANK_FIND = {
    "movie_results": [
        {
            "id": 278,
            "title": "The Shawshank Redemption",
            "release_date": "1994-09-23",
        }
    ],
    "tv_results": [],
}

SHAWSHANK_VIDEOS = {
    "id": 278,
    "results": [
        {
            "iso_639_1": "en",
            "iso_3166_1": "US",
            "name": "The Shawshank Redemption - Official Trailer [HD]",
            "key": "6hB3S9bIaco",
            "site": "YouTube",
            "size": 1080,
            "type": "Trailer",
            "official": True,
        }
    ],
}


@pytest.fixture
def shawshank_session():
    return FakeSession(
        {
            "/find/tt0111161": FakeResponse(200, SHAWSHANK_FIND),
            "/movie/278/videos": FakeResponse(200, SHAWSHANK_VIDEOS),
        }
    )
