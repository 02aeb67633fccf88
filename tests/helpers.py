"""Test helpers shared across modules."""

from unittest.mock import AsyncMock, MagicMock
from urllib.parse import urlparse

VIDEO_LINK = "https://www.tiktok.com/@scout2015/video/6718335390845095173"


def make_http(outcomes):
    """
    Fake HTTPSessionManager whose get_json answers by host name.

    outcomes maps host -> payload, or host -> exception instance to raise.
    """
    def get_json(url, timeout, headers=None):
        outcome = outcomes[urlparse(url).hostname]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    http = MagicMock()
    http.get_json = AsyncMock(side_effect=get_json)
    http.probe = AsyncMock(return_value=200)
    return http


def called_hosts(http):
    """Hosts queried through get_json, in call order."""
    return [urlparse(call.args[0]).hostname for call in http.get_json.call_args_list]


class FakeContent:
    """Stand-in for aiohttp's StreamReader."""

    def __init__(self, chunks):
        self.chunks = list(chunks)

    async def iter_chunked(self, size):
        for chunk in self.chunks:
            yield chunk


class FakeResponse:
    """Stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status=200, chunks=(), json_body=None, json_error=None, content_type="video/mp4"):
        self.status = status
        self.content_type = content_type
        self.content = FakeContent(chunks)
        self._json_body = json_body
        self._json_error = json_error
        self.read_called = False

    async def read(self):
        self.read_called = True
        return b"".join(self.content.chunks)

    async def json(self, content_type="application/json"):
        if self._json_error is not None:
            raise self._json_error
        return self._json_body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False


def fake_session(response):
    """A ClientSession stand-in whose get() always returns `response`."""
    session = MagicMock()
    session.closed = False
    session.get = MagicMock(return_value=response)
    session.close = AsyncMock()
    return session
