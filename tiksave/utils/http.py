"""
TikSave - HTTP Utilities
========================

Shared HTTP session for all services.

Author: Unknown
"""

from typing import Any, Dict, Optional

import aiohttp

from tiksave.core.errors import EndpointSoftFailure

# Generic desktop browser identity sent to third-party APIs
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

JSON_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "application/json",
}


class HTTPSessionManager:
    """Lazy-initialized HTTP session manager."""

    _session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create the HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    def get(self, url: str, **kwargs):
        """Return a GET request context manager (use with async with)."""
        return self.session.get(url, **kwargs)

    async def get_json(
        self,
        url: str,
        timeout: float,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        GET a JSON document with a deadline bound to this single call.

        Raises:
            EndpointSoftFailure: non-2xx status or undecodable body
            asyncio.TimeoutError: deadline elapsed
            aiohttp.ClientError: network failure
        """
        async with self.session.get(
            url,
            headers=headers or JSON_HEADERS,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as resp:
            if not 200 <= resp.status < 300:
                # Consume response body to properly close connection
                await resp.read()
                raise EndpointSoftFailure(f"HTTP {resp.status}", status=resp.status)
            try:
                return await resp.json(content_type=None)
            except ValueError as e:
                raise EndpointSoftFailure("Response is not valid JSON") from e

    async def probe(self, url: str, timeout: float) -> int:
        """GET a URL only to learn its status code."""
        async with self.session.get(
            url,
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as resp:
            await resp.read()
            return resp.status

    async def close(self) -> None:
        """Close the session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None


# Global instance
http_session = HTTPSessionManager()
