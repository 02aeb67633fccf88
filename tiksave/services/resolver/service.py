"""
TikSave - Resolver Service
==========================

Turns a pasted link into MediaMetadata by querying the configured endpoints
one after another until one returns a playable source URL.

Endpoints are never queried concurrently: the next one starts only after the
previous one failed or its deadline elapsed.

Author: حَـــــنَّـــــا
"""

import asyncio
import time
from typing import Iterable, Optional

import aiohttp

from tiksave.core.errors import EndpointSoftFailure
from tiksave.core.logger import log
from tiksave.utils.http import HTTPSessionManager, http_session
from tiksave.utils.text import truncate
from .config import (
    EndpointAttempt,
    MediaMetadata,
    ResolutionFailure,
    ResolutionResult,
    is_supported_link,
    normalize_link,
)
from .endpoints import DEFAULT_ENDPOINTS, EndpointDescriptor


class ResolverService:
    """Multi-source fetch-with-fallback resolver."""

    def __init__(
        self,
        endpoints: Optional[Iterable[EndpointDescriptor]] = None,
        http: Optional[HTTPSessionManager] = None,
    ) -> None:
        self.endpoints = tuple(DEFAULT_ENDPOINTS if endpoints is None else endpoints)
        self._http = http or http_session

    async def resolve(self, raw_link: str) -> ResolutionResult:
        """
        Resolve a link to metadata.

        Returns a ResolutionResult whose failure is INVALID_LINK (no network
        call was made) or ALL_SOURCES_EXHAUSTED (every endpoint soft-failed).
        """
        link = normalize_link(raw_link)
        if not is_supported_link(link):
            log.tree("Resolve Rejected", [
                ("Reason", "Unsupported link"),
                ("Input", truncate(link) or "(empty)"),
            ], emoji="❌")
            return ResolutionResult(success=False, failure=ResolutionFailure.INVALID_LINK)

        log.tree("Resolve Started", [
            ("Link", truncate(link)),
            ("Endpoints", ", ".join(e.name for e in self.endpoints) or "(none)"),
        ], emoji="🔎")

        attempts: list[EndpointAttempt] = []
        for position, endpoint in enumerate(self.endpoints, 1):
            started = time.monotonic()
            metadata, error = await self._try_endpoint(endpoint, link, position)
            elapsed_ms = int((time.monotonic() - started) * 1000)
            attempts.append(EndpointAttempt(
                endpoint=endpoint.name,
                success=metadata is not None,
                elapsed_ms=elapsed_ms,
                error=error,
            ))

            if metadata is not None:
                log.tree("Resolve Success", [
                    ("Endpoint", endpoint.name),
                    ("Title", truncate(metadata.title, 40)),
                    ("Author", metadata.author),
                    ("Elapsed", f"{elapsed_ms} ms"),
                ], emoji="✅")
                return ResolutionResult(success=True, metadata=metadata, attempts=attempts)

        log.tree("Resolve Failed (All Endpoints)", [
            ("Link", truncate(link)),
            ("Attempts", str(len(attempts))),
            ("Last Error", attempts[-1].error if attempts else "No endpoints configured"),
        ], emoji="❌")
        return ResolutionResult(
            success=False,
            failure=ResolutionFailure.ALL_SOURCES_EXHAUSTED,
            attempts=attempts,
        )

    async def _try_endpoint(
        self,
        endpoint: EndpointDescriptor,
        link: str,
        position: int,
    ) -> tuple[Optional[MediaMetadata], Optional[str]]:
        """Query one endpoint. Every failure is soft: (None, reason)."""
        url = endpoint.build_url(link)
        log.tree(f"Trying Endpoint {position}", [
            ("Name", endpoint.name),
            ("URL", truncate(url, 80)),
            ("Timeout", f"{endpoint.timeout:g}s"),
        ], emoji="🌐")

        try:
            payload = await self._http.get_json(url, timeout=endpoint.timeout)
            metadata = endpoint.parse(payload, link)
            if metadata is None:
                raise EndpointSoftFailure("No playable source URL in response")
            return metadata, None

        except asyncio.TimeoutError:
            reason = f"Timed out after {endpoint.timeout:g}s"
        except EndpointSoftFailure as e:
            reason = e.reason
        except aiohttp.ClientError as e:
            reason = f"{type(e).__name__}: {str(e)[:50]}"
        except Exception as e:
            log.error_tree("Endpoint Unexpected Error", e, [
                ("Endpoint", endpoint.name),
            ])
            reason = f"{type(e).__name__}: {str(e)[:50]}"

        log.tree("Endpoint Failed, Trying Next", [
            ("Endpoint", endpoint.name),
            ("Reason", reason),
        ], emoji="🔄")
        return None, reason
