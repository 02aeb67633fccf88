"""
TikSave - Dispatcher Service
============================

Turns resolved metadata and a requested kind into a save action.
Uses the metadata's source URL first, falls back to one helper lookup.

Author: حَـــــنَّـــــا
"""

import asyncio
from pathlib import Path
from typing import Optional, Protocol

import aiohttp

from tiksave.core.config import config
from tiksave.core.logger import log
from tiksave.services.resolver.config import MediaMetadata
from tiksave.utils.http import HTTPSessionManager, http_session
from tiksave.utils.text import truncate
from .config import (
    DispatchOutcome,
    DispatchStatus,
    MediaKind,
    build_filename,
    helper_service_url,
)
from .saver import BrowserSaver


class Saver(Protocol):
    """Save mechanism the dispatcher hands URLs to."""

    async def save(self, url: str, filename: str) -> Optional[Path]: ...

    def open_new_tab(self, url: str) -> bool: ...

    def navigate(self, url: str) -> bool: ...


class DispatcherService:
    """Service for handing resolved media to the save mechanism."""

    def __init__(
        self,
        saver: Optional[Saver] = None,
        http: Optional[HTTPSessionManager] = None,
        helper_timeout: float = config.HELPER_TIMEOUT,
    ) -> None:
        self._http = http or http_session
        self.saver = saver or BrowserSaver(http=self._http)
        self._helper_timeout = helper_timeout

    async def download(self, metadata: MediaMetadata, kind: MediaKind | str) -> DispatchOutcome:
        """
        Save the media of the requested kind.

        Reports DispatchStatus.UNAVAILABLE when no URL could be obtained even
        after the helper lookup; the caller then opens a manual fallback tool.
        """
        kind = MediaKind(kind)
        url = metadata.video_source_url if kind is MediaKind.VIDEO else metadata.audio_source_url
        used_helper = False

        log.tree("Download Requested", [
            ("Kind", kind.label),
            ("Source", metadata.source),
            ("Has URL", "Yes" if url else "No"),
        ], emoji="📥")

        if not url:
            used_helper = True
            url = await self._lookup_helper(metadata.link, kind)

        if not url:
            log.tree("Download Unavailable", [
                ("Kind", kind.label),
                ("Link", truncate(metadata.link)),
            ], emoji="❌")
            return DispatchOutcome(
                status=DispatchStatus.UNAVAILABLE,
                kind=kind,
                used_helper=used_helper,
            )

        filename = build_filename(kind)
        status, path = await self._hand_off(url, filename)
        return DispatchOutcome(
            status=status,
            kind=kind,
            url=url,
            filename=filename,
            path=path,
            used_helper=used_helper,
        )

    async def _lookup_helper(self, link: str, kind: MediaKind) -> Optional[str]:
        """Ask the helper service once. Returns its URL when it answers."""
        if not link:
            return None

        url = helper_service_url(link, kind)
        log.tree("Helper Lookup", [
            ("Kind", kind.label),
            ("URL", truncate(url, 80)),
        ], emoji="🔄")

        try:
            status = await self._http.probe(url, timeout=self._helper_timeout)
        except asyncio.TimeoutError:
            log.tree("Helper Lookup Timeout", [
                ("Timeout", f"{self._helper_timeout:g}s"),
            ], emoji="⏳")
            return None
        except aiohttp.ClientError as e:
            log.tree("Helper Lookup Error", [
                ("Error", str(e)[:50]),
            ], emoji="⚠️")
            return None

        if not 200 <= status < 400:
            log.tree("Helper Lookup Failed", [
                ("Status", str(status)),
            ], emoji="⚠️")
            return None
        return url

    async def _hand_off(self, url: str, filename: str) -> tuple[DispatchStatus, Optional[Path]]:
        """Save, else open in a new tab, else navigate."""
        path = await self.saver.save(url, filename)
        if path is not None:
            return DispatchStatus.SAVED, path

        log.tree("Save Rejected, Opening New Tab", [
            ("Filename", filename),
        ], emoji="🔄")
        if self.saver.open_new_tab(url):
            return DispatchStatus.OPENED_IN_NEW_TAB, None

        if self.saver.navigate(url):
            return DispatchStatus.NAVIGATED, None

        log.tree("All Hand-off Methods Rejected", [
            ("URL", truncate(url)),
        ], emoji="❌")
        return DispatchStatus.UNAVAILABLE, None
