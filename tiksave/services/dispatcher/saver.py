"""
TikSave - Save Mechanism
========================

Hands a media URL to the local machine: stream it into the download
directory, or open it in the system browser.

Author: حَـــــنَّـــــا
"""

import asyncio
import webbrowser
from pathlib import Path
from typing import Optional

import aiohttp

from tiksave.core.config import config
from tiksave.core.logger import log
from tiksave.utils.http import BROWSER_USER_AGENT, HTTPSessionManager, http_session
from tiksave.utils.text import truncate


class BrowserSaver:
    """
    Default save mechanism.

    Each method reports rejection instead of raising: save() returns None,
    open_new_tab() and navigate() return False.
    """

    def __init__(
        self,
        download_dir: Optional[Path] = None,
        http: Optional[HTTPSessionManager] = None,
        timeout: float = config.SAVE_TIMEOUT,
    ) -> None:
        self.download_dir = Path(download_dir or config.DOWNLOAD_DIR)
        self._http = http or http_session
        self._timeout = timeout

    async def save(self, url: str, filename: str) -> Optional[Path]:
        """
        Download a single file with streaming for memory efficiency.
        Returns the Path on success, None on failure.
        """
        file_path = self.download_dir / filename
        log.tree("File Download Starting", [
            ("Filename", filename),
            ("URL", truncate(url)),
        ], emoji="⬇️")

        try:
            self.download_dir.mkdir(parents=True, exist_ok=True)
            async with self._http.get(
                url,
                headers={"User-Agent": BROWSER_USER_AGENT},
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if resp.status != 200:
                    await resp.read()
                    log.tree("File Download Failed", [
                        ("Filename", filename),
                        ("Status", str(resp.status)),
                    ], emoji="⚠️")
                    return None

                # A web page is not media, let the browser handle it
                if (resp.content_type or "").startswith("text/"):
                    await resp.read()
                    log.tree("File Download Rejected", [
                        ("Filename", filename),
                        ("Content-Type", resp.content_type),
                    ], emoji="⚠️")
                    return None

                # Stream to disk for memory efficiency
                with open(file_path, "wb") as f:
                    async for chunk in resp.content.iter_chunked(8192):
                        f.write(chunk)

            size_mb = file_path.stat().st_size / (1024 * 1024)
            log.tree("File Downloaded", [
                ("Path", str(file_path)),
                ("Size", f"{size_mb:.1f} MB"),
            ], emoji="✅")
            return file_path

        except asyncio.TimeoutError:
            log.tree("File Download Timeout", [
                ("Filename", filename),
                ("Timeout", f"{self._timeout:g}s"),
            ], emoji="⏳")
        except (aiohttp.ClientError, OSError) as e:
            log.tree("File Download Error", [
                ("Filename", filename),
                ("Error", str(e)[:50]),
            ], emoji="⚠️")

        if file_path.exists():
            file_path.unlink()
        return None

    def open_new_tab(self, url: str) -> bool:
        """Open the URL in a new browser tab."""
        opened = webbrowser.open_new_tab(url)
        log.tree("Opened In New Tab" if opened else "New Tab Rejected", [
            ("URL", truncate(url)),
        ], emoji="🔗" if opened else "⚠️")
        return opened

    def navigate(self, url: str) -> bool:
        """Open the URL in the current browser window."""
        opened = webbrowser.open(url, new=0)
        log.tree("Navigated To URL" if opened else "Navigation Rejected", [
            ("URL", truncate(url)),
        ], emoji="🔗" if opened else "❌")
        return opened
