"""
TikSave - Front-end
===================

Command-line front-end: resolve a link, show the preview, save the chosen
kind. Owns the user-facing policies the services leave to their caller:
placeholder preview on total failure, manual fallback tool when a download
is unavailable, and the first-run demo.

Author: حَـــــنَّـــــا
"""

import argparse
import webbrowser
from pathlib import Path
from typing import Callable, Optional

from tiksave import __version__
from tiksave.core.config import config
from tiksave.core.errors import error_message
from tiksave.core.logger import log
from tiksave.services.dispatcher import (
    ALTERNATIVE_SERVICES,
    DispatcherService,
    MediaKind,
    alternative_service_url,
    dispatcher as default_dispatcher,
    manual_fallback_url,
)
from tiksave.services.resolver import (
    MediaMetadata,
    ResolutionFailure,
    ResolverService,
    resolver as default_resolver,
)
from tiksave.utils.text import truncate


# =============================================================================
# Exit Codes
# =============================================================================

EXIT_OK = 0
EXIT_INVALID_LINK = 1
EXIT_UNAVAILABLE = 2


# =============================================================================
# Preview Data
# =============================================================================

# Used for the manual fallback tools when no link was given
DEMO_LINK = "https://www.tiktok.com/@tiktok/video/7324356767578967302"

SAMPLE_METADATA = MediaMetadata(
    link=DEMO_LINK,
    source="demo",
    title="Beautiful Nature - Scenic Views",
    author="@nature_lover",
    duration_seconds=75,
    like_count=25_400,
    thumbnail_url="https://images.unsplash.com/photo-1593693399708-8f2f13d84f1f?w=400&h=225&fit=crop&auto=format",
    video_source_url="https://example.com/video.mp4",
    audio_source_url="https://example.com/audio.mp3",
)


def placeholder_metadata(link: str) -> MediaMetadata:
    """Preview shown when every endpoint failed. Has no source URLs."""
    return MediaMetadata(
        link=link,
        source="placeholder",
        duration_seconds=45,
        like_count=1_200,
    )


def render_preview(metadata: MediaMetadata) -> None:
    """Print the preview card."""
    log.tree("Video Preview", [
        ("Title", metadata.title),
        ("Author", metadata.author),
        ("Duration", metadata.duration_display),
        ("Likes", metadata.likes_display),
        ("Thumbnail", truncate(metadata.thumbnail_url) if metadata.thumbnail_url else "-"),
        ("Source", metadata.source),
    ], emoji="🎬")


# =============================================================================
# First Run
# =============================================================================

class FirstRunFlag:
    """The single "seen before" marker kept between runs."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or config.FIRST_RUN_FLAG)

    def is_first_run(self) -> bool:
        return not self.path.exists()

    def mark_initialized(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("true", encoding="utf-8")


# =============================================================================
# App
# =============================================================================

class App:
    """Wires the resolver and dispatcher to the user."""

    def __init__(
        self,
        resolver: Optional[ResolverService] = None,
        dispatcher: Optional[DispatcherService] = None,
        first_run: Optional[FirstRunFlag] = None,
        open_url: Callable[[str], bool] = webbrowser.open_new_tab,
    ) -> None:
        self.resolver = resolver or default_resolver
        self.dispatcher = dispatcher or default_dispatcher
        self.first_run = first_run or FirstRunFlag()
        self.open_url = open_url

    def show_demo_once(self) -> bool:
        """Show the sample preview on the very first run."""
        if not self.first_run.is_first_run():
            return False
        render_preview(SAMPLE_METADATA)
        log.info("Showing demo. Paste your TikTok link to download!")
        self.first_run.mark_initialized()
        return True

    def open_alternative(self, link: str, number: int) -> bool:
        """Open alternative web tool `number` (1-based) for the link."""
        name, _ = ALTERNATIVE_SERVICES[number - 1]
        url = alternative_service_url(link or DEMO_LINK, number - 1)
        log.tree("Opening Alternative Downloader", [
            ("Service", name),
            ("URL", truncate(url, 80)),
        ], emoji="🔗")
        return self.open_url(url)

    async def run(
        self,
        link: str,
        kind: MediaKind = MediaKind.VIDEO,
        preview_only: bool = False,
    ) -> int:
        """Resolve, preview, download. Returns a process exit code."""
        self.show_demo_once()

        result = await self.resolver.resolve(link)
        if result.failure is ResolutionFailure.INVALID_LINK:
            log.error(error_message(result.failure.code))
            return EXIT_INVALID_LINK

        if result.success:
            metadata = result.metadata
        else:
            log.warning(f"{error_message(result.failure.code)}, showing placeholder preview")
            metadata = placeholder_metadata(link.strip())

        render_preview(metadata)
        if preview_only:
            return EXIT_OK

        outcome = await self.dispatcher.download(metadata, kind)
        if not outcome.success:
            url = manual_fallback_url(metadata.link or DEMO_LINK, kind)
            self.open_url(url)
            log.warning("Alternative downloader opened. Download from there.")
            return EXIT_UNAVAILABLE

        if outcome.path is not None:
            log.success(f"{kind.label} saved to {outcome.path}")
        else:
            log.success("Download started in your browser.")
        return EXIT_OK


# =============================================================================
# Command Line
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tiksave",
        description="Download TikTok videos or their audio from a link.",
    )
    parser.add_argument("link", nargs="?", default="", help="TikTok video link")
    parser.add_argument(
        "--kind",
        choices=[k.value for k in MediaKind],
        default=MediaKind.VIDEO.value,
        help="what to save (default: video)",
    )
    parser.add_argument(
        "--preview-only",
        action="store_true",
        help="show the preview without downloading",
    )
    parser.add_argument(
        "--alt",
        type=int,
        choices=range(1, len(ALTERNATIVE_SERVICES) + 1),
        metavar="N",
        help="open alternative web downloader N (1-%d) instead" % len(ALTERNATIVE_SERVICES),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


async def main(argv: Optional[list[str]] = None) -> int:
    """Entry point used by main.py."""
    args = build_parser().parse_args(argv)
    app = App()

    if args.alt is not None:
        app.open_alternative(args.link, args.alt)
        return EXIT_OK

    if not args.link:
        log.error("Please enter a TikTok video link")
        return EXIT_INVALID_LINK

    return await app.run(args.link, MediaKind(args.kind), args.preview_only)
