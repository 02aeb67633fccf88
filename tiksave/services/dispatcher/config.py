"""
TikSave - Dispatcher Configuration
==================================

Media kinds, fallback services, and data classes for the dispatcher.

Author: حَـــــنَّـــــا
"""

import time
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from tiksave.services.resolver.config import encode_link


# =============================================================================
# Media Kinds
# =============================================================================

class MediaKind(str, Enum):
    """What the user asked to save."""
    VIDEO = "video"
    AUDIO = "audio"

    @property
    def extension(self) -> str:
        return "mp4" if self is MediaKind.VIDEO else "mp3"

    @property
    def label(self) -> str:
        return "HD Video" if self is MediaKind.VIDEO else "Audio"


# =============================================================================
# External Services
# =============================================================================

# Helper lookup used when the metadata has no source URL for a kind.
# Best effort: the result may be a page rather than the media file itself.
HELPER_SERVICE_TEMPLATES = {
    MediaKind.VIDEO: "https://ssstik.io/abc?url={url}",
    MediaKind.AUDIO: "https://ssstik.io/abc?url={url}&type=audio",
}

# Public web tools opened in a new tab, fire-and-forget
ALTERNATIVE_SERVICES = (
    ("SnapTik", "https://snaptik.app/en?url={url}"),
    ("SSSTik", "https://ssstik.io/en?url={url}"),
    ("TikDown", "https://tikdown.org/en?url={url}"),
)

# Manual fallback opened by the caller when a dispatch is unavailable
MANUAL_FALLBACK_SERVICE = {
    MediaKind.VIDEO: 1,  # SSSTik
    MediaKind.AUDIO: 0,  # SnapTik
}


# =============================================================================
# Data Classes
# =============================================================================

class DispatchStatus(str, Enum):
    """Which hand-off step accepted the URL."""
    SAVED = "saved"
    OPENED_IN_NEW_TAB = "opened_in_new_tab"
    NAVIGATED = "navigated"
    UNAVAILABLE = "unavailable"


@dataclass
class DispatchOutcome:
    """Result of a download dispatch."""
    status: DispatchStatus
    kind: MediaKind
    url: Optional[str] = None
    filename: Optional[str] = None
    path: Optional[Path] = None
    used_helper: bool = False

    @property
    def success(self) -> bool:
        return self.status is not DispatchStatus.UNAVAILABLE


# =============================================================================
# Helper Functions
# =============================================================================

def build_filename(kind: MediaKind, now_ms: Optional[int] = None) -> str:
    """<kind>_<epoch-millis>.<ext>"""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{kind.value}_{now_ms}.{kind.extension}"


def helper_service_url(link: str, kind: MediaKind) -> str:
    """Construct the helper lookup URL for a kind."""
    return HELPER_SERVICE_TEMPLATES[kind].format(url=encode_link(link))


def alternative_service_url(link: str, index: int) -> str:
    """URL of alternative web tool `index` (0-based) pre-filled with the link."""
    _, template = ALTERNATIVE_SERVICES[index]
    return template.format(url=encode_link(link))


def manual_fallback_url(link: str, kind: MediaKind) -> str:
    """The web tool a caller opens when a dispatch is unavailable."""
    return alternative_service_url(link, MANUAL_FALLBACK_SERVICE[kind])
