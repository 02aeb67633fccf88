"""
TikSave - Resolver Configuration
================================

Link patterns and data classes for the resolver service.

Author: حَـــــنَّـــــا
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from urllib.parse import quote

from tiksave.core.errors import ErrorCode
from tiksave.utils.text import format_duration, format_number


# =============================================================================
# Link Patterns
# =============================================================================

# Pre-compiled, anchored at the start; query strings and fragments are allowed
LINK_PATTERNS = [
    re.compile(r"^(?:https?://)?(?:www\.|m\.)?tiktok\.com/@[\w.-]+/video/\d+(?:[/?#].*)?$", re.IGNORECASE),
    re.compile(r"^(?:https?://)?(?:vm|vt)\.tiktok\.com/[\w-]+/?(?:[?#].*)?$", re.IGNORECASE),
    re.compile(r"^(?:https?://)?(?:www\.|m\.)?tiktok\.com/t/[\w-]+/?(?:[?#].*)?$", re.IGNORECASE),
    re.compile(r"^(?:https?://)?m\.tiktok\.com/v/\d+\.html(?:[?#].*)?$", re.IGNORECASE),
]


# =============================================================================
# Display Defaults
# =============================================================================

DEFAULT_TITLE = "TikTok Video"
DEFAULT_AUTHOR = "@user"


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class MediaMetadata:
    """Normalized media record produced by one successful resolution."""
    link: str
    source: str
    title: str = DEFAULT_TITLE
    author: str = DEFAULT_AUTHOR
    duration_seconds: Optional[float] = None
    like_count: Optional[int] = None
    thumbnail_url: Optional[str] = None
    video_source_url: Optional[str] = None
    audio_source_url: Optional[str] = None

    @property
    def duration_display(self) -> str:
        return format_duration(self.duration_seconds)

    @property
    def likes_display(self) -> str:
        return format_number(self.like_count)


class ResolutionFailure(str, Enum):
    """Terminal resolver conditions reported to the caller."""
    INVALID_LINK = ErrorCode.INVALID_LINK.value
    ALL_SOURCES_EXHAUSTED = ErrorCode.ALL_SOURCES_EXHAUSTED.value

    @property
    def code(self) -> ErrorCode:
        return ErrorCode(self.value)


@dataclass
class EndpointAttempt:
    """One endpoint call made during a resolution."""
    endpoint: str
    success: bool
    elapsed_ms: int
    error: Optional[str] = None


@dataclass
class ResolutionResult:
    """Result of a resolve operation."""
    success: bool
    metadata: Optional[MediaMetadata] = None
    failure: Optional[ResolutionFailure] = None
    attempts: list[EndpointAttempt] = field(default_factory=list)


# =============================================================================
# Helper Functions
# =============================================================================

def normalize_link(raw: str) -> str:
    """Strip whitespace from a pasted link."""
    return raw.strip() if isinstance(raw, str) else ""


def is_supported_link(link: str) -> bool:
    """Syntactic check only, no reachability."""
    if not link:
        return False
    return any(pattern.match(link) for pattern in LINK_PATTERNS)


def encode_link(link: str) -> str:
    """URL-encode a link for use as a query parameter value."""
    return quote(link, safe="")
