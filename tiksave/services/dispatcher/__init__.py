"""
TikSave - Dispatcher Module
===========================

Saves resolved media (video as mp4, audio as mp3) and provides the
third-party web tools used as manual fallbacks.

Author: حَـــــنَّـــــا
"""

from .config import (
    ALTERNATIVE_SERVICES,
    DispatchOutcome,
    DispatchStatus,
    MediaKind,
    alternative_service_url,
    build_filename,
    manual_fallback_url,
)
from .saver import BrowserSaver
from .service import DispatcherService

# Global instance
dispatcher = DispatcherService()

__all__ = [
    "dispatcher",
    "DispatcherService",
    "BrowserSaver",
    "DispatchOutcome",
    "DispatchStatus",
    "MediaKind",
    "ALTERNATIVE_SERVICES",
    "alternative_service_url",
    "build_filename",
    "manual_fallback_url",
]
