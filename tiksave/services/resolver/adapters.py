"""
TikSave - Response Shape Adapters
=================================

One adapter per known response shape. Each maps an endpoint's JSON body to
MediaMetadata, or returns None when there is no playable source URL.

The shapes are reverse-engineered from undocumented third-party APIs and may
drift, so every field is read leniently: wrong types become None instead of
raising.

Adding a source with a new shape means adding a ResponseShape member and one
function decorated with @register_adapter.

Author: حَـــــنَّـــــا
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from .config import DEFAULT_AUTHOR, DEFAULT_TITLE, MediaMetadata


class ResponseShape(str, Enum):
    """Known endpoint response envelopes."""
    NESTED = "nested"  # {"data": {...}}
    FLAT = "flat"      # fields at the top level


Adapter = Callable[[Any, str, str], Optional[MediaMetadata]]

SHAPE_ADAPTERS: Dict[ResponseShape, Adapter] = {}


def register_adapter(shape: ResponseShape) -> Callable[[Adapter], Adapter]:
    """Register an adapter function for a response shape."""
    def decorator(func: Adapter) -> Adapter:
        SHAPE_ADAPTERS[shape] = func
        return func
    return decorator


def get_adapter(shape: ResponseShape) -> Adapter:
    """Look up the adapter for a shape."""
    try:
        return SHAPE_ADAPTERS[shape]
    except KeyError:
        raise LookupError(f"No adapter registered for shape {shape!r}") from None


# =============================================================================
# Lenient Field Readers
# =============================================================================

def _text(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _url(value: Any) -> Optional[str]:
    text = _text(value)
    if not text:
        return None
    if text.startswith("//"):
        return "https:" + text
    if text.lower().startswith(("http://", "https://")):
        return text
    return None


def _non_negative(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if number != number or number < 0 or number == float("inf"):
        return None
    return number


def _count(value: Any) -> Optional[int]:
    number = _non_negative(value)
    return int(number) if number is not None else None


def _author(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        handle = _text(value.get("unique_id")) or _text(value.get("username"))
        if handle:
            return handle if handle.startswith("@") else f"@{handle}"
        return _text(value.get("nickname"))
    return _text(value)


def _music(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return _url(value.get("play")) or _url(value.get("play_url"))
    return _url(value)


def _first(record: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return None


def _build(record: Dict[str, Any], link: str, source: str) -> Optional[MediaMetadata]:
    """Map a field record (either envelope's payload) to MediaMetadata."""
    video_url = _url(record.get("hdplay")) or _url(record.get("play"))
    if not video_url:
        return None

    return MediaMetadata(
        link=link,
        source=source,
        title=_text(record.get("title")) or DEFAULT_TITLE,
        author=_author(record.get("author")) or DEFAULT_AUTHOR,
        duration_seconds=_non_negative(record.get("duration")),
        like_count=_count(_first(record, "like_count", "likes", "digg_count")),
        thumbnail_url=_url(record.get("cover")),
        video_source_url=video_url,
        audio_source_url=_music(record.get("music")) or _music(record.get("music_info")),
    )


# =============================================================================
# Adapters
# =============================================================================

@register_adapter(ResponseShape.NESTED)
def adapt_nested(payload: Any, link: str, source: str) -> Optional[MediaMetadata]:
    """{"code": 0, "data": {"play": ..., "title": ...}}"""
    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, dict):
        return None
    return _build(data, link, source)


@register_adapter(ResponseShape.FLAT)
def adapt_flat(payload: Any, link: str, source: str) -> Optional[MediaMetadata]:
    """{"play": ..., "title": ...}"""
    if not isinstance(payload, dict):
        return None
    return _build(payload, link, source)
