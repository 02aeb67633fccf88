"""TikSave - Utils Package."""

from tiksave.utils.http import http_session, HTTPSessionManager
from tiksave.utils.text import format_duration, format_number, truncate

__all__ = [
    "http_session",
    "HTTPSessionManager",
    "format_duration",
    "format_number",
    "truncate",
]
