"""
TikSave - Error System
======================

Centralized error codes and exceptions for the resolver and dispatcher.

Only the terminal conditions reach the caller, and they are reported as
values on the result objects. EndpointSoftFailure never leaves the
resolver loop.

Author: حَـــــنَّـــــا
"""

from enum import Enum
from typing import Dict, Optional


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCode(str, Enum):
    """
    Centralized error codes.

    Categories:
    - Input: rejected before any network call
    - Endpoint: recovered locally by moving to the next endpoint
    - Terminal: surfaced to the caller
    """

    # Input (before any network call)
    INVALID_LINK = "INVALID_LINK"

    # Per-endpoint, always recovered
    ENDPOINT_SOFT_FAILURE = "ENDPOINT_SOFT_FAILURE"

    # Terminal
    ALL_SOURCES_EXHAUSTED = "ALL_SOURCES_EXHAUSTED"
    DISPATCH_UNAVAILABLE = "DISPATCH_UNAVAILABLE"


# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.INVALID_LINK: "Please enter a valid TikTok link",
    ErrorCode.ENDPOINT_SOFT_FAILURE: "Endpoint did not return usable data",
    ErrorCode.ALL_SOURCES_EXHAUSTED: "Video information not found",
    ErrorCode.DISPATCH_UNAVAILABLE: "Download link not found",
}


def error_message(code: ErrorCode) -> str:
    """Get the user-facing message for an error code."""
    return ERROR_MESSAGES.get(code, "An error occurred")


# =============================================================================
# Exceptions
# =============================================================================

class TikSaveError(Exception):
    """Base exception carrying an error code."""

    def __init__(self, code: ErrorCode, message: Optional[str] = None):
        self.error_code = code
        self.error_message = message or error_message(code)
        super().__init__(self.error_message)


class EndpointSoftFailure(TikSaveError):
    """
    A single endpoint failed (bad status, undecodable body, unusable payload).

    Raised by the HTTP layer and the resolver, caught by the resolver loop.
    """

    def __init__(self, reason: str, status: Optional[int] = None):
        self.reason = reason
        self.status = status
        super().__init__(ErrorCode.ENDPOINT_SOFT_FAILURE, reason)
