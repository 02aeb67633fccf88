"""
TikSave - Resolver Module
=========================

Resolves TikTok links to media metadata through third-party APIs,
falling back from one endpoint to the next.

Endpoints (priority order):
- tiklydown
- tikwm
- tikcdn

Author: حَـــــنَّـــــا
"""

from .adapters import ResponseShape, SHAPE_ADAPTERS, register_adapter
from .config import (
    MediaMetadata,
    ResolutionFailure,
    ResolutionResult,
    is_supported_link,
)
from .endpoints import DEFAULT_ENDPOINTS, EndpointDescriptor
from .service import ResolverService

# Global instance
resolver = ResolverService()

__all__ = [
    "resolver",
    "ResolverService",
    "ResolutionResult",
    "ResolutionFailure",
    "MediaMetadata",
    "EndpointDescriptor",
    "DEFAULT_ENDPOINTS",
    "ResponseShape",
    "SHAPE_ADAPTERS",
    "register_adapter",
    "is_supported_link",
]
