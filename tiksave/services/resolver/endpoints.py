"""
TikSave - Resolver Endpoints
============================

Priority-ordered list of third-party metadata APIs.

Author: حَـــــنَّـــــا
"""

from dataclasses import dataclass
from typing import Any, Optional

from tiksave.core.config import config
from .adapters import ResponseShape, get_adapter
from .config import MediaMetadata, encode_link


@dataclass(frozen=True)
class EndpointDescriptor:
    """One external API candidate: URL template, response shape, deadline."""
    name: str
    url_template: str  # "{url}" is replaced with the encoded link
    shape: ResponseShape
    timeout: float = config.ENDPOINT_TIMEOUT

    def build_url(self, link: str) -> str:
        return self.url_template.format(url=encode_link(link))

    def parse(self, payload: Any, link: str) -> Optional[MediaMetadata]:
        return get_adapter(self.shape)(payload, link, self.name)


# Tried strictly in this order, one at a time
DEFAULT_ENDPOINTS = (
    EndpointDescriptor(
        name="tiklydown",
        url_template="https://api.tiklydown.com/api/download?url={url}",
        shape=ResponseShape.FLAT,
    ),
    EndpointDescriptor(
        name="tikwm",
        url_template="https://www.tikwm.com/api/?url={url}&hd=1",
        shape=ResponseShape.NESTED,
    ),
    EndpointDescriptor(
        name="tikcdn",
        url_template="https://tikcdn.io/api/ajaxSearch?url={url}",
        shape=ResponseShape.FLAT,
    ),
)
