"""
TikSave - Core Package
======================

Framework essentials: config, errors, and logging.

Author: حَـــــنَّـــــا
"""

from tiksave.core.config import config
from tiksave.core.errors import ErrorCode, EndpointSoftFailure, TikSaveError
from tiksave.core.logger import log

__all__ = ["config", "log", "ErrorCode", "EndpointSoftFailure", "TikSaveError"]
