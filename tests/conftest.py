"""Shared test fixtures."""

import os
import tempfile

# Keep logs, markers and downloads out of the checkout
_SANDBOX = tempfile.mkdtemp(prefix="tiksave_tests_")
os.environ.setdefault("TIKSAVE_DATA_DIR", os.path.join(_SANDBOX, "data"))
os.environ.setdefault("TIKSAVE_LOGS_DIR", os.path.join(_SANDBOX, "logs"))
os.environ.setdefault("TIKSAVE_DOWNLOAD_DIR", os.path.join(_SANDBOX, "downloads"))

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402

from tiksave.services.resolver import (  # noqa: E402
    EndpointDescriptor,
    MediaMetadata,
    ResponseShape,
)

from helpers import VIDEO_LINK  # noqa: E402


@pytest.fixture
def endpoints():
    """Three test endpoints in priority order."""
    return (
        EndpointDescriptor("e1", "https://e1.test/api?url={url}", ResponseShape.FLAT, timeout=1),
        EndpointDescriptor("e2", "https://e2.test/api?url={url}&hd=1", ResponseShape.NESTED, timeout=2),
        EndpointDescriptor("e3", "https://e3.test/api?url={url}", ResponseShape.FLAT, timeout=3),
    )


@pytest.fixture
def nested_payload():
    """Response in the {"data": {...}} envelope."""
    return {
        "code": 0,
        "msg": "success",
        "data": {
            "title": "Cat plays piano",
            "author": {"unique_id": "catlover", "nickname": "Cat Lover"},
            "duration": 75,
            "digg_count": 1500,
            "cover": "https://p16.test/cover.jpg",
            "play": "https://v16.test/play.mp4",
            "hdplay": "https://v16.test/hd.mp4",
            "music": "https://sf16.test/music.mp3",
        },
    }


@pytest.fixture
def flat_payload():
    """Response with fields at the top level."""
    return {
        "title": "Dog surfing",
        "author": "@surfdog",
        "duration": 31.6,
        "likes": 2_500_000,
        "cover": "https://cdn.test/cover.jpg",
        "play": "https://cdn.test/play.mp4",
        "music": {"play_url": "https://cdn.test/music.mp3"},
    }


@pytest.fixture
def metadata():
    """Resolved metadata with both source URLs."""
    return MediaMetadata(
        link=VIDEO_LINK,
        source="e2",
        title="Cat plays piano",
        author="@catlover",
        duration_seconds=75,
        like_count=1500,
        video_source_url="https://x/a.mp4",
        audio_source_url="https://x/a.mp3",
    )


@pytest.fixture
def saver(tmp_path):
    """Save mechanism that accepts everything."""
    fake = MagicMock()
    fake.save = AsyncMock(return_value=tmp_path / "saved")
    fake.open_new_tab = MagicMock(return_value=True)
    fake.navigate = MagicMock(return_value=True)
    return fake
