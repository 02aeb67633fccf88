"""Display formatting tests."""

import pytest

from tiksave.utils.text import format_duration, format_number, truncate


@pytest.mark.parametrize("seconds, expected", [
    (0, "0:00"),
    (None, "0:00"),
    (75, "1:15"),
    (5, "0:05"),
    (59.9, "0:59"),
    (3600, "60:00"),
    ("90", "1:30"),
    (-10, "0:00"),
    ("abc", "0:00"),
    (float("nan"), "0:00"),
])
def test_format_duration(seconds, expected):
    """Seconds are floored and zero-padded; unusable values show 0:00."""
    assert format_duration(seconds) == expected


@pytest.mark.parametrize("num, expected", [
    (None, "0"),
    (0, "0"),
    (999, "999"),
    (1000, "1.0K"),
    (1500, "1.5K"),
    (25_400, "25.4K"),
    (1_250, "1.3K"),
    (2_500_000, "2.5M"),
    (1_000_000, "1.0M"),
    (999_949, "999.9K"),
    (999_950, "1.0M"),
    ("4200", "4.2K"),
    ("many", "0"),
    (True, "0"),
])
def test_format_number(num, expected):
    """Counts use K/M suffixes with one half-up decimal."""
    assert format_number(num) == expected


def test_truncate():
    """Long log values are cut with an ellipsis."""
    assert truncate("short") == "short"
    assert truncate("x" * 70, 60) == "x" * 60 + "..."
