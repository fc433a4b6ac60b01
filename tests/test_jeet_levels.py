"""
Pytest tests for jeet level tiers and hold-time formatting.
"""

from __future__ import annotations

import pytest

from jeet_timer.analytics.jeet_levels import (
    DIAMOND_HANDS,
    ZONE_GREEN,
    ZONE_RED,
    ZONE_YELLOW,
    format_hold_time,
    get_jeet_level,
)


@pytest.mark.parametrize(
    "seconds, level",
    [
        (0, "Atomic Jeet"),
        (29, "Atomic Jeet"),
        (29.99, "Atomic Jeet"),
        (30, "Grandmaster Jeet"),
        (59, "Grandmaster Jeet"),
        (60, "Speed Demon"),
        (299, "Speed Demon"),
        (300, "Quick Flip"),
        (899, "Quick Flip"),
        (900, "Swing Trader"),
        (3599, "Swing Trader"),
        (3600, "Patient Player"),
        (86399, "Patient Player"),
        (86400, "Diamond Hands"),
        (10_000_000, "Diamond Hands"),
    ],
)
def test_tier_boundaries(seconds, level):
    assert get_jeet_level(seconds).level == level


def test_negative_average_falls_in_lowest_tier():
    assert get_jeet_level(-5).level == "Atomic Jeet"


def test_tier_zones_and_label():
    assert get_jeet_level(10).zone == ZONE_RED
    assert get_jeet_level(200).zone == ZONE_RED
    assert get_jeet_level(600).zone == ZONE_YELLOW
    assert get_jeet_level(1800).zone == ZONE_YELLOW
    assert get_jeet_level(7200).zone == ZONE_GREEN
    assert get_jeet_level(86400) == DIAMOND_HANDS
    assert DIAMOND_HANDS.label == "💎 Diamond Hands"
    assert get_jeet_level(1).label == "⚡ Atomic Jeet"


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (59, "59 seconds"),
        (60, "1m"),
        (90, "1m 30s"),
        (3600, "1h"),
        (3661, "1h 1m"),
        (7199, "1h 59m"),
        (86400, "1d"),
        (90000, "1d 1h"),
        (90061, "1d 1h"),
        (1.9, "1 second"),
        (59.99, "59 seconds"),
        (65.5, "1m 5s"),
        (-1, "0 seconds"),
        (-3600, "0 seconds"),
    ],
)
def test_format_hold_time(seconds, expected):
    assert format_hold_time(seconds) == expected
