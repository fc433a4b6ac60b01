"""
Jeet level classification and hold-time formatting.

Tiers are checked in ascending order with a strict < on each upper bound;
anything at or above one day is Diamond Hands. Negative averages (not
produced by valid data) land in the first tier by plain comparison.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

ZONE_RED = "red"
ZONE_YELLOW = "yellow"
ZONE_GREEN = "green"

MINUTE = 60
HOUR = 3600
DAY = 86400


@dataclass(frozen=True)
class JeetLevel:
    level: str
    emoji: str
    zone: str  # red | yellow | green

    @property
    def label(self) -> str:
        return f"{self.emoji} {self.level}"


# (exclusive upper bound in seconds, level)
JEET_TIERS: tuple[tuple[float, JeetLevel], ...] = (
    (30, JeetLevel("Atomic Jeet", "⚡", ZONE_RED)),
    (60, JeetLevel("Grandmaster Jeet", "🏎️", ZONE_RED)),
    (300, JeetLevel("Speed Demon", "💨", ZONE_RED)),
    (900, JeetLevel("Quick Flip", "🔄", ZONE_YELLOW)),
    (3600, JeetLevel("Swing Trader", "📊", ZONE_YELLOW)),
    (86400, JeetLevel("Patient Player", "⏳", ZONE_GREEN)),
)
DIAMOND_HANDS = JeetLevel("Diamond Hands", "💎", ZONE_GREEN)


def get_jeet_level(avg_seconds: float) -> JeetLevel:
    """Map average hold seconds to a JeetLevel. Total over all real numbers."""
    for max_seconds, level in JEET_TIERS:
        if avg_seconds < max_seconds:
            return level
    return DIAMOND_HANDS


def format_hold_time(seconds: float) -> str:
    """
    Human-readable hold time.

    Negatives clamp to 0, fractions floor. "59 seconds", "1 second", "1m 30s",
    "1h 1m" (seconds dropped), "1d 1h" (minutes dropped).
    """
    total = max(0, math.floor(seconds))

    if total < MINUTE:
        return f"{total} second{'' if total == 1 else 's'}"

    days, rem = divmod(total, DAY)
    hours, rem = divmod(rem, HOUR)
    minutes, secs = divmod(rem, MINUTE)

    if days:
        return f"{days}d {hours}h" if hours else f"{days}d"
    if hours:
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"
    return f"{minutes}m {secs}s" if secs else f"{minutes}m"
