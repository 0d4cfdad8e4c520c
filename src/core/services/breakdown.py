"""Remaining-time decomposition.

Months and years are fixed-length approximations (30 and 365 days). That is
the documented behaviour of the display, not a calendar computation.
"""

from __future__ import annotations

import math

from core.domain.models import RemainingBreakdown

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
MONTH = 30 * DAY
YEAR = 365 * DAY

# Largest unit first; suffix used by `format_breakdown`.
_UNITS: tuple[tuple[str, str], ...] = (
    ("years", "y"),
    ("months", "mo"),
    ("weeks", "w"),
    ("days", "d"),
    ("hours", "h"),
    ("minutes", "m"),
    ("seconds", "s"),
)


def decompose(remaining_seconds: float) -> RemainingBreakdown:
    """Split remaining seconds into years/months/weeks/days/hours/minutes/seconds."""

    seconds = max(0, math.floor(remaining_seconds))

    years, seconds = divmod(seconds, YEAR)
    months, seconds = divmod(seconds, MONTH)
    weeks, seconds = divmod(seconds, WEEK)
    days, seconds = divmod(seconds, DAY)
    hours, seconds = divmod(seconds, HOUR)
    minutes, seconds = divmod(seconds, MINUTE)

    return RemainingBreakdown(
        years=years,
        months=months,
        weeks=weeks,
        days=days,
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def format_breakdown(breakdown: RemainingBreakdown) -> str:
    """Render e.g. `2d 0h 5m 3s`.

    Leading zero units are dropped; once a unit is shown every smaller unit is
    shown too, zero or not. All-zero renders as `0s`.
    """

    parts: list[str] = []
    for field_name, suffix in _UNITS:
        value = getattr(breakdown, field_name)
        if parts or value:
            parts.append(f"{value}{suffix}")
    return " ".join(parts) if parts else "0s"
