"""Billable units for a date range — hours or days, always rounded up."""

from __future__ import annotations

from datetime import datetime, timedelta

from rental_pricing.errors import InputError
from rental_pricing.models.results import UnitCount

_HOUR = timedelta(hours=1)
_DAY = timedelta(days=1)


def _ceil_div(elapsed: timedelta, unit: timedelta) -> int:
    whole, rest = divmod(elapsed, unit)
    return whole + (1 if rest else 0)


def compute_units(
    start: datetime,
    end: datetime,
    hourly_allowed: bool,
    hourly_threshold_hours: int = 24,
) -> UnitCount:
    """Convert ``[start, end)`` into a billable unit count.

    Hourly billing applies only when the listing allows it and the elapsed
    time is under ``hourly_threshold_hours``.  Otherwise days are billed:
    exactly N×24h is N days, N×24h + 1 min is N+1.

    Raises ``InputError`` for an empty or inverted range; it is never
    clamped to one unit.
    """
    try:
        elapsed = end - start
    except TypeError as exc:
        raise InputError("start and end must both be naive or both be timezone-aware") from exc

    if elapsed <= timedelta(0):
        raise InputError(f"end ({end.isoformat()}) must be after start ({start.isoformat()})")

    hours = _ceil_div(elapsed, _HOUR)
    days = max(_ceil_div(elapsed, _DAY), 1)
    is_hourly = hourly_allowed and elapsed < timedelta(hours=hourly_threshold_hours)

    return UnitCount(
        unit_count=hours if is_hourly else days,
        is_hourly=is_hourly,
        hours=hours,
        days=days,
    )
