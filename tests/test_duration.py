"""Tests for engine/duration.py — hours vs days, ceiling rounding."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from rental_pricing.engine.duration import compute_units
from rental_pricing.errors import InputError

from helpers import START


def _units(hourly: bool = False, threshold: int = 24, **delta):
    return compute_units(START, START + timedelta(**delta), hourly, threshold)


# ═══════════════════════════════════════════════════════════════════════════
# Daily billing
# ═══════════════════════════════════════════════════════════════════════════

class TestDaily:

    @pytest.mark.parametrize("n", [1, 2, 7, 30, 365])
    def test_exact_days(self, n):
        u = _units(days=n)
        assert u.unit_count == n
        assert u.days == n
        assert not u.is_hourly

    @pytest.mark.parametrize("n", [1, 6, 29])
    def test_one_extra_hour_rounds_up(self, n):
        assert _units(days=n, hours=1).unit_count == n + 1

    def test_one_extra_minute_rounds_up(self):
        assert _units(days=3, minutes=1).unit_count == 4

    def test_sub_day_is_one_day(self):
        u = _units(hours=3)
        assert u.unit_count == 1
        assert u.hours == 3
        assert not u.is_hourly


# ═══════════════════════════════════════════════════════════════════════════
# Hourly billing
# ═══════════════════════════════════════════════════════════════════════════

class TestHourly:

    def test_hours_round_up(self):
        u = _units(hourly=True, hours=3, minutes=10)
        assert u.is_hourly
        assert u.unit_count == 4
        assert u.days == 1

    def test_exact_hours(self):
        assert _units(hourly=True, hours=5).unit_count == 5

    def test_just_under_threshold_is_hourly(self):
        u = _units(hourly=True, hours=23, minutes=59)
        assert u.is_hourly
        assert u.unit_count == 24

    def test_full_day_switches_to_daily(self):
        u = _units(hourly=True, hours=24)
        assert not u.is_hourly
        assert u.unit_count == 1

    def test_multi_day_with_hourly_allowed_is_daily(self):
        u = _units(hourly=True, days=2, hours=5)
        assert not u.is_hourly
        assert u.unit_count == 3
        assert u.hours == 53

    def test_custom_threshold(self):
        assert not _units(hourly=True, threshold=6, hours=7).is_hourly
        assert _units(hourly=True, threshold=6, hours=5).is_hourly


# ═══════════════════════════════════════════════════════════════════════════
# Caller errors
# ═══════════════════════════════════════════════════════════════════════════

class TestInvalidRange:

    def test_zero_length_rejected(self):
        with pytest.raises(InputError):
            compute_units(START, START, False)

    def test_negative_rejected(self):
        with pytest.raises(InputError):
            compute_units(START, START - timedelta(hours=2), True)

    def test_mixed_naive_and_aware_rejected(self):
        naive = datetime(2025, 6, 2, 10, 0)
        with pytest.raises(InputError):
            compute_units(START, naive, False)

    def test_across_timezones_uses_instants(self):
        plus_two = timezone(timedelta(hours=2))
        end = datetime(2025, 6, 3, 12, 0, tzinfo=plus_two)  # == 10:00 UTC
        assert compute_units(START, end, False).unit_count == 2
