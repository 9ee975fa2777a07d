"""Tests for engine/discount.py — the single best tier wins, never a stack."""

from __future__ import annotations

import pytest

from rental_pricing.config import DiscountTier
from rental_pricing.engine.discount import resolve_discount


@pytest.mark.parametrize(
    "days, expected",
    [
        (1, None),
        (2, None),
        (3, (10, 3)),
        (6, (10, 3)),
        (7, (15, 7)),
        (10, (15, 7)),
        (29, (15, 7)),
        (30, (25, 30)),
        (365, (25, 30)),
    ],
)
def test_bracket_boundaries(three_tiers, days, expected):
    applied = resolve_discount(days, three_tiers)
    if expected is None:
        assert applied is None
    else:
        assert (applied.percentage, applied.threshold) == expected


def test_does_not_stack(three_tiers):
    """A 30-day stay gets the 30-day percentage alone, not 10 + 15 + 25."""
    assert resolve_discount(30, three_tiers).percentage == 25


def test_order_of_tiers_irrelevant(three_tiers):
    assert resolve_discount(8, list(reversed(three_tiers))) == resolve_discount(8, three_tiers)


def test_no_tiers():
    assert resolve_discount(100, []) is None


def test_inactive_tiers_skipped():
    tiers = [
        DiscountTier(threshold=3, percentage=10),
        DiscountTier(threshold=7, percentage=0),
        DiscountTier(threshold=30, percentage=None),
    ]
    # 7 and 30 disabled → 3-day tier covers everything from 3 days up
    assert resolve_discount(45, tiers).threshold == 3
    assert resolve_discount(2, tiers) is None


def test_only_top_tier_configured():
    tiers = [DiscountTier(threshold=30, percentage=20)]
    assert resolve_discount(29, tiers) is None
    assert resolve_discount(30, tiers).percentage == 20


def test_non_monotonic_percentages_do_not_crash():
    """7-day smaller than 3-day: still the highest qualifying threshold wins."""
    tiers = [DiscountTier(threshold=3, percentage=20), DiscountTier(threshold=7, percentage=5)]
    assert resolve_discount(4, tiers).percentage == 20
    assert resolve_discount(7, tiers).percentage == 5
