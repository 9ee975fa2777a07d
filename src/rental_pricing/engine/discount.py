"""Duration discount selection — the best qualifying bracket, never a stack.

With tiers 3d/10%, 7d/15%, 30d/25%:

    days   applied
    ----   -------
      2    none
    3–6    10%  (3-day tier)
    7–29   15%  (7-day tier)
     30+   25%  (30-day tier)

A 10-day stay gets 15%, not 10% + 15%, and not 25%.  Each tier covers
``[threshold, next active threshold)``; the top active tier is open-ended.
"""

from __future__ import annotations

from collections.abc import Iterable

from rental_pricing.config.pricing import DiscountTier
from rental_pricing.models.results import AppliedDiscount


def resolve_discount(days: int, tiers: Iterable[DiscountTier]) -> AppliedDiscount | None:
    """Return the active tier with the largest ``threshold <= days``, or None.

    Percentages are read independently per tier: a 7-day tier smaller than
    the 3-day tier still wins for a 7-day stay.
    """
    # Highest threshold first; the first hit is the answer.  Do not
    # accumulate across tiers.
    for tier in sorted(tiers, key=lambda t: t.threshold, reverse=True):
        if tier.active and days >= tier.threshold:
            return AppliedDiscount(percentage=tier.percentage, threshold=tier.threshold)
    return None
