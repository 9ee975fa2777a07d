"""Tests for engine/quote.py — end-to-end booking scenarios."""

from __future__ import annotations

from decimal import Decimal

import pytest

from rental_pricing.config import Listing, OptionSelection, SecondDriverSelection
from rental_pricing.engine.quote import build_quote
from rental_pricing.engine.validator import try_enable_delivery
from rental_pricing.errors import ConfigurationError, OutOfRangeError

from helpers import PARIS, north_of, stay


def test_seven_day_booking_no_options(listing, settings):
    q = build_quote(listing, stay(days=7), settings=settings)
    assert q.price.base_price == Decimal("350")
    assert q.price.discount == 15
    assert q.price.final_price == Decimal("297.5")
    assert q.options.total == 0
    assert q.total == Decimal("297.5")
    assert q.currency == "EUR"


def test_hourly_booking(listing, settings):
    q = build_quote(listing, stay(hours=3, minutes=10), settings=settings)
    assert q.price.is_hourly
    assert q.price.unit_count == 4
    assert q.total == Decimal("32")


def test_full_booking_session(listing, settings):
    """Pick options one by one, as the reservation sheet does, then quote."""
    selection = OptionSelection(
        insurance=True,
        insurance_policy_id="premium",
        second_driver=SecondDriverSelection(enabled=True),
    )
    selection = try_enable_delivery(selection, "Rue de Rivoli", north_of(PARIS, 10), PARIS, listing.options)

    with pytest.raises(OutOfRangeError):
        try_enable_delivery(selection, "Reims", north_of(PARIS, 60), PARIS, listing.options)

    q = build_quote(listing, stay(days=7), selection, settings)
    # insurance 12 × 7 = 84, driver 25, delivery 10 km × 2 = 20
    assert q.options.insurance == Decimal("84")
    assert q.options.second_driver == Decimal("25")
    assert q.options.delivery == Decimal("20")
    assert q.total == Decimal("297.5") + Decimal("129")


def test_hourly_booking_daily_insurance_counts_one_day(listing, settings):
    selection = OptionSelection(insurance=True, insurance_policy_id="premium")
    q = build_quote(listing, stay(hours=5), selection, settings)
    assert q.price.days == 1
    assert q.options.insurance == Decimal("12")


def test_delivery_without_listing_coordinates(hourly_pricing, options_config, settings):
    listing = Listing(pricing=hourly_pricing, options=options_config)
    selection = OptionSelection.model_validate(
        {"delivery": {"enabled": True, "address": "x", "coordinates": {"lat": 48.9, "lng": 2.35}}}
    )
    with pytest.raises(ConfigurationError):
        build_quote(listing, stay(days=2), selection, settings)
