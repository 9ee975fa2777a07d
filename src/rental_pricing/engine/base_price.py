"""Rental price for a date range — units × rate, minus the duration discount."""

from __future__ import annotations

import logging
from decimal import Decimal

from rental_pricing.config.pricing import DateRange, ListingPricingConfig
from rental_pricing.config.settings import EngineSettings, get_settings
from rental_pricing.engine.discount import resolve_discount
from rental_pricing.engine.duration import compute_units
from rental_pricing.engine.money import to_money
from rental_pricing.errors import ConfigurationError
from rental_pricing.models.results import PriceBreakdown

logger = logging.getLogger(__name__)


def calculate_base_price(
    date_range: DateRange,
    config: ListingPricingConfig,
    settings: EngineSettings | None = None,
) -> PriceBreakdown:
    """Compute base and final rental price.

    Hourly bookings never get a duration discount.  Raises
    ``ConfigurationError`` when the rate for the chosen unit is missing
    rather than pricing at zero.
    """
    settings = settings or get_settings()

    # A zero hourly rate counts as no hourly rate
    hourly_rate = config.price_per_hour if config.price_per_hour else None

    if config.price_per_day is None and not (config.hourly_allowed and hourly_rate is not None):
        raise ConfigurationError("listing has neither a daily nor an hourly rate")

    units = compute_units(
        date_range.start,
        date_range.end,
        config.hourly_allowed,
        settings.hourly_threshold_hours,
    )

    unit_rate = hourly_rate if units.is_hourly else config.price_per_day
    if unit_rate is None:
        unit = "hourly" if units.is_hourly else "daily"
        raise ConfigurationError(f"{unit} billing applies to this booking but no {unit} rate is configured")

    base_price = unit_rate * units.unit_count

    applied = None if units.is_hourly else resolve_discount(units.unit_count, config.discount_tiers)
    percentage = applied.percentage if applied else 0

    # No tier → factor is exactly 1, same formula
    final_price = to_money(
        base_price * (Decimal(100) - percentage) / Decimal(100),
        settings.price_decimal_places,
    )
    base_price = to_money(base_price, settings.price_decimal_places)

    logger.debug(
        "Base price: %d %s × %s = %s, discount %d%% → %s %s",
        units.unit_count, "h" if units.is_hourly else "d", unit_rate,
        base_price, percentage, final_price, config.currency,
    )

    return PriceBreakdown(
        days=units.days,
        hours=units.hours,
        is_hourly=units.is_hourly,
        unit_rate=unit_rate,
        unit_count=units.unit_count,
        base_price=base_price,
        discount=percentage,
        discount_threshold=applied.threshold if applied else None,
        discount_amount=base_price - final_price,
        final_price=final_price,
        currency=config.currency,
    )
