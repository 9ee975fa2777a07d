"""Add-on pricing — insurance, second driver, delivery, flexible return.

Each option contributes independently; anything not enabled contributes 0.
Delivery and flexible return are charged per great-circle km between the
renter's address and the listing (or its configured return point).
"""

from __future__ import annotations

import logging
from decimal import Decimal

from rental_pricing.config.location import Coordinates
from rental_pricing.config.options import (
    DeliveryOptions,
    InsuranceOptions,
    ListingOptionsConfig,
    PickupOptions,
)
from rental_pricing.config.selection import AddressSelection, OptionSelection
from rental_pricing.config.settings import EngineSettings, get_settings
from rental_pricing.engine.geo import distance_between
from rental_pricing.engine.money import to_money
from rental_pricing.errors import ConfigurationError
from rental_pricing.models.results import OptionsBreakdown

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def _flat_or_daily(price: Decimal | None, price_per_day: Decimal | None, days: int) -> Decimal:
    # Absent or zero price means the cover is included
    if price:
        return price
    if price_per_day:
        return price_per_day * days
    return _ZERO


def _insurance_cost(selection: OptionSelection, insurance: InsuranceOptions, days: int) -> Decimal:
    if not selection.insurance or not insurance.available:
        return _ZERO

    if insurance.policies and selection.insurance_policy_id is not None:
        policy = insurance.policy(selection.insurance_policy_id)
        if policy is None:
            raise ConfigurationError(f"unknown insurance policy {selection.insurance_policy_id!r}")
        return _flat_or_daily(policy.price, policy.price_per_day, days)

    return _flat_or_daily(insurance.price, insurance.price_per_day, days)


def _address_point(option: str, chosen: AddressSelection, origin: Coordinates | None) -> tuple[Coordinates, Coordinates]:
    if origin is None:
        raise ConfigurationError(f"{option} enabled but the listing has no fixed coordinates")
    if chosen.coordinates is None:
        raise ConfigurationError(f"{option} enabled without address coordinates")
    return origin, chosen.coordinates


def _delivery_cost(
    chosen: AddressSelection,
    delivery: DeliveryOptions,
    listing_coordinates: Coordinates | None,
    earth_radius_km: float,
) -> tuple[Decimal, float | None]:
    if not chosen.enabled:
        return _ZERO, None

    origin, point = _address_point("delivery", chosen, listing_coordinates)
    distance = distance_between(origin, point, earth_radius_km)
    if delivery.price_per_km > 0:
        return Decimal(repr(distance)) * delivery.price_per_km, distance
    return delivery.price or _ZERO, distance


def _return_cost(
    chosen: AddressSelection,
    pickup: PickupOptions,
    listing_coordinates: Coordinates | None,
    earth_radius_km: float,
) -> tuple[Decimal, float | None]:
    if not chosen.enabled:
        return _ZERO, None

    origin, point = _address_point(
        "flexible return", chosen, pickup.return_coordinates or listing_coordinates,
    )
    distance = distance_between(origin, point, earth_radius_km)
    if pickup.return_price_per_km > 0:
        return Decimal(repr(distance)) * pickup.return_price_per_km, distance
    return pickup.return_price or _ZERO, distance


def price_options(
    selection: OptionSelection,
    config: ListingOptionsConfig,
    listing_coordinates: Coordinates | None,
    days: int,
    settings: EngineSettings | None = None,
) -> OptionsBreakdown:
    """Line-itemised add-on cost for the current selection.

    Raises ``ConfigurationError`` when a distance-priced option is enabled
    but cannot be measured, or when the selected policy does not exist.
    """
    settings = settings or get_settings()
    places = settings.price_decimal_places

    insurance = _insurance_cost(selection, config.insurance, days)

    # One-time fee, not per day
    second_driver = (
        config.second_driver.price
        if selection.second_driver.enabled and config.second_driver.available
        else _ZERO
    )

    delivery, delivery_km = _delivery_cost(
        selection.delivery, config.delivery, listing_coordinates, settings.earth_radius_km,
    )
    flexible_return, return_km = _return_cost(
        selection.flexible_return, config.pickup, listing_coordinates, settings.earth_radius_km,
    )

    items = {
        "insurance": to_money(insurance, places),
        "second_driver": to_money(second_driver, places),
        "delivery": to_money(delivery, places),
        "flexible_return": to_money(flexible_return, places),
    }
    total = sum(items.values(), _ZERO)
    logger.debug("Options: %s → total %s", items, total)

    return OptionsBreakdown(
        **items,
        delivery_distance_km=delivery_km,
        return_distance_km=return_km,
        total=total,
    )


def calculate_options_price(
    selection: OptionSelection,
    config: ListingOptionsConfig,
    listing_coordinates: Coordinates | None,
    days: int,
    settings: EngineSettings | None = None,
) -> Decimal:
    """Total add-on cost.  See ``price_options`` for the line items."""
    return price_options(selection, config, listing_coordinates, days, settings).total
