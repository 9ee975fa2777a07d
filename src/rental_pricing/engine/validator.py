"""Radius gate for delivery and flexible return.

The check runs when the renter picks an address, before the option is
switched on.  ``try_enable_*`` is the validate-then-commit pair: it either
returns a new selection with the option enabled, or raises
``OutOfRangeError`` and leaves the caller's selection untouched.  A
selection with an enabled but out-of-range address is never produced.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Literal

from rental_pricing.config.location import Coordinates
from rental_pricing.config.options import ListingOptionsConfig
from rental_pricing.config.selection import AddressSelection, OptionSelection
from rental_pricing.config.settings import EngineSettings, get_settings
from rental_pricing.engine.geo import EARTH_RADIUS_KM, distance_between
from rental_pricing.errors import ConfigurationError, InputError, OutOfRangeError
from rental_pricing.models.results import RadiusCheck

logger = logging.getLogger(__name__)

AddressOption = Literal["delivery", "flexible_return"]


def _check_radius(
    option: AddressOption,
    address: str,
    coordinates: Coordinates,
    center: Coordinates | None,
    radius_km: Decimal | float,
    earth_radius_km: float,
) -> RadiusCheck:
    if not address or not address.strip():
        raise InputError(f"{option} address must not be blank")
    if center is None:
        raise ConfigurationError(f"{option} needs listing coordinates to check the radius")

    distance = distance_between(center, coordinates, earth_radius_km)
    radius = float(radius_km)
    return RadiusCheck(option=option, ok=distance <= radius, distance_km=distance, radius_km=radius)


def validate_delivery(
    address: str,
    coordinates: Coordinates,
    listing_coordinates: Coordinates | None,
    radius_km: Decimal | float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> RadiusCheck:
    """Is ``coordinates`` within ``radius_km`` of the listing?  Boundary counts as inside."""
    return _check_radius("delivery", address, coordinates, listing_coordinates, radius_km, earth_radius_km)


def validate_flexible_return(
    address: str,
    coordinates: Coordinates,
    return_center: Coordinates | None,
    max_distance_km: Decimal | float,
    earth_radius_km: float = EARTH_RADIUS_KM,
) -> RadiusCheck:
    """Same as ``validate_delivery`` against the return point and its max distance."""
    return _check_radius(
        "flexible_return", address, coordinates, return_center, max_distance_km, earth_radius_km,
    )


def _commit(selection: OptionSelection, option: AddressOption, check: RadiusCheck,
            address: str, coordinates: Coordinates) -> OptionSelection:
    if not check.ok:
        logger.info(
            "Rejected %s address %r: %.1f km > %g km",
            option, address, check.distance_km, check.radius_km,
        )
        raise OutOfRangeError(option, check.distance_km, check.radius_km)

    chosen = AddressSelection(enabled=True, address=address.strip(), coordinates=coordinates)
    return selection.model_copy(update={option: chosen}, deep=True)


def try_enable_delivery(
    selection: OptionSelection,
    address: str,
    coordinates: Coordinates,
    listing_coordinates: Coordinates | None,
    options: ListingOptionsConfig,
    settings: EngineSettings | None = None,
) -> OptionSelection:
    """Return a copy of ``selection`` with delivery enabled at ``address``.

    Raises ``ConfigurationError`` if the listing does not offer delivery,
    ``OutOfRangeError`` if the address is outside the delivery radius.
    Distances use ``settings.earth_radius_km``, as pricing does.
    """
    settings = settings or get_settings()
    if not options.delivery.available:
        raise ConfigurationError("listing does not offer delivery")
    check = validate_delivery(
        address, coordinates, listing_coordinates, options.delivery.radius_km, settings.earth_radius_km,
    )
    return _commit(selection, "delivery", check, address, coordinates)


def try_enable_flexible_return(
    selection: OptionSelection,
    address: str,
    coordinates: Coordinates,
    listing_coordinates: Coordinates | None,
    options: ListingOptionsConfig,
    settings: EngineSettings | None = None,
) -> OptionSelection:
    """Return a copy of ``selection`` with flexible return enabled at ``address``."""
    settings = settings or get_settings()
    pickup = options.pickup
    if not pickup.flexible_return_available:
        raise ConfigurationError("listing only accepts returns at the pickup address")
    check = validate_flexible_return(
        address, coordinates, pickup.return_coordinates or listing_coordinates,
        pickup.return_max_distance_km, settings.earth_radius_km,
    )
    return _commit(selection, "flexible_return", check, address, coordinates)


def disable_delivery(selection: OptionSelection) -> OptionSelection:
    return selection.model_copy(update={"delivery": AddressSelection()}, deep=True)


def disable_flexible_return(selection: OptionSelection) -> OptionSelection:
    return selection.model_copy(update={"flexible_return": AddressSelection()}, deep=True)
