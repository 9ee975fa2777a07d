"""Engine — pure, synchronous pricing logic."""

from rental_pricing.engine.geo import distance_km, distance_between
from rental_pricing.engine.duration import compute_units
from rental_pricing.engine.discount import resolve_discount
from rental_pricing.engine.base_price import calculate_base_price
from rental_pricing.engine.options_price import calculate_options_price, price_options
from rental_pricing.engine.validator import (
    disable_delivery,
    disable_flexible_return,
    try_enable_delivery,
    try_enable_flexible_return,
    validate_delivery,
    validate_flexible_return,
)
from rental_pricing.engine.quote import build_quote

__all__ = [
    "distance_km",
    "distance_between",
    "compute_units",
    "resolve_discount",
    "calculate_base_price",
    "calculate_options_price",
    "price_options",
    "validate_delivery",
    "validate_flexible_return",
    "try_enable_delivery",
    "try_enable_flexible_return",
    "disable_delivery",
    "disable_flexible_return",
    # Orchestration
    "build_quote",
]
