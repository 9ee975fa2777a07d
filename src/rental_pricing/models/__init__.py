"""Result models — pricing output contracts."""

from rental_pricing.models.results import (
    AppliedDiscount,
    OptionsBreakdown,
    PriceBreakdown,
    Quote,
    RadiusCheck,
    UnitCount,
)

__all__ = [
    "AppliedDiscount",
    "OptionsBreakdown",
    "PriceBreakdown",
    "Quote",
    "RadiusCheck",
    "UnitCount",
]
