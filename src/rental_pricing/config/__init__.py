"""Configuration models — listing tariff, options, renter selection."""

from rental_pricing.config.location import Coordinates
from rental_pricing.config.pricing import (
    DateRange,
    DiscountTier,
    ListingPricingConfig,
    migrate_legacy_pricing,
)
from rental_pricing.config.options import (
    DeliveryOptions,
    InsuranceOptions,
    InsurancePolicy,
    ListingOptionsConfig,
    PickupOptions,
    SecondDriverOptions,
)
from rental_pricing.config.selection import (
    AddressSelection,
    DriverInfo,
    OptionSelection,
    SecondDriverSelection,
)
from rental_pricing.config.listing import Listing, load_listing
from rental_pricing.config.settings import EngineSettings, get_settings

__all__ = [
    "Coordinates",
    "DateRange",
    "DiscountTier",
    "ListingPricingConfig",
    "migrate_legacy_pricing",
    "DeliveryOptions",
    "InsuranceOptions",
    "InsurancePolicy",
    "ListingOptionsConfig",
    "PickupOptions",
    "SecondDriverOptions",
    "AddressSelection",
    "DriverInfo",
    "OptionSelection",
    "SecondDriverSelection",
    "Listing",
    "load_listing",
    "EngineSettings",
    "get_settings",
]
