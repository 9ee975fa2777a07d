"""Shared test fixtures — sample listing configs matching listings/paris_citadine.yaml."""

from __future__ import annotations

from decimal import Decimal

import pytest

from rental_pricing.config import (
    DeliveryOptions,
    DiscountTier,
    EngineSettings,
    InsuranceOptions,
    InsurancePolicy,
    Listing,
    ListingOptionsConfig,
    ListingPricingConfig,
    PickupOptions,
    SecondDriverOptions,
)

from helpers import PARIS


@pytest.fixture
def settings() -> EngineSettings:
    return EngineSettings(hourly_threshold_hours=24, price_decimal_places=2, earth_radius_km=6371.0)


@pytest.fixture
def three_tiers() -> list[DiscountTier]:
    return [
        DiscountTier(threshold=3, percentage=10),
        DiscountTier(threshold=7, percentage=15),
        DiscountTier(threshold=30, percentage=25),
    ]


@pytest.fixture
def daily_pricing() -> ListingPricingConfig:
    return ListingPricingConfig(
        price_per_day=Decimal("50"),
        currency="EUR",
        discount_tiers=[
            DiscountTier(threshold=3, percentage=10),
            DiscountTier(threshold=7, percentage=15),
        ],
    )


@pytest.fixture
def hourly_pricing() -> ListingPricingConfig:
    return ListingPricingConfig(
        price_per_day=Decimal("50"),
        hourly_allowed=True,
        price_per_hour=Decimal("8"),
        discount_tiers=[
            DiscountTier(threshold=3, percentage=10),
            DiscountTier(threshold=7, percentage=15),
        ],
    )


@pytest.fixture
def options_config() -> ListingOptionsConfig:
    return ListingOptionsConfig(
        insurance=InsuranceOptions(
            available=True,
            policies=[
                InsurancePolicy(id="basic", name="Basic cover", price=Decimal("0")),
                InsurancePolicy(id="flat", name="Flat cover", price=Decimal("40")),
                InsurancePolicy(id="premium", name="Premium cover", price_per_day=Decimal("12")),
            ],
        ),
        second_driver=SecondDriverOptions(available=True, price=Decimal("25")),
        delivery=DeliveryOptions(available=True, radius_km=Decimal("50"), price_per_km=Decimal("2")),
        pickup=PickupOptions(
            return_method="different",
            return_max_distance_km=Decimal("30"),
            return_price_per_km=Decimal("1.5"),
        ),
    )


@pytest.fixture
def listing(hourly_pricing: ListingPricingConfig, options_config: ListingOptionsConfig) -> Listing:
    return Listing(
        id="lst_test",
        coordinates=PARIS,
        pricing=hourly_pricing,
        options=options_config,
    )
