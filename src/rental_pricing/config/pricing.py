"""Listing tariff — daily/hourly rates and duration discount tiers.

Listing JSON in the marketplace grew several generations of keys.  They are
normalised here, once, by ``migrate_legacy_pricing`` before validation, so
the engine only ever sees ``discount_tiers``.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

PRICING_CONFIG_VERSION = 2

TierThreshold = Literal[3, 7, 30]

# Flat v1 keys → tier threshold (days)
_LEGACY_TIER_KEYS: dict[str, int] = {
    "durationDiscount3Days": 3,
    "durationDiscount7Days": 7,
    "durationDiscount30Days": 30,
    "duration_discount_3_days": 3,
    "duration_discount_7_days": 7,
    "duration_discount_30_days": 30,
}

# Deprecated v1 keys with no v2 meaning
_DROPPED_KEYS = ("chauffeurDaily", "chauffeur_daily", "priceWeekend", "price_weekend")


def migrate_legacy_pricing(data: dict[str, Any]) -> dict[str, Any]:
    """Rewrite a v1 pricing blob into the v2 shape.

    v1 stored one flat ``durationDiscountNDays`` key per tier.  v2 stores a
    ``discount_tiers`` list.  Explicit tiers win over flat keys for the same
    threshold.  The input dict is not modified.
    """
    migrated = dict(data)

    for key in _DROPPED_KEYS:
        if migrated.pop(key, None) is not None:
            logger.debug("Dropped deprecated pricing key %r", key)

    explicit = migrated.get("discount_tiers", migrated.get("discountTiers")) or []
    tiers: list[Any] = list(explicit)
    seen = {t["threshold"] if isinstance(t, dict) else t.threshold for t in tiers}

    for key, threshold in _LEGACY_TIER_KEYS.items():
        if key not in migrated:
            continue
        percentage = migrated.pop(key)
        if percentage is None or threshold in seen:
            continue
        tiers.append({"threshold": threshold, "percentage": percentage})
        seen.add(threshold)

    migrated.pop("discountTiers", None)
    migrated["discount_tiers"] = tiers
    migrated["version"] = PRICING_CONFIG_VERSION
    return migrated


class DiscountTier(BaseModel):
    """One duration bracket: stays of ``threshold`` days or more get ``percentage`` off."""

    model_config = ConfigDict(frozen=True)

    threshold: TierThreshold = Field(description="Minimum stay in days (3, 7 or 30)")
    percentage: int | None = Field(
        default=None, ge=0, le=100,
        description="Percent off the base price. None or 0 = tier disabled.",
    )

    @property
    def active(self) -> bool:
        return self.percentage is not None and self.percentage > 0


class ListingPricingConfig(BaseModel):
    """Host-defined tariff for one listing, supplied per pricing request."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    version: Literal[2] = Field(default=PRICING_CONFIG_VERSION, description="Config schema version")

    # --- Rates ---
    price_per_day: Decimal | None = Field(default=None, ge=0, description="Reference daily rate")
    currency: str = Field(
        default="EUR", pattern=r"^[A-Za-z]{3}$",
        description="ISO 4217 code. Informational only, no conversion.",
    )
    hourly_allowed: bool = Field(default=False, description="Allow sub-day hourly billing")
    price_per_hour: Decimal | None = Field(default=None, ge=0, description="Hourly rate")

    # --- Duration discounts ---
    discount_tiers: list[DiscountTier] = Field(
        default_factory=list, max_length=3,
        description="Up to one tier per threshold. Highest qualifying tier wins; tiers never stack.",
    )

    @model_validator(mode="before")
    @classmethod
    def _migrate(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        # Non-integer versions are left for field validation to reject
        version = data.get("version", 1)
        if isinstance(version, int) and version < PRICING_CONFIG_VERSION:
            return migrate_legacy_pricing(data)
        return data

    @field_validator("currency")
    @classmethod
    def _upper_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("discount_tiers")
    @classmethod
    def _unique_thresholds(cls, v: list[DiscountTier]) -> list[DiscountTier]:
        thresholds = [t.threshold for t in v]
        if len(thresholds) != len(set(thresholds)):
            raise ValueError(f"duplicate discount tier thresholds: {thresholds}")
        return v

    def tier_for(self, threshold: int) -> DiscountTier | None:
        """Return the configured tier for ``threshold`` (active or not)."""
        for tier in self.discount_tiers:
            if tier.threshold == threshold:
                return tier
        return None


class DateRange(BaseModel):
    """Requested rental window.

    ``end > start`` is checked by the duration calculator, not here, so that
    a bad range surfaces as an ``InputError`` from the engine.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime = Field(description="Pickup instant")
    end: datetime = Field(description="Return instant")
