"""Result types — the contract between the engine, the API and the UI.

Every result is created fresh per request and never mutated.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict


class _Result(BaseModel):
    model_config = ConfigDict(frozen=True)


# ═══════════════════════════════════════════════════════════════════════════
# Duration & discount
# ═══════════════════════════════════════════════════════════════════════════

class UnitCount(_Result):
    """Billable quantity for a date range."""

    unit_count: int
    """Hours when ``is_hourly``, else days."""

    is_hourly: bool

    hours: int
    """ceil(elapsed hours)."""

    days: int
    """ceil(elapsed / 24h), minimum 1."""


class AppliedDiscount(_Result):
    """The single duration tier that applies to a stay."""

    percentage: int
    threshold: Literal[3, 7, 30]


# ═══════════════════════════════════════════════════════════════════════════
# Base price
# ═══════════════════════════════════════════════════════════════════════════

class PriceBreakdown(_Result):
    """Rental price before add-ons."""

    days: int
    hours: int
    is_hourly: bool

    unit_rate: Decimal
    """price_per_hour when hourly, else price_per_day."""

    unit_count: int

    base_price: Decimal
    """unit_rate × unit_count, unaffected by discount."""

    discount: int
    """Applied percentage (0–100).  0 when no tier qualifies."""

    discount_threshold: Literal[3, 7, 30] | None

    discount_amount: Decimal
    """base_price − final_price."""

    final_price: Decimal
    """base_price × (1 − discount/100), rounded to the currency minor unit."""

    currency: str


# ═══════════════════════════════════════════════════════════════════════════
# Options
# ═══════════════════════════════════════════════════════════════════════════

class OptionsBreakdown(_Result):
    """Line-itemised add-on cost.  Disabled options contribute 0."""

    insurance: Decimal = Decimal("0")
    second_driver: Decimal = Decimal("0")
    delivery: Decimal = Decimal("0")
    flexible_return: Decimal = Decimal("0")

    delivery_distance_km: float | None = None
    return_distance_km: float | None = None

    total: Decimal = Decimal("0")
    """Sum of the four rounded line items."""


class RadiusCheck(_Result):
    """Outcome of a delivery / flexible-return radius check."""

    option: Literal["delivery", "flexible_return"]
    ok: bool
    distance_km: float
    radius_km: float

    @property
    def exceeded_by_km(self) -> float:
        return max(self.distance_km - self.radius_km, 0.0)


# ═══════════════════════════════════════════════════════════════════════════
# Full quote
# ═══════════════════════════════════════════════════════════════════════════

class Quote(_Result):
    """Everything a booking surface renders: rental price, add-ons, total."""

    price: PriceBreakdown
    options: OptionsBreakdown
    total: Decimal
    """price.final_price + options.total."""

    currency: str
