"""Host-defined add-ons — insurance, second driver, delivery, flexible return."""

from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from rental_pricing.config.location import Coordinates


class _OptionsModel(BaseModel):
    """Accepts both the camelCase listing JSON and snake_case keyword args."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class InsurancePolicy(_OptionsModel):
    """One named policy a renter can pick.  Priced flat or per day."""

    id: str = Field(description="Policy identifier")
    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None)
    price: Decimal | None = Field(default=None, ge=0, description="Flat price for the whole booking")
    price_per_day: Decimal | None = Field(default=None, ge=0, description="Price per billed day")


class InsuranceOptions(_OptionsModel):
    """Insurance offer.

    Either a list of ``policies`` or, for listings created before policies
    existed, a single legacy policy priced by ``price`` / ``price_per_day``.
    """

    available: bool = Field(default=False)
    price: Decimal | None = Field(default=None, ge=0, description="Legacy single-policy flat price")
    price_per_day: Decimal | None = Field(default=None, ge=0, description="Legacy single-policy daily price")
    description: str | None = Field(default=None)
    use_platform_insurance: bool = Field(default=False, description="Policy provided by the platform, not the host")
    policies: list[InsurancePolicy] = Field(default_factory=list)

    def policy(self, policy_id: str) -> InsurancePolicy | None:
        for p in self.policies:
            if p.id == policy_id:
                return p
        return None


class SecondDriverOptions(_OptionsModel):
    available: bool = Field(default=False)
    price: Decimal = Field(default=Decimal("0"), ge=0, description="One-time fee, not multiplied by days")


class DeliveryOptions(_OptionsModel):
    """Delivery of the vehicle to the renter's address, within a radius."""

    available: bool = Field(default=False)
    radius_km: Decimal = Field(
        default=Decimal("0"), ge=0,
        description="Max distance from the listing. 0 = only at the listing itself.",
    )
    price_per_km: Decimal = Field(default=Decimal("0"), ge=0, description="Charged on great-circle distance")
    price: Decimal | None = Field(
        default=None, ge=0,
        description="Legacy flat fee, used only when price_per_km is 0",
    )


class PickupOptions(_OptionsModel):
    """Return policy.  ``different`` enables flexible return to another address."""

    return_method: Literal["same", "different"] = Field(default="same")
    return_address: str | None = Field(default=None)
    return_max_distance_km: Decimal = Field(default=Decimal("0"), ge=0)
    return_price_per_km: Decimal = Field(default=Decimal("0"), ge=0)
    return_price: Decimal | None = Field(
        default=None, ge=0,
        description="Legacy flat fee, used only when return_price_per_km is 0",
    )
    return_coordinates: Coordinates | None = Field(
        default=None,
        description="Centre of the return radius. Defaults to the listing coordinates.",
    )

    @model_validator(mode="before")
    @classmethod
    def _migrate_return_point(cls, data: Any) -> Any:
        # v1 stored the return point as two flat keys
        if not isinstance(data, dict) or "returnLat" not in data:
            return data
        data = dict(data)
        lat, lng = data.pop("returnLat"), data.pop("returnLng", None)
        if lat is not None and lng is not None:
            data.setdefault("return_coordinates", {"lat": lat, "lng": lng})
        return data

    @property
    def flexible_return_available(self) -> bool:
        return self.return_method == "different"


class ListingOptionsConfig(_OptionsModel):
    """All add-on settings for one listing."""

    insurance: InsuranceOptions = Field(default_factory=InsuranceOptions)
    second_driver: SecondDriverOptions = Field(default_factory=SecondDriverOptions)
    delivery: DeliveryOptions = Field(default_factory=DeliveryOptions)
    pickup: PickupOptions = Field(default_factory=PickupOptions)
